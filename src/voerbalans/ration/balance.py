"""
Supply versus requirement balance of a ration.

Combines the aggregated supply with an animal requirement into per-nutrient
balances, checks dry matter and intake capacity, and flags whether the
practical 95% coverage target for VEM and DVE is met.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from enum import Enum

from voerbalans.animal.requirements import (
    RequirementResult,
    calculate_requirements,
    requirement_from_profile,
)
from voerbalans.animal.state import AnimalProfile, PhysiologicalState
from voerbalans.animal.voc import VocResult, calculate_voc
from voerbalans.core.standards import (
    COVERAGE,
    CVB_INTAKE,
    OEB_RATION,
    STRUCTURE,
    CoverageThresholds,
    IntakeCapacityStandard,
    OebRationThresholds,
    StructureThresholds,
)
from voerbalans.feeds.models import FeedDefinition, FeedInput
from voerbalans.ration.classify import (
    IntakeStatus,
    StructureStatus,
    classify_coverage,
    classify_oeb_ration,
    classify_structure,
    coverage_percent,
)
from voerbalans.ration.supply import NutrientSupply, calculate_total_supply

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Result Types
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class NutrientBalance:
    """Supply against requirement for one nutrient."""

    nutrient: str
    supply: float
    requirement: float
    gap: float  # supply - requirement
    coverage_percent: float | None
    status: Enum


@dataclass(frozen=True)
class StructureValueResult:
    total: float
    per_kg_ds: float
    minimum_per_kg_ds: float
    status: StructureStatus


@dataclass(frozen=True)
class IntakeResult:
    """Ration filling value against intake capacity."""

    total_vw: float
    capacity_vw: float
    utilization_percent: float | None
    status: IntakeStatus
    message: str


@dataclass(frozen=True)
class NutrientBalanceResult:
    vem: NutrientBalance
    dve: NutrientBalance
    oeb: NutrientBalance
    structure: NutrientBalance
    is_target_met: bool
    dry_matter: NutrientBalance | None = None
    intake: IntakeResult | None = None


# -----------------------------------------------------------------------------
# Balance Calculation
# -----------------------------------------------------------------------------


def _coverage_balance(
    nutrient: str, supply: float, requirement: float, thresholds: CoverageThresholds
) -> NutrientBalance:
    coverage = coverage_percent(supply, requirement)
    return NutrientBalance(
        nutrient=nutrient,
        supply=supply,
        requirement=requirement,
        gap=supply - requirement,
        coverage_percent=coverage,
        status=classify_coverage(coverage, thresholds),
    )


def calculate_structure_value(
    supply: NutrientSupply,
    thresholds: StructureThresholds = STRUCTURE,
) -> StructureValueResult:
    per_kg = supply.structure_value_per_kg_ds
    return StructureValueResult(
        total=supply.structure_value,
        per_kg_ds=per_kg,
        minimum_per_kg_ds=thresholds.minimum_per_kg_ds,
        status=classify_structure(per_kg, thresholds),
    )


def check_intake(
    supply: NutrientSupply,
    voc: VocResult,
    standard: IntakeCapacityStandard = CVB_INTAKE,
) -> IntakeResult:
    """
    Compare the ration's filling value with the cow's intake capacity.

    Args:
        supply: Aggregated ration supply (filling_value in VW)
        voc: Intake capacity of the cow
        standard: Saturation thresholds

    Returns:
        IntakeResult with utilization percent and status
    """
    utilization = coverage_percent(supply.filling_value, voc.voc)
    if utilization is None or utilization <= standard.warning_percent:
        status = IntakeStatus.OK
        message = "Ration is physically feasible."
    elif utilization <= standard.exceeded_percent:
        status = IntakeStatus.WARNING
        message = "Ration is on the high side; some cows may struggle to eat it."
    else:
        status = IntakeStatus.EXCEEDED
        message = "Ration exceeds intake capacity. Replace high-filling roughage with maize silage or concentrate."
    return IntakeResult(
        total_vw=supply.filling_value,
        capacity_vw=voc.voc,
        utilization_percent=utilization,
        status=status,
        message=message,
    )


def calculate_nutrient_balance(
    supply: NutrientSupply,
    vem_requirement: float,
    dve_requirement: float,
    max_dry_matter_kg: float | None = None,
    voc: VocResult | None = None,
    coverage: CoverageThresholds = COVERAGE,
    structure: StructureThresholds = STRUCTURE,
    oeb: OebRationThresholds = OEB_RATION,
    intake: IntakeCapacityStandard = CVB_INTAKE,
) -> NutrientBalanceResult:
    """
    Classify a ration's supply against an animal's requirement.

    Args:
        supply: Aggregated ration supply
        vem_requirement: VEM/day
        dve_requirement: g DVE/day
        max_dry_matter_kg: Maximum DS intake; adds a dry matter check when given
        voc: Intake capacity; adds an intake check when given
        coverage, structure, oeb, intake: Classification thresholds

    Returns:
        NutrientBalanceResult
    """
    vem_balance = _coverage_balance("vem", supply.vem, vem_requirement, coverage)
    dve_balance = _coverage_balance("dve", supply.dve, dve_requirement, coverage)

    oeb_balance = NutrientBalance(
        nutrient="oeb",
        supply=supply.oeb,
        requirement=0.0,
        gap=supply.oeb,
        coverage_percent=None,
        status=classify_oeb_ration(supply.oeb, oeb),
    )

    sw = calculate_structure_value(supply, structure)
    structure_balance = NutrientBalance(
        nutrient="structure_value",
        supply=sw.per_kg_ds,
        requirement=sw.minimum_per_kg_ds,
        gap=sw.per_kg_ds - sw.minimum_per_kg_ds,
        coverage_percent=coverage_percent(sw.per_kg_ds, sw.minimum_per_kg_ds),
        status=sw.status,
    )

    dry_matter_balance = None
    if max_dry_matter_kg is not None:
        dm_status = IntakeStatus.OK if supply.dry_matter_kg <= max_dry_matter_kg else IntakeStatus.EXCEEDED
        dry_matter_balance = NutrientBalance(
            nutrient="dry_matter",
            supply=supply.dry_matter_kg,
            requirement=max_dry_matter_kg,
            gap=supply.dry_matter_kg - max_dry_matter_kg,
            coverage_percent=coverage_percent(supply.dry_matter_kg, max_dry_matter_kg),
            status=dm_status,
        )

    target = coverage.target_met
    is_target_met = (
        vem_balance.coverage_percent is not None
        and dve_balance.coverage_percent is not None
        and vem_balance.coverage_percent >= target
        and dve_balance.coverage_percent >= target
    )

    return NutrientBalanceResult(
        vem=vem_balance,
        dve=dve_balance,
        oeb=oeb_balance,
        structure=structure_balance,
        is_target_met=is_target_met,
        dry_matter=dry_matter_balance,
        intake=check_intake(supply, voc, intake) if voc is not None else None,
    )


# -----------------------------------------------------------------------------
# Ration Pipeline
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class RationBalance:
    """Supply, requirement and balance of one ration for one animal."""

    supply: NutrientSupply
    requirement: RequirementResult
    balance: NutrientBalanceResult
    voc: VocResult | None = None


def balance_ration(
    inputs: Iterable[FeedInput],
    catalog: Mapping[str, FeedDefinition],
    animal: PhysiologicalState | AnimalProfile,
    grazing: bool | None = None,
    coverage: CoverageThresholds = COVERAGE,
    structure: StructureThresholds = STRUCTURE,
) -> RationBalance | None:
    """
    Run supply, requirement and balance for a ration in one call.

    Args:
        inputs: Ration entries, matched to catalog feeds by name
        catalog: Feed definitions by name
        animal: Physiological state (requirement from milk recording) or a
            reference profile (fixed targets)
        grazing: Grazing override; defaults to the state's own flag, or False
            for profiles
        coverage: Coverage classification thresholds
        structure: Structure value thresholds

    Returns:
        RationBalance, or None while the catalog is empty
    """
    if not catalog:
        return None

    entries = []
    for feed_input in inputs:
        feed = catalog.get(feed_input.feed_name)
        if feed is None:
            logger.debug("Skipping unknown feed %r", feed_input.feed_name)
            continue
        entries.append((feed, feed_input))

    voc = None
    if isinstance(animal, PhysiologicalState):
        if grazing is not None and grazing != animal.grazing:
            animal = replace(animal, grazing=grazing)
        grazing = animal.grazing
        requirement = calculate_requirements(animal)
        voc = calculate_voc(animal.parity, animal.days_in_milk, animal.days_pregnant)
        max_dm = voc.voc_kg_ds
    else:
        grazing = bool(grazing)
        requirement = requirement_from_profile(animal, grazing)
        max_dm = animal.max_dry_matter_kg

    supply = calculate_total_supply(entries, grazing=grazing)
    balance = calculate_nutrient_balance(
        supply,
        requirement.vem,
        requirement.dve,
        max_dry_matter_kg=max_dm,
        voc=voc,
        coverage=coverage,
        structure=structure,
    )
    return RationBalance(supply=supply, requirement=requirement, balance=balance, voc=voc)
