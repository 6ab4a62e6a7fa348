"""
Concentrate gap of a roughage ration.

When the base ration falls short of the requirement, the shortfall is
expressed in kg DS of a standard concentrate. Concentrate displaces roughage
intake (substitution), so the structure value of the ration is re-checked
after the concentrate is added.

The milk a base ration supports on its own and the cost of the concentrate
top-up are reported alongside.

References:
-----------
[1] CVB (2025). Substitution of roughage by concentrate, 0.40-0.50 kg DS
    displaced per kg DS concentrate.
"""

import math
from dataclasses import dataclass

from voerbalans.animal.requirements import maintenance_vem
from voerbalans.core.errors import InvalidInputError
from voerbalans.core.standards import (
    CVB_ENERGY,
    CVB_PROTEIN,
    DAYS_PER_YEAR,
    STANDARD_CONCENTRATE,
    STRUCTURE,
    ConcentrateStandard,
    EnergyStandard,
    ProteinStandard,
    StructureThresholds,
)
from voerbalans.ration.classify import StructureStatus, classify_structure
from voerbalans.ration.supply import NutrientSupply

# Typical structure value of straw, used to size a structure correction
STRAW_SW_PER_KG_DS = 2.0

# Reference cow for the base ration milk support
DEFAULT_COW_WEIGHT_KG = 650.0

# Feeding month used for cost projections
DAYS_PER_MONTH = 30


@dataclass(frozen=True)
class ConcentrateGapResult:
    gap_vem: float  # shortfall, never negative
    gap_dve: float  # grams, never negative
    gap_milk_kg: float  # VEM shortfall expressed as kg FPCM
    limiting_nutrient: str  # "vem", "dve" or "none"
    concentrate_kg_ds: float
    roughage_displaced_kg_ds: float
    final_dry_matter_kg: float
    final_vem: float
    final_dve: float
    final_sw_per_kg_ds: float
    structure_status: StructureStatus
    straw_needed_kg_ds: float


def calculate_roughage_displacement(concentrate_kg_ds: float, substitution_rate: float) -> float:
    """Roughage intake (kg DS) displaced by concentrate."""
    if concentrate_kg_ds <= 0:
        return 0.0
    if not 0 <= substitution_rate <= 1:
        raise ValueError(f"substitution_rate must be between 0 and 1, got {substitution_rate}")
    return concentrate_kg_ds * substitution_rate


def calculate_straw_needed(sw_deficit: float, total_intake_kg_ds: float, straw_sw: float = STRAW_SW_PER_KG_DS) -> float:
    """
    Approximate kg DS straw that lifts SW/kg DS by sw_deficit.

    Adding straw also raises total intake, hence the (straw_sw - deficit) divisor.
    """
    if sw_deficit <= 0:
        return 0.0
    return max(0.0, sw_deficit * total_intake_kg_ds / (straw_sw - sw_deficit))


def calculate_concentrate_gap(
    supply: NutrientSupply,
    vem_requirement: float,
    dve_requirement: float,
    concentrate: ConcentrateStandard = STANDARD_CONCENTRATE,
    structure: StructureThresholds = STRUCTURE,
    energy: EnergyStandard = CVB_ENERGY,
) -> ConcentrateGapResult:
    """
    Express a ration's VEM/DVE shortfall as standard concentrate.

    The limiting nutrient is the one needing the most concentrate to close.
    Displaced intake comes out of roughage at the ration's own nutrient density.

    Args:
        supply: Supply of the base (roughage) ration
        vem_requirement: VEM/day
        dve_requirement: g DVE/day
        concentrate: Reference concentrate and substitution rate
        structure: Structure value thresholds
        energy: Energy standard (VEM per kg FPCM for the milk equivalent)

    Returns:
        ConcentrateGapResult with the concentrate amount and the ration after substitution
    """
    gap_vem = max(0.0, vem_requirement - supply.vem)
    gap_dve = max(0.0, dve_requirement - supply.dve)

    for_vem = gap_vem / concentrate.vem_per_kg_ds
    for_dve = gap_dve / concentrate.dve_per_kg_ds
    if gap_vem <= 0 and gap_dve <= 0:
        limiting = "none"
        concentrate_kg = 0.0
    elif for_vem >= for_dve:
        limiting = "vem"
        concentrate_kg = for_vem
    else:
        limiting = "dve"
        concentrate_kg = for_dve

    roughage_kg = supply.dry_matter_by_category.get("roughage", supply.dry_matter_kg)
    displaced = min(roughage_kg, calculate_roughage_displacement(concentrate_kg, concentrate.substitution_rate))

    # Displaced roughage leaves at the ration's average density
    if supply.dry_matter_kg > 0:
        share = displaced / supply.dry_matter_kg
    else:
        share = 0.0

    final_dm = supply.dry_matter_kg - displaced + concentrate_kg
    final_vem = supply.vem * (1 - share) + concentrate_kg * concentrate.vem_per_kg_ds
    final_dve = supply.dve * (1 - share) + concentrate_kg * concentrate.dve_per_kg_ds
    final_sw = supply.structure_value * (1 - share) + concentrate_kg * concentrate.structure_value_per_kg_ds
    final_sw_per_kg = final_sw / final_dm if final_dm > 0 else 0.0

    return ConcentrateGapResult(
        gap_vem=gap_vem,
        gap_dve=gap_dve,
        gap_milk_kg=gap_vem / energy.vem_per_kg_fpcm,
        limiting_nutrient=limiting,
        concentrate_kg_ds=concentrate_kg,
        roughage_displaced_kg_ds=displaced,
        final_dry_matter_kg=final_dm,
        final_vem=final_vem,
        final_dve=final_dve,
        final_sw_per_kg_ds=final_sw_per_kg,
        structure_status=classify_structure(final_sw_per_kg, structure),
        straw_needed_kg_ds=calculate_straw_needed(structure.minimum_per_kg_ds - final_sw_per_kg, final_dm),
    )


# -----------------------------------------------------------------------------
# Base Ration Milk Support
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class BaseMilkSupportResult:
    total_vem: float
    total_dve: float  # grams
    total_structure_value: float
    maintenance_vem: float
    maintenance_dve: float  # grams
    production_vem: float  # left after maintenance, never negative
    production_dve: float  # grams, never negative
    milk_support_kg: float  # kg FPCM the production VEM pays for
    sw_per_kg_ds: float
    structure_status: StructureStatus

    @property
    def is_structure_safe(self) -> bool:
        return self.structure_status is StructureStatus.OK


def calculate_base_milk_support(
    supply: NutrientSupply,
    weight_kg: float = DEFAULT_COW_WEIGHT_KG,
    energy: EnergyStandard = CVB_ENERGY,
    protein: ProteinStandard = CVB_PROTEIN,
    structure: StructureThresholds = STRUCTURE,
) -> BaseMilkSupportResult:
    """
    Milk production a roughage base ration supports on its own.

    Maintenance of a lactating cow is taken off the ration's VEM and DVE
    first. The VEM that remains is expressed as kg FPCM, since energy is
    usually the limiting nutrient of a roughage ration.

    Args:
        supply: Supply of the base (roughage) ration
        weight_kg: Body weight of the cow
        energy: Energy standard (maintenance and VEM per kg FPCM)
        protein: Protein standard (DVE maintenance)
        structure: Structure value thresholds for the safety check

    Returns:
        BaseMilkSupportResult

    Raises:
        InvalidInputError: If weight_kg is not a positive number
    """
    if not math.isfinite(weight_kg) or weight_kg <= 0:
        raise InvalidInputError("weight_kg", weight_kg, "must be > 0")

    vem_maintenance = maintenance_vem(weight_kg, lactating=True, standard=energy)
    dve_maintenance = protein.maintenance_base + protein.maintenance_per_kg_bw * weight_kg
    production_vem = max(0.0, supply.vem - vem_maintenance)
    sw_per_kg = supply.structure_value_per_kg_ds

    return BaseMilkSupportResult(
        total_vem=supply.vem,
        total_dve=supply.dve,
        total_structure_value=supply.structure_value,
        maintenance_vem=vem_maintenance,
        maintenance_dve=dve_maintenance,
        production_vem=production_vem,
        production_dve=max(0.0, supply.dve - dve_maintenance),
        milk_support_kg=production_vem / energy.vem_per_kg_fpcm,
        sw_per_kg_ds=sw_per_kg,
        structure_status=classify_structure(sw_per_kg, structure),
    )


# -----------------------------------------------------------------------------
# Concentrate Cost
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ConcentrateCostResult:
    daily_cost_per_cow: float
    daily_cost_total: float
    monthly_cost_total: float  # 30-day feeding month
    annual_cost_total: float


def calculate_concentrate_cost(
    concentrate_kg_ds: float,
    cows: int = 1,
    price_per_ton_ds: float = STANDARD_CONCENTRATE.price_per_ton_ds,
) -> ConcentrateCostResult:
    """
    Cost of feeding concentrate to a group of cows.

    Args:
        concentrate_kg_ds: Concentrate per cow per day (kg DS)
        cows: Number of cows in the group
        price_per_ton_ds: Concentrate price per tonne DS

    Returns:
        ConcentrateCostResult; zero cost for a non-positive amount

    Raises:
        InvalidInputError: If cows is negative or price_per_ton_ds is not a
            non-negative number
    """
    if isinstance(cows, bool) or not isinstance(cows, int) or cows < 0:
        raise InvalidInputError("cows", cows, "must be an integer >= 0")
    if not math.isfinite(price_per_ton_ds) or price_per_ton_ds < 0:
        raise InvalidInputError("price_per_ton_ds", price_per_ton_ds, "must be >= 0")

    per_cow = max(0.0, concentrate_kg_ds) * price_per_ton_ds / 1000
    daily = per_cow * cows
    return ConcentrateCostResult(
        daily_cost_per_cow=per_cow,
        daily_cost_total=daily,
        monthly_cost_total=daily * DAYS_PER_MONTH,
        annual_cost_total=daily * DAYS_PER_YEAR,
    )
