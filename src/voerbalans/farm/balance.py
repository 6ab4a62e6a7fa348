"""Complete annual farm balance in one call."""

from dataclasses import dataclass
from datetime import date

from voerbalans.core.standards import STANDARD_CONCENTRATE, ConcentrateStandard
from voerbalans.farm.annual import (
    AnnualDemand,
    AnnualFarmPlan,
    AnnualSupply,
    AnnualVemSupply,
    DeficitResult,
    VemGapResult,
    calculate_annual_demand,
    calculate_annual_supply,
    calculate_annual_vem_demand,
    calculate_annual_vem_supply,
    calculate_deficit,
    calculate_depletion_date,
    calculate_vem_gap,
)
from voerbalans.farm.purchase import PurchaseRecommendation, recommend_purchase


@dataclass(frozen=True)
class AnnualBalance:
    plan: AnnualFarmPlan
    supply: AnnualSupply
    demand: AnnualDemand
    deficit: DeficitResult
    depletion_date: date | None
    recommendation: PurchaseRecommendation | None
    vem_supply: AnnualVemSupply
    vem_demand: AnnualDemand
    vem_gap: VemGapResult


def calculate_annual_balance(
    plan: AnnualFarmPlan,
    today: date | None = None,
    concentrate: ConcentrateStandard = STANDARD_CONCENTRATE,
) -> AnnualBalance:
    """
    Roughage and energy balance of a crop plan against the herd.

    Args:
        plan: Crop plan and herd
        today: Start date for the depletion projection (default: today)
        concentrate: Concentrate used to close the VEM gap

    Returns:
        AnnualBalance with dry matter and VEM results and a purchase
        recommendation when roughage runs short
    """
    supply = calculate_annual_supply(plan)
    demand = calculate_annual_demand(plan)
    deficit = calculate_deficit(supply.total_kg_ds, demand.total)

    vem_supply = calculate_annual_vem_supply(plan)
    vem_demand = calculate_annual_vem_demand(plan)

    return AnnualBalance(
        plan=plan,
        supply=supply,
        demand=demand,
        deficit=deficit,
        depletion_date=calculate_depletion_date(supply.total_kg_ds, demand.daily, today),
        recommendation=recommend_purchase(deficit.deficit, plan.quality_tier, supply),
        vem_supply=vem_supply,
        vem_demand=vem_demand,
        vem_gap=calculate_vem_gap(vem_demand.total, vem_supply.total_vem, concentrate),
    )
