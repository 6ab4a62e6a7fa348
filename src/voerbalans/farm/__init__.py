"""Annual farm roughage balance.

This module provides:
- Crop plan supply, herd demand, deficit and VEM gap (annual.py)
- Byproduct purchase recommendation (purchase.py)
- The combined annual balance (balance.py)
"""

from voerbalans.farm.annual import (
    AnnualDemand,
    AnnualFarmPlan,
    AnnualSupply,
    AnnualVemSupply,
    DeficitResult,
    DemandLine,
    VemGapResult,
    calculate_annual_demand,
    calculate_annual_supply,
    calculate_annual_vem_demand,
    calculate_annual_vem_supply,
    calculate_deficit,
    calculate_depletion_date,
    calculate_vem_gap,
)
from voerbalans.farm.balance import AnnualBalance, calculate_annual_balance
from voerbalans.farm.purchase import PurchaseRecommendation, crop_mix_quality, recommend_purchase

__all__ = [
    # annual
    "AnnualFarmPlan",
    "AnnualSupply",
    "AnnualVemSupply",
    "AnnualDemand",
    "DemandLine",
    "DeficitResult",
    "VemGapResult",
    "calculate_annual_supply",
    "calculate_annual_vem_supply",
    "calculate_annual_demand",
    "calculate_annual_vem_demand",
    "calculate_deficit",
    "calculate_vem_gap",
    "calculate_depletion_date",
    # purchase
    "PurchaseRecommendation",
    "crop_mix_quality",
    "recommend_purchase",
    # balance
    "AnnualBalance",
    "calculate_annual_balance",
]
