"""Ration supply, balance and concentrate gap.

This module provides:
- Status classifiers for coverage, structure, OEB and intake (classify.py)
- Nutrient supply aggregation over ration entries (supply.py)
- Supply versus requirement balance and the ration pipeline (balance.py)
- Concentrate gap with substitution, base milk support and cost (gap.py)
"""

from voerbalans.ration.balance import (
    IntakeResult,
    NutrientBalance,
    NutrientBalanceResult,
    RationBalance,
    StructureValueResult,
    balance_ration,
    calculate_nutrient_balance,
    calculate_structure_value,
    check_intake,
)
from voerbalans.ration.classify import (
    CoverageStatus,
    IntakeStatus,
    OebDensityStatus,
    OebStatus,
    StructureStatus,
    classify_coverage,
    classify_oeb_density,
    classify_oeb_ration,
    classify_structure,
    coverage_percent,
)
from voerbalans.ration.gap import (
    BaseMilkSupportResult,
    ConcentrateCostResult,
    ConcentrateGapResult,
    calculate_base_milk_support,
    calculate_concentrate_cost,
    calculate_concentrate_gap,
    calculate_roughage_displacement,
    calculate_straw_needed,
)
from voerbalans.ration.supply import (
    FeedSupply,
    NutrientSupply,
    calculate_feed_supply,
    calculate_total_supply,
)

__all__ = [
    # supply
    "FeedSupply",
    "NutrientSupply",
    "calculate_feed_supply",
    "calculate_total_supply",
    # classify
    "CoverageStatus",
    "StructureStatus",
    "OebStatus",
    "OebDensityStatus",
    "IntakeStatus",
    "coverage_percent",
    "classify_coverage",
    "classify_structure",
    "classify_oeb_ration",
    "classify_oeb_density",
    # balance
    "NutrientBalance",
    "NutrientBalanceResult",
    "StructureValueResult",
    "IntakeResult",
    "RationBalance",
    "calculate_structure_value",
    "calculate_nutrient_balance",
    "check_intake",
    "balance_ration",
    # gap
    "BaseMilkSupportResult",
    "ConcentrateCostResult",
    "ConcentrateGapResult",
    "calculate_base_milk_support",
    "calculate_concentrate_cost",
    "calculate_concentrate_gap",
    "calculate_roughage_displacement",
    "calculate_straw_needed",
]
