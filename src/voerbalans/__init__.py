"""Dairy cattle nutrient requirement and feed balance engine.

This package derives an animal's energy (VEM) and protein (DVE) requirement,
aggregates a ration's nutrient supply, classifies the balance, assesses
roughage quality and projects a farm's annual roughage sufficiency.

Subpackages:
- voerbalans.core: Reference standards, configuration, units, logging, errors
- voerbalans.feeds: Feed definitions, dry matter normalization, quality assessment
- voerbalans.animal: Requirement calculator and intake capacity
- voerbalans.ration: Supply aggregation, balance classification, concentrate gap
- voerbalans.farm: Annual farm balance and purchase recommendation
- voerbalans.data: JSON feed and profile catalog
"""

# Re-export common items for convenience
from voerbalans.animal import (
    AnimalProfile,
    PhysiologicalState,
    calculate_fpcm,
    calculate_requirements,
    calculate_voc,
    requirement_from_profile,
)
from voerbalans.core import InvalidInputError, settings
from voerbalans.farm import AnnualFarmPlan, calculate_annual_balance
from voerbalans.feeds import Basis, FeedDefinition, FeedInput, assess_feed_quality, to_dry_matter_kg
from voerbalans.ration import (
    balance_ration,
    calculate_concentrate_gap,
    calculate_nutrient_balance,
    calculate_total_supply,
)

__all__ = [
    "settings",
    "InvalidInputError",
    # feeds
    "Basis",
    "FeedDefinition",
    "FeedInput",
    "to_dry_matter_kg",
    "assess_feed_quality",
    # animal
    "AnimalProfile",
    "PhysiologicalState",
    "calculate_fpcm",
    "calculate_requirements",
    "requirement_from_profile",
    "calculate_voc",
    # ration
    "calculate_total_supply",
    "calculate_nutrient_balance",
    "calculate_concentrate_gap",
    "balance_ration",
    # farm
    "AnnualFarmPlan",
    "calculate_annual_balance",
]

__version__ = "0.1.0"
