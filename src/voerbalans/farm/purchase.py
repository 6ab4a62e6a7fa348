"""
Purchase recommendation for a roughage shortage.

The byproduct is chosen from the structure value and OEB of the farm's own
crop mix, weighted by each crop's share of the harvested tonnage:

1. Low structure and negative OEB -> brewers' grains (adds both)
2. Strongly negative OEB -> soybean hulls (protein rich)
3. Otherwise -> extra maize silage (cheapest general roughage)
"""

import logging
import math
from dataclasses import dataclass

from voerbalans.core.standards import (
    BYPRODUCTS,
    PURCHASE_POLICY,
    QUALITY_PRESETS,
    Byproduct,
    PurchasePolicy,
    QualityTier,
)
from voerbalans.farm.annual import AnnualSupply

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PurchaseRecommendation:
    byproduct: Byproduct
    reason: str
    quantity_tons: int  # product tonnes
    quantity_loads: int
    avg_structure_value: float
    avg_oeb: float

    @property
    def product(self) -> str:
        return self.byproduct.name


def crop_mix_quality(tier: QualityTier, supply: AnnualSupply) -> tuple[float, float]:
    """
    Tonnage-weighted structure value and OEB (per kg DS) of the crop mix.

    A crop plan with no harvest has zero weights and so scores 0/0.
    """
    preset = QUALITY_PRESETS[tier]
    total = supply.total_kg_ds
    if total > 0:
        maize_ratio = supply.maize_kg_ds / total
        grass_ratio = supply.grass_kg_ds / total
    else:
        maize_ratio = grass_ratio = 0.0

    avg_sw = preset.maize.structure_value * maize_ratio + preset.grass.structure_value * grass_ratio
    avg_oeb = preset.maize.oeb * maize_ratio + preset.grass.oeb * grass_ratio
    return avg_sw, avg_oeb


def tons_of_product(deficit_kg_ds: float, byproduct: Byproduct) -> int:
    """Tonnes of fresh product that supply the deficit in kg DS, rounded up."""
    return math.ceil(deficit_kg_ds / (byproduct.dry_matter_percent * 10))


def recommend_purchase(
    deficit_kg_ds: float,
    tier: QualityTier,
    supply: AnnualSupply,
    policy: PurchasePolicy = PURCHASE_POLICY,
) -> PurchaseRecommendation | None:
    """
    Recommend a byproduct purchase to close a roughage deficit.

    Args:
        deficit_kg_ds: Annual roughage deficit (kg DS)
        tier: Quality tier of the home-grown silage
        supply: Harvested supply per crop
        policy: Decision thresholds

    Returns:
        PurchaseRecommendation, or None when there is no shortage
    """
    if deficit_kg_ds <= 0:
        return None

    avg_sw, avg_oeb = crop_mix_quality(tier, supply)

    if avg_sw < policy.low_structure_below and avg_oeb < policy.negative_oeb_below:
        byproduct = BYPRODUCTS["brewers_grains"]
    elif avg_oeb < policy.very_negative_oeb_below:
        byproduct = BYPRODUCTS["soybean_hulls"]
    else:
        byproduct = BYPRODUCTS["maize_silage"]

    tons = tons_of_product(deficit_kg_ds, byproduct)
    logger.debug("Crop mix SW %.2f, OEB %.0f -> %s (%d t)", avg_sw, avg_oeb, byproduct.key, tons)

    return PurchaseRecommendation(
        byproduct=byproduct,
        reason=byproduct.reason.format(sw=f"{avg_sw:.2f}", oeb=f"{avg_oeb:.0f}"),
        quantity_tons=tons,
        quantity_loads=math.ceil(tons / byproduct.tons_per_load),
        avg_structure_value=avg_sw,
        avg_oeb=avg_oeb,
    )
