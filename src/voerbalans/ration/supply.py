"""
Nutrient supply of a ration.

Each feed amount is converted to kg DS, multiplied by the feed's nutrient
values per kg DS and summed. Values stay unrounded; rounding is a display
concern.
"""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from voerbalans.core.standards import CVB_ENERGY, DEFAULT_FILLING_VALUE, EnergyStandard
from voerbalans.feeds.models import FeedDefinition, FeedInput
from voerbalans.feeds.normalize import to_dry_matter_kg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedSupply:
    """Nutrients delivered by one ration entry."""

    feed_name: str
    dry_matter_kg: float
    vem: float
    dve: float
    oeb: float
    structure_value: float
    filling_value: float


@dataclass(frozen=True)
class NutrientSupply:
    """Totals over all ration entries (per animal per day)."""

    dry_matter_kg: float = 0.0
    vem: float = 0.0
    dve: float = 0.0  # grams
    oeb: float = 0.0  # grams
    structure_value: float = 0.0  # SW total, divide by DS for SW/kg DS
    filling_value: float = 0.0  # VW total
    dry_matter_by_category: dict[str, float] = field(default_factory=dict)
    feeds: tuple[FeedSupply, ...] = ()

    @property
    def structure_value_per_kg_ds(self) -> float:
        if self.dry_matter_kg <= 0:
            return 0.0
        return self.structure_value / self.dry_matter_kg


def calculate_feed_supply(feed: FeedDefinition, feed_input: FeedInput) -> FeedSupply:
    """
    Nutrients delivered by one feed entry.

    Args:
        feed: Catalog feed definition
        feed_input: Entered amount; a missing dry matter uses the feed default

    Returns:
        FeedSupply; all zeros for a non-positive amount
    """
    dm_percent = feed_input.dry_matter_percent
    if dm_percent is None:
        dm_percent = feed.default_dry_matter_percent
    dm = to_dry_matter_kg(feed_input.amount_kg, dm_percent, feed.basis)

    vw = feed.filling_value_per_kg_ds
    if vw is None:
        vw = DEFAULT_FILLING_VALUE.get(feed.category.value, 1.0)

    return FeedSupply(
        feed_name=feed.name,
        dry_matter_kg=dm,
        vem=dm * feed.vem_per_unit,
        dve=dm * feed.dve_per_unit,
        oeb=dm * feed.oeb_per_unit,
        structure_value=dm * (feed.structure_value_per_kg_ds or 0.0),
        filling_value=dm * vw,
    )


def calculate_total_supply(
    entries: Iterable[tuple[FeedDefinition, FeedInput]],
    grazing: bool = False,
    energy: EnergyStandard = CVB_ENERGY,
) -> NutrientSupply:
    """
    Aggregate the nutrient supply of a ration.

    Entries with a non-positive or non-finite amount are skipped. Grazing adds
    the energy taken up on pasture for walking and grazing activity.

    Args:
        entries: (feed definition, feed input) pairs in ration order
        grazing: Whether the animals graze
        energy: Energy standard providing the grazing activity constant

    Returns:
        NutrientSupply totals
    """
    feeds = []
    by_category: dict[str, float] = {}

    for feed, feed_input in entries:
        amount = feed_input.amount_kg
        if amount is None or not math.isfinite(amount) or amount <= 0:
            logger.debug("Skipping %s: amount %r is not a positive number", feed.name, amount)
            continue
        supply = calculate_feed_supply(feed, feed_input)
        feeds.append(supply)
        category = feed.category.value
        by_category[category] = by_category.get(category, 0.0) + supply.dry_matter_kg

    vem = sum(f.vem for f in feeds)
    if grazing:
        vem += energy.grazing_activity_vem

    return NutrientSupply(
        dry_matter_kg=sum(f.dry_matter_kg for f in feeds),
        vem=vem,
        dve=sum(f.dve for f in feeds),
        oeb=sum(f.oeb for f in feeds),
        structure_value=sum(f.structure_value for f in feeds),
        filling_value=sum(f.filling_value for f in feeds),
        dry_matter_by_category=by_category,
        feeds=tuple(feeds),
    )
