"""
Annual roughage balance of a farm.

Projects a crop plan (hectares × yield) against the herd's annual roughage
and energy demand:

- Supply: kg DS per crop; VEM with maize at one density and grass split
  into a spring cut (40%) and summer cuts (60%) of different quality
- Demand: kg DS per animal class per day × 365; VEM at the cow's daily
  requirement and fixed young-stock requirements
- Gap: deficit in kg DS and tonnes, coverage percentage, and the VEM gap
  expressed as standard concentrate and truckloads
- Depletion date: the day stocks run out at the current demand

References:
-----------
[1] Report 20 - Kwantitatieve Informatie Veehouderij (KWIN-V). Roughage
    yields and demand per animal class for intensive farming.
[2] CVB (2025). Silage quality averages per quality tier.
"""

import math
from dataclasses import dataclass
from datetime import date, timedelta

from voerbalans.core.errors import InvalidInputError
from voerbalans.core.standards import (
    DAYS_PER_YEAR,
    GRASS_SPRING_CUT_FRACTION,
    QUALITY_PRESETS,
    ROUGHAGE_DEMAND_KG_DS,
    STANDARD_CONCENTRATE,
    YOUNG_STOCK_DAILY_VEM,
    ConcentrateStandard,
    HerdClass,
    QualityTier,
)

# Self-sufficiency rating bands (% of annual VEM demand grown on farm)
SELF_SUFFICIENCY_GOOD = 80.0
SELF_SUFFICIENCY_MODERATE = 50.0


@dataclass(frozen=True)
class AnnualFarmPlan:
    """
    Crop plan and herd size for one year.

    Raises:
        InvalidInputError: negative or non-finite areas, yields or counts
    """

    hectares_maize: float
    hectares_grass: float
    yield_maize_ton_ds_ha: float
    yield_grass_ton_ds_ha: float
    milking_cows: int
    cow_daily_vem: float
    quality_tier: QualityTier = QualityTier.AVERAGE
    young_stock_junior: int = 0
    young_stock_senior: int = 0

    def __post_init__(self):
        for name in (
            "hectares_maize",
            "hectares_grass",
            "yield_maize_ton_ds_ha",
            "yield_grass_ton_ds_ha",
            "cow_daily_vem",
        ):
            value = getattr(self, name)
            if value is None or not math.isfinite(value) or value < 0:
                raise InvalidInputError(name, value, "must be a non-negative number")
        for name in ("milking_cows", "young_stock_junior", "young_stock_senior"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise InvalidInputError(name, value, "must be a non-negative integer")
        if not isinstance(self.quality_tier, QualityTier):
            try:
                object.__setattr__(self, "quality_tier", QualityTier(self.quality_tier))
            except ValueError as e:
                raise InvalidInputError("quality_tier", self.quality_tier, "unknown quality tier") from e

    @property
    def herd(self) -> dict[HerdClass, int]:
        return {
            HerdClass.MILKING_COW: self.milking_cows,
            HerdClass.YOUNG_STOCK_JUNIOR: self.young_stock_junior,
            HerdClass.YOUNG_STOCK_SENIOR: self.young_stock_senior,
        }


# -----------------------------------------------------------------------------
# Supply
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class AnnualSupply:
    """Harvested roughage in kg DS."""

    maize_kg_ds: float
    grass_kg_ds: float

    @property
    def total_kg_ds(self) -> float:
        return self.maize_kg_ds + self.grass_kg_ds


@dataclass(frozen=True)
class AnnualVemSupply:
    maize_kg_ds: float
    maize_vem_per_kg: float
    grass_spring_kg_ds: float
    grass_spring_vem_per_kg: float
    grass_summer_kg_ds: float
    grass_summer_vem_per_kg: float

    @property
    def maize_vem(self) -> float:
        return self.maize_kg_ds * self.maize_vem_per_kg

    @property
    def grass_spring_vem(self) -> float:
        return self.grass_spring_kg_ds * self.grass_spring_vem_per_kg

    @property
    def grass_summer_vem(self) -> float:
        return self.grass_summer_kg_ds * self.grass_summer_vem_per_kg

    @property
    def total_vem(self) -> float:
        return self.maize_vem + self.grass_spring_vem + self.grass_summer_vem


def calculate_annual_supply(plan: AnnualFarmPlan) -> AnnualSupply:
    """
    Harvested roughage from the crop plan.

    Example: 8 ha maize at 12 t DS/ha plus 32 ha grass at 11 t DS/ha gives
    96,000 + 352,000 = 448,000 kg DS.
    """
    return AnnualSupply(
        maize_kg_ds=plan.hectares_maize * plan.yield_maize_ton_ds_ha * 1000,
        grass_kg_ds=plan.hectares_grass * plan.yield_grass_ton_ds_ha * 1000,
    )


def calculate_annual_vem_supply(
    plan: AnnualFarmPlan,
    spring_fraction: float = GRASS_SPRING_CUT_FRACTION,
) -> AnnualVemSupply:
    """
    Energy in the harvested roughage.

    Maize is valued at the tier's single density. Grass is split into the
    spring cut (high energy) and the summer cuts (lower energy).
    """
    supply = calculate_annual_supply(plan)
    preset = QUALITY_PRESETS[plan.quality_tier]
    return AnnualVemSupply(
        maize_kg_ds=supply.maize_kg_ds,
        maize_vem_per_kg=preset.maize.vem,
        grass_spring_kg_ds=supply.grass_kg_ds * spring_fraction,
        grass_spring_vem_per_kg=preset.grass_spring_vem,
        grass_summer_kg_ds=supply.grass_kg_ds * (1 - spring_fraction),
        grass_summer_vem_per_kg=preset.grass_summer_vem,
    )


# -----------------------------------------------------------------------------
# Demand
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class DemandLine:
    herd_class: HerdClass
    count: int
    daily_per_animal: float
    annual: float


@dataclass(frozen=True)
class AnnualDemand:
    """Annual demand over all animal classes, in kg DS or VEM."""

    unit: str
    breakdown: tuple[DemandLine, ...]

    @property
    def total(self) -> float:
        return sum(line.annual for line in self.breakdown)

    @property
    def daily(self) -> float:
        return self.total / DAYS_PER_YEAR


def _annual_demand(plan: AnnualFarmPlan, daily: dict[HerdClass, float], unit: str) -> AnnualDemand:
    lines = []
    for herd_class, count in plan.herd.items():
        per_animal = daily[herd_class]
        lines.append(
            DemandLine(
                herd_class=herd_class,
                count=count,
                daily_per_animal=per_animal,
                annual=count * per_animal * DAYS_PER_YEAR,
            )
        )
    return AnnualDemand(unit=unit, breakdown=tuple(lines))


def calculate_annual_demand(
    plan: AnnualFarmPlan,
    roughage_demand: dict[HerdClass, float] = ROUGHAGE_DEMAND_KG_DS,
) -> AnnualDemand:
    """Annual roughage demand (kg DS) per animal class."""
    return _annual_demand(plan, roughage_demand, "kg DS")


def calculate_annual_vem_demand(
    plan: AnnualFarmPlan,
    young_stock_vem: dict[HerdClass, float] = YOUNG_STOCK_DAILY_VEM,
) -> AnnualDemand:
    """Annual energy demand (VEM): cows at the plan's daily requirement, young stock at fixed values."""
    daily = {HerdClass.MILKING_COW: plan.cow_daily_vem, **young_stock_vem}
    return _annual_demand(plan, daily, "VEM")


# -----------------------------------------------------------------------------
# Gap
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class DeficitResult:
    deficit: float  # kg DS, negative means surplus
    deficit_tons: float  # one decimal
    percentage_covered: float | None  # None when there is no demand
    is_shortage: bool


def calculate_deficit(supply_kg_ds: float, demand_kg_ds: float) -> DeficitResult:
    """Roughage deficit of supply against demand (kg DS)."""
    deficit = demand_kg_ds - supply_kg_ds
    covered = supply_kg_ds / demand_kg_ds * 100 if demand_kg_ds > 0 else None
    return DeficitResult(
        deficit=deficit,
        deficit_tons=round(deficit / 1000, 1),
        percentage_covered=covered,
        is_shortage=deficit > 0,
    )


@dataclass(frozen=True)
class VemGapResult:
    vem_deficit: float  # negative means surplus
    is_shortage: bool
    self_sufficiency_percent: float | None
    self_sufficiency_rating: str  # "good", "moderate", "low" or "n/a"
    concentrate_tons_needed: float
    truckloads_needed: int


def calculate_vem_gap(
    demand_vem: float,
    supply_vem: float,
    concentrate: ConcentrateStandard = STANDARD_CONCENTRATE,
) -> VemGapResult:
    """
    Annual energy gap expressed as standard concentrate.

    Args:
        demand_vem: Annual VEM demand
        supply_vem: Annual VEM in home-grown roughage
        concentrate: Reference concentrate (VEM/kg DS, truckload size)

    Returns:
        VemGapResult; concentrate and truckloads are zero without a shortage
    """
    deficit = demand_vem - supply_vem
    self_sufficiency = supply_vem / demand_vem * 100 if demand_vem > 0 else None

    if self_sufficiency is None:
        rating = "n/a"
    elif self_sufficiency >= SELF_SUFFICIENCY_GOOD:
        rating = "good"
    elif self_sufficiency >= SELF_SUFFICIENCY_MODERATE:
        rating = "moderate"
    else:
        rating = "low"

    tons = max(0.0, deficit) / concentrate.vem_per_kg_ds / 1000
    return VemGapResult(
        vem_deficit=deficit,
        is_shortage=deficit > 0,
        self_sufficiency_percent=self_sufficiency,
        self_sufficiency_rating=rating,
        concentrate_tons_needed=tons,
        truckloads_needed=math.ceil(tons / concentrate.tons_per_load),
    )


def calculate_depletion_date(supply_kg: float, daily_demand_kg: float, today: date | None = None) -> date | None:
    """
    Date the roughage stock runs out at a constant daily demand.

    Returns:
        today + floor(supply / daily demand) days, or None without demand
    """
    if daily_demand_kg <= 0:
        return None
    if today is None:
        today = date.today()
    return today + timedelta(days=math.floor(supply_kg / daily_demand_kg))
