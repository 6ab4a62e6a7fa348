"""Tests for the annual farm roughage balance."""

from dataclasses import replace
from datetime import date, timedelta

import pytest

from voerbalans.core.errors import InvalidInputError
from voerbalans.core.standards import STANDARD_CONCENTRATE, HerdClass, QualityTier
from voerbalans.farm.annual import (
    AnnualFarmPlan,
    calculate_annual_demand,
    calculate_annual_supply,
    calculate_annual_vem_demand,
    calculate_annual_vem_supply,
    calculate_deficit,
    calculate_depletion_date,
    calculate_vem_gap,
)
from voerbalans.farm.balance import calculate_annual_balance

TODAY = date(2025, 1, 1)


def make_plan(**overrides) -> AnnualFarmPlan:
    fields = {
        "hectares_maize": 8,
        "hectares_grass": 32,
        "yield_maize_ton_ds_ha": 12,
        "yield_grass_ton_ds_ha": 11,
        "milking_cows": 80,
        "cow_daily_vem": 22000,
    }
    fields.update(overrides)
    return AnnualFarmPlan(**fields)


class TestAnnualFarmPlan:
    @pytest.mark.parametrize(
        "field,value",
        [
            ("hectares_maize", -1),
            ("yield_grass_ton_ds_ha", float("nan")),
            ("milking_cows", -5),
            ("milking_cows", 2.5),
            ("young_stock_junior", True),
            ("quality_tier", "premium"),
        ],
    )
    def test_rejects_invalid(self, field, value):
        with pytest.raises(InvalidInputError):
            make_plan(**{field: value})

    def test_string_tier_coerced(self):
        assert make_plan(quality_tier="top").quality_tier is QualityTier.TOP


class TestSupplyAndDemand:
    """Tests for supply and demand projections."""

    def test_reference_supply(self):
        """8 ha × 12 t + 32 ha × 11 t = 448,000 kg DS."""
        supply = calculate_annual_supply(make_plan())
        assert supply.maize_kg_ds == pytest.approx(96_000)
        assert supply.grass_kg_ds == pytest.approx(352_000)
        assert supply.total_kg_ds == pytest.approx(448_000)

    def test_demand_by_herd_class(self):
        demand = calculate_annual_demand(make_plan(young_stock_junior=10, young_stock_senior=5))
        annual = {line.herd_class: line.annual for line in demand.breakdown}
        assert annual[HerdClass.MILKING_COW] == pytest.approx(80 * 15 * 365)
        assert annual[HerdClass.YOUNG_STOCK_JUNIOR] == pytest.approx(10 * 5 * 365)
        assert annual[HerdClass.YOUNG_STOCK_SENIOR] == pytest.approx(5 * 8 * 365)
        assert demand.unit == "kg DS"
        assert demand.daily == pytest.approx(80 * 15 + 10 * 5 + 5 * 8)

    def test_vem_supply_splits_grass_cuts(self):
        vem = calculate_annual_vem_supply(make_plan())
        assert vem.maize_vem == pytest.approx(96_000 * 950)
        assert vem.grass_spring_kg_ds == pytest.approx(352_000 * 0.4)
        assert vem.grass_spring_vem == pytest.approx(140_800 * 950)
        assert vem.grass_summer_vem == pytest.approx(211_200 * 880)
        assert vem.total_vem == pytest.approx(410_816_000)

    def test_better_tier_more_energy(self):
        top = calculate_annual_vem_supply(make_plan(quality_tier=QualityTier.TOP))
        sober = calculate_annual_vem_supply(make_plan(quality_tier=QualityTier.SOBER))
        assert top.total_vem > sober.total_vem

    def test_vem_demand(self):
        demand = calculate_annual_vem_demand(make_plan(young_stock_junior=10))
        annual = {line.herd_class: line.annual for line in demand.breakdown}
        assert annual[HerdClass.MILKING_COW] == pytest.approx(80 * 22000 * 365)
        assert annual[HerdClass.YOUNG_STOCK_JUNIOR] == pytest.approx(10 * 4500 * 365)


class TestDeficit:
    """Tests for calculate_deficit and calculate_vem_gap."""

    def test_surplus(self):
        result = calculate_deficit(448_000, 438_000)
        assert result.deficit == pytest.approx(-10_000)
        assert result.deficit_tons == -10.0
        assert result.is_shortage is False
        assert result.percentage_covered == pytest.approx(448 / 438 * 100)

    def test_shortage(self):
        result = calculate_deficit(448_000, 547_500)
        assert result.is_shortage is True
        assert result.deficit_tons == 99.5

    def test_no_demand(self):
        assert calculate_deficit(1000, 0).percentage_covered is None

    def test_vem_gap(self):
        result = calculate_vem_gap(demand_vem=642_400_000, supply_vem=410_816_000)
        assert result.is_shortage is True
        assert result.vem_deficit == pytest.approx(231_584_000)
        assert result.self_sufficiency_rating == "moderate"
        assert result.concentrate_tons_needed == pytest.approx(231.584)
        assert result.truckloads_needed == 8

    @pytest.mark.parametrize(
        "supply,rating",
        [(90, "good"), (80, "good"), (60, "moderate"), (40, "low")],
    )
    def test_self_sufficiency_rating(self, supply, rating):
        assert calculate_vem_gap(100, supply).self_sufficiency_rating == rating

    def test_vem_surplus_needs_no_concentrate(self):
        result = calculate_vem_gap(100, 150)
        assert result.is_shortage is False
        assert result.concentrate_tons_needed == 0
        assert result.truckloads_needed == 0

    def test_no_vem_demand(self):
        result = calculate_vem_gap(0, 100)
        assert result.self_sufficiency_percent is None
        assert result.self_sufficiency_rating == "n/a"


class TestDepletionDate:
    def test_floor_of_days(self):
        assert calculate_depletion_date(448_000, 1200, TODAY) == TODAY + timedelta(days=373)

    def test_no_demand(self):
        assert calculate_depletion_date(448_000, 0, TODAY) is None

    def test_defaults_to_today(self):
        assert calculate_depletion_date(100, 1) == date.today() + timedelta(days=100)

    def test_crosses_leap_day(self):
        assert calculate_depletion_date(2, 1, date(2028, 2, 28)) == date(2028, 3, 1)
        assert calculate_depletion_date(1, 1, date(2028, 2, 28)) == date(2028, 2, 29)

    def test_full_leap_year(self):
        """366 days of stock from 1 January 2028 lasts until 1 January 2029."""
        assert calculate_depletion_date(366_000, 1000, date(2028, 1, 1)) == date(2029, 1, 1)
        assert calculate_depletion_date(365_000, 1000, date(2028, 1, 1)) == date(2028, 12, 31)


class TestCalculateAnnualBalance:
    """Tests for the combined annual balance."""

    def test_reference_farm_in_surplus(self):
        result = calculate_annual_balance(make_plan(), today=TODAY)
        assert result.supply.total_kg_ds == pytest.approx(448_000)
        assert result.demand.total == pytest.approx(438_000)
        assert result.deficit.is_shortage is False
        assert result.recommendation is None
        assert result.depletion_date == TODAY + timedelta(days=373)
        assert result.vem_gap.self_sufficiency_rating == "moderate"

    def test_shortage_gets_recommendation(self):
        result = calculate_annual_balance(make_plan(milking_cows=100), today=TODAY)
        assert result.deficit.is_shortage is True
        assert result.recommendation is not None
        assert result.recommendation.quantity_tons == 100

    def test_empty_farm(self):
        plan = AnnualFarmPlan(0, 0, 0, 0, milking_cows=0, cow_daily_vem=0)
        result = calculate_annual_balance(plan, today=TODAY)
        assert result.deficit.percentage_covered is None
        assert result.depletion_date is None
        assert result.recommendation is None
        assert result.vem_gap.self_sufficiency_rating == "n/a"

    def test_more_land_less_deficit(self):
        small = calculate_annual_balance(make_plan(milking_cows=100), today=TODAY)
        large = calculate_annual_balance(make_plan(milking_cows=100, hectares_grass=40), today=TODAY)
        assert large.deficit.deficit < small.deficit.deficit

    def test_concentrate_standard_applied(self):
        rich = replace(STANDARD_CONCENTRATE, vem_per_kg_ds=2000.0)
        standard = calculate_annual_balance(make_plan(), today=TODAY)
        result = calculate_annual_balance(make_plan(), today=TODAY, concentrate=rich)
        assert standard.vem_gap.concentrate_tons_needed > 0
        assert result.vem_gap.concentrate_tons_needed == pytest.approx(standard.vem_gap.concentrate_tons_needed / 2)
