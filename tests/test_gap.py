"""Tests for the concentrate gap calculation."""

import math

import pytest

from voerbalans.animal.requirements import maintenance_vem
from voerbalans.core.errors import InvalidInputError
from voerbalans.core.standards import STANDARD_CONCENTRATE
from voerbalans.ration.classify import StructureStatus
from voerbalans.ration.gap import (
    calculate_base_milk_support,
    calculate_concentrate_cost,
    calculate_concentrate_gap,
    calculate_roughage_displacement,
    calculate_straw_needed,
)
from voerbalans.ration.supply import NutrientSupply


def roughage_supply(dm: float, vem: float, dve: float, sw_total: float) -> NutrientSupply:
    return NutrientSupply(
        dry_matter_kg=dm,
        vem=vem,
        dve=dve,
        structure_value=sw_total,
        dry_matter_by_category={"roughage": dm},
    )


class TestRoughageDisplacement:
    def test_displacement(self):
        assert calculate_roughage_displacement(4.0, 0.45) == pytest.approx(1.8)

    def test_no_concentrate(self):
        assert calculate_roughage_displacement(0, 0.45) == 0.0

    @pytest.mark.parametrize("rate", [-0.1, 1.5])
    def test_rejects_rate_out_of_range(self, rate):
        with pytest.raises(ValueError, match="substitution_rate"):
            calculate_roughage_displacement(4.0, rate)


class TestStrawNeeded:
    def test_no_deficit(self):
        assert calculate_straw_needed(0.0, 25) == 0.0
        assert calculate_straw_needed(-0.2, 25) == 0.0

    def test_deficit(self):
        assert calculate_straw_needed(0.2, 20) == pytest.approx(0.2 * 20 / 1.8)


class TestCalculateConcentrateGap:
    """Tests for calculate_concentrate_gap."""

    def test_energy_limited(self):
        supply = roughage_supply(dm=25, vem=20000, dve=1600, sw_total=30)
        result = calculate_concentrate_gap(supply, 24000, 1500)

        assert result.limiting_nutrient == "vem"
        assert result.gap_vem == pytest.approx(4000)
        assert result.gap_dve == 0
        assert result.concentrate_kg_ds == pytest.approx(4.0)
        assert result.roughage_displaced_kg_ds == pytest.approx(1.8)
        assert result.final_dry_matter_kg == pytest.approx(27.2)
        assert result.final_vem == pytest.approx(20000 * (1 - 1.8 / 25) + 4000)
        assert result.gap_milk_kg == pytest.approx(4000 / 390)
        assert result.structure_status is StructureStatus.OK
        assert result.straw_needed_kg_ds == 0

    def test_protein_limited(self):
        supply = roughage_supply(dm=22, vem=23000, dve=1300, sw_total=40)
        result = calculate_concentrate_gap(supply, 24000, 1500)
        assert result.limiting_nutrient == "dve"
        assert result.concentrate_kg_ds == pytest.approx(2.0)

    def test_no_gap(self):
        supply = roughage_supply(dm=25, vem=25000, dve=1700, sw_total=40)
        result = calculate_concentrate_gap(supply, 24000, 1600)
        assert result.limiting_nutrient == "none"
        assert result.concentrate_kg_ds == 0
        assert result.roughage_displaced_kg_ds == 0
        assert result.final_vem == pytest.approx(25000)

    def test_substitution_dilutes_structure(self):
        """Concentrate lowers SW/kg DS; a ration at the minimum drops into the warning band."""
        supply = roughage_supply(dm=25, vem=20000, dve=1600, sw_total=25)
        result = calculate_concentrate_gap(supply, 24000, 1500)
        assert result.final_sw_per_kg_ds == pytest.approx(25 * (1 - 1.8 / 25) / 27.2)
        assert result.structure_status is StructureStatus.WARNING
        assert result.straw_needed_kg_ds > 0

    def test_displacement_capped_at_roughage(self):
        supply = NutrientSupply(
            dry_matter_kg=5,
            vem=5000,
            dve=500,
            structure_value=2,
            dry_matter_by_category={"roughage": 1.0, "concentrate": 4.0},
        )
        result = calculate_concentrate_gap(supply, 9000, 500)
        assert result.concentrate_kg_ds == pytest.approx(4.0)
        assert result.roughage_displaced_kg_ds == pytest.approx(1.0)

    def test_custom_concentrate(self):
        from dataclasses import replace

        rich = replace(STANDARD_CONCENTRATE, vem_per_kg_ds=1100)
        supply = roughage_supply(dm=25, vem=20000, dve=1600, sw_total=30)
        result = calculate_concentrate_gap(supply, 22200, 1500, concentrate=rich)
        assert result.concentrate_kg_ds == pytest.approx(2.0)


class TestBaseMilkSupport:
    """Tests for calculate_base_milk_support."""

    def test_reference_ration(self):
        supply = roughage_supply(25, vem=23750, dve=1455, sw_total=60)
        result = calculate_base_milk_support(supply, weight_kg=650)
        production = 23750 - maintenance_vem(650)
        assert result.maintenance_vem == pytest.approx(maintenance_vem(650))
        assert result.maintenance_dve == pytest.approx(54 + 0.1 * 650)
        assert result.production_vem == pytest.approx(production)
        assert result.production_dve == pytest.approx(1455 - 119)
        assert result.milk_support_kg == pytest.approx(production / 390)
        assert result.sw_per_kg_ds == pytest.approx(2.4)
        assert result.structure_status is StructureStatus.OK
        assert result.is_structure_safe

    def test_maintenance_not_covered(self):
        result = calculate_base_milk_support(roughage_supply(3, vem=3000, dve=50, sw_total=6))
        assert result.production_vem == 0.0
        assert result.production_dve == 0.0
        assert result.milk_support_kg == 0.0

    @pytest.mark.parametrize(
        "sw_per_kg,expected",
        [(0.9, StructureStatus.WARNING), (0.5, StructureStatus.DEFICIENT)],
    )
    def test_low_structure_not_safe(self, sw_per_kg, expected):
        result = calculate_base_milk_support(roughage_supply(20, vem=19000, dve=1200, sw_total=20 * sw_per_kg))
        assert result.structure_status is expected
        assert not result.is_structure_safe

    def test_heavier_cow_supports_less_milk(self):
        supply = roughage_supply(25, vem=23750, dve=1455, sw_total=60)
        light = calculate_base_milk_support(supply, weight_kg=550)
        heavy = calculate_base_milk_support(supply, weight_kg=750)
        assert heavy.milk_support_kg < light.milk_support_kg

    @pytest.mark.parametrize("weight", [0, -650, math.nan])
    def test_rejects_invalid_weight(self, weight):
        with pytest.raises(InvalidInputError, match="weight_kg"):
            calculate_base_milk_support(roughage_supply(25, vem=23750, dve=1455, sw_total=60), weight_kg=weight)


class TestConcentrateCost:
    """Tests for calculate_concentrate_cost."""

    def test_group_cost(self):
        """4 kg DS at 350 per tonne is 1.40 per cow per day."""
        result = calculate_concentrate_cost(4.0, cows=100, price_per_ton_ds=350)
        assert result.daily_cost_per_cow == pytest.approx(1.40)
        assert result.daily_cost_total == pytest.approx(140.0)
        assert result.monthly_cost_total == pytest.approx(4200.0)
        assert result.annual_cost_total == pytest.approx(51_100.0)

    def test_defaults_to_standard_price(self):
        result = calculate_concentrate_cost(2.0)
        assert result.daily_cost_per_cow == pytest.approx(2.0 * STANDARD_CONCENTRATE.price_per_ton_ds / 1000)
        assert result.daily_cost_total == result.daily_cost_per_cow

    @pytest.mark.parametrize("amount", [0.0, -1.5])
    def test_no_concentrate_no_cost(self, amount):
        assert calculate_concentrate_cost(amount, cows=50).annual_cost_total == 0.0

    @pytest.mark.parametrize("cows", [-1, 2.5, True])
    def test_rejects_invalid_cow_count(self, cows):
        with pytest.raises(InvalidInputError, match="cows"):
            calculate_concentrate_cost(4.0, cows=cows)

    def test_rejects_negative_price(self):
        with pytest.raises(InvalidInputError, match="price_per_ton_ds"):
            calculate_concentrate_cost(4.0, price_per_ton_ds=-10)
