"""Tests for the reference standards table."""

import dataclasses

import pytest

from voerbalans.core import standards
from voerbalans.core.standards import (
    BYPRODUCTS,
    COVERAGE,
    CVB_ENERGY,
    CVB_PREGNANCY_BANDS,
    QUALITY_PRESETS,
    STRUCTURE,
    QualityTier,
)


class TestCitations:
    """Every standards table carries a source citation."""

    @pytest.mark.parametrize(
        "table",
        [
            standards.CVB_ENERGY,
            standards.CVB_FPCM,
            standards.CVB_GROWTH,
            standards.CVB_PROTEIN,
            standards.CVB_INTAKE,
            standards.COVERAGE,
            standards.STRUCTURE,
            standards.OEB_RATION,
            standards.OEB_DENSITY,
            standards.STANDARD_CONCENTRATE,
            standards.PURCHASE_POLICY,
        ],
    )
    def test_table_has_source(self, table):
        assert table.source

    def test_pregnancy_bands_have_sources(self):
        for band in CVB_PREGNANCY_BANDS:
            assert band.source

    def test_quality_presets_have_sources(self):
        for tier in QualityTier:
            assert QUALITY_PRESETS[tier].source


class TestValues:
    def test_maintenance_coefficients_are_distinct(self):
        """Lactating and dry maintenance are separate named coefficients."""
        assert CVB_ENERGY.maintenance_lactating == 53.0
        assert CVB_ENERGY.maintenance_dry == 42.4

    def test_pregnancy_bands_ascending(self):
        days = [band.from_day for band in CVB_PREGNANCY_BANDS]
        assert days == sorted(days)

    def test_coverage_bands_ordered(self):
        assert COVERAGE.surplus > COVERAGE.ok > COVERAGE.target_met > COVERAGE.warning

    def test_structure_warning_band(self):
        assert STRUCTURE.warning_per_kg_ds == pytest.approx(0.85)

    def test_preset_tiers_ordered_by_energy(self):
        top = QUALITY_PRESETS[QualityTier.TOP]
        average = QUALITY_PRESETS[QualityTier.AVERAGE]
        sober = QUALITY_PRESETS[QualityTier.SOBER]
        assert top.maize.vem > average.maize.vem > sober.maize.vem
        assert top.grass_spring_vem > average.grass_spring_vem > sober.grass_spring_vem

    def test_spring_cut_richer_than_summer(self):
        for preset in QUALITY_PRESETS.values():
            assert preset.grass_spring_vem > preset.grass_summer_vem

    def test_byproduct_keys_match(self):
        for key, byproduct in BYPRODUCTS.items():
            assert byproduct.key == key

    def test_tables_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CVB_ENERGY.vem_per_kg_fpcm = 400
