"""Tests for silage and hay quality assessment."""

from dataclasses import replace

import pytest

from voerbalans.core.standards import OEB_DENSITY
from voerbalans.feeds.quality import (
    QualityScore,
    assess_feed_quality,
    assess_grass_silage,
    assess_hay,
    assess_maize_silage,
    detect_feed_type,
)


class TestDetectFeedType:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Grass silage 1st cut", "grass"),
            ("Graskuil 2025", "grass"),
            ("Maize silage", "maize"),
            ("Snijmais", "maize"),
            ("Snijmaïs 2024", "maize"),
            ("Meadow hay", "hay"),
            ("Hooi", "hay"),
            ("Rapeseed meal", "unknown"),
        ],
    )
    def test_keywords(self, name, expected):
        assert detect_feed_type(name) == expected

    def test_grass_wins_over_maize(self):
        assert detect_feed_type("Grass and maize mix") == "grass"


class TestGrassSilage:
    """Tests for assess_grass_silage."""

    def test_excellent(self):
        result = assess_grass_silage(950, 20)
        assert result.score is QualityScore.EXCELLENT
        assert result.warnings == []
        assert result.impact_estimate is None

    def test_good(self):
        assert assess_grass_silage(910, 20).score is QualityScore.GOOD

    def test_average_warns(self):
        result = assess_grass_silage(880, 20)
        assert result.score is QualityScore.AVERAGE
        assert len(result.warnings) == 1
        assert result.impact_estimate == "-0.5 to -1.0 kg milk"

    def test_poor(self):
        result = assess_grass_silage(850, 20)
        assert result.score is QualityScore.POOR
        assert result.recommendations
        assert result.impact_estimate == "-1.5 to -2.5 kg milk"

    def test_low_oeb(self):
        result = assess_grass_silage(950, -25)
        assert any("Low OEB" in w for w in result.warnings)
        assert any("rapeseed" in r for r in result.recommendations)

    def test_high_oeb(self):
        result = assess_grass_silage(950, 60)
        assert any("High OEB" in w for w in result.warnings)

    def test_custom_oeb_thresholds(self):
        """An OEB of 10 is fine by default but low against a stricter band."""
        strict = replace(OEB_DENSITY, warning_below=15.0)
        assert not assess_grass_silage(950, 10).warnings
        result = assess_grass_silage(950, 10, oeb_thresholds=strict)
        assert any("Low OEB" in w for w in result.warnings)


class TestMaizeSilage:
    """Tests for assess_maize_silage."""

    def test_excellent(self):
        result = assess_maize_silage(1010, -25)
        assert result.score is QualityScore.EXCELLENT
        assert result.warnings == []

    def test_good_with_low_oeb(self):
        result = assess_maize_silage(980, -35)
        assert result.score is QualityScore.GOOD
        assert any("Low OEB" in w for w in result.warnings)

    def test_average_very_low_oeb(self):
        result = assess_maize_silage(950, -45)
        assert result.score is QualityScore.AVERAGE
        assert any("Very low OEB" in w for w in result.warnings)
        assert result.impact_estimate == "-0.5 to -1.0 kg milk"

    def test_critical_oeb(self):
        result = assess_maize_silage(1010, -55)
        assert any("Critically low OEB" in w for w in result.warnings)
        assert any("2 kg" in r for r in result.recommendations)

    def test_poor(self):
        result = assess_maize_silage(900, -20)
        assert result.score is QualityScore.POOR
        assert result.impact_estimate == "-1.0 to -2.0 kg milk"


class TestHay:
    @pytest.mark.parametrize(
        "vem,expected",
        [(820, QualityScore.GOOD), (760, QualityScore.AVERAGE), (700, QualityScore.POOR)],
    )
    def test_bands(self, vem, expected):
        assert assess_hay(vem).score is expected

    def test_poor_hay_warns(self):
        assert assess_hay(700).warnings


class TestAssessFeedQuality:
    """Tests for assess_feed_quality dispatch."""

    def test_dispatch_by_name(self):
        assert assess_feed_quality("Graskuil", 950, 20).feed_type == "grass"
        assert assess_feed_quality("Snijmais", 1010, -25).feed_type == "maize"
        assert assess_feed_quality("Hooi", 820, 10).feed_type == "hay"

    def test_unknown_feed(self):
        result = assess_feed_quality("Rapeseed meal", 860, 100, dve=135)
        assert result.score is QualityScore.UNKNOWN
        assert result.feed_type == "unknown"
        assert result.warnings == []
        assert result.badge == "Unknown"

    def test_badge(self):
        assert assess_feed_quality("Grass silage", 950, 20).badge == "Excellent"
