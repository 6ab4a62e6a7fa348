"""Shared test fixtures."""

import sys
from pathlib import Path

import pytest

# Add src/ to path so tests can import voerbalans
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voerbalans.animal.state import PhysiologicalState  # noqa: E402
from voerbalans.feeds.models import Basis, FeedCategory, FeedDefinition  # noqa: E402


@pytest.fixture
def grass_silage():
    """Grass silage tabulated per kg DS."""
    return FeedDefinition(
        name="grass_silage",
        display_name="Grass silage",
        vem_per_unit=898,
        dve_per_unit=65,
        oeb_per_unit=45,
        basis=Basis.PER_KG_DS,
        default_dry_matter_percent=45,
        structure_value_per_kg_ds=2.9,
        filling_value_per_kg_ds=1.05,
    )


@pytest.fixture
def maize_silage():
    """Maize silage tabulated per kg DS."""
    return FeedDefinition(
        name="maize_silage",
        display_name="Maize silage",
        vem_per_unit=1028,
        dve_per_unit=48,
        oeb_per_unit=-36,
        basis=Basis.PER_KG_DS,
        default_dry_matter_percent=35,
        structure_value_per_kg_ds=1.65,
        filling_value_per_kg_ds=0.8,
    )


@pytest.fixture
def pellets():
    """Concentrate tabulated per kg product."""
    return FeedDefinition(
        name="standard_pellets",
        display_name="Standard pellets",
        vem_per_unit=940,
        dve_per_unit=90,
        oeb_per_unit=0,
        basis=Basis.PER_KG_PRODUCT,
        default_dry_matter_percent=88,
        structure_value_per_kg_ds=0.12,
        category=FeedCategory.CONCENTRATE,
    )


@pytest.fixture
def feed_catalog(grass_silage, maize_silage, pellets):
    return {feed.name: feed for feed in (grass_silage, maize_silage, pellets)}


@pytest.fixture
def mature_cow():
    """Third-lactation cow at day 100, open, 30 kg milk."""
    return PhysiologicalState(
        weight_kg=650,
        parity=3,
        days_in_milk=100,
        days_pregnant=0,
        milk_yield_kg=30,
        fat_percent=4.4,
        protein_percent=3.5,
    )
