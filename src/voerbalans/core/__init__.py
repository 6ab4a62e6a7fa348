"""Core module - reference standards, configuration, units and errors."""

from voerbalans.core import standards, units
from voerbalans.core.app_logging import configure_logging
from voerbalans.core.config import DEFAULT_CATALOG_PATH, settings
from voerbalans.core.errors import CatalogError, InvalidInputError, VoerbalansError
from voerbalans.core.units import (
    format_mass,
    format_percent,
    format_vem,
    get_mass_unit,
    kg_to_tonnes,
    mass_to_display,
    tonnes_to_kg,
)

__all__ = [
    "standards",
    "units",
    "settings",
    "DEFAULT_CATALOG_PATH",
    "configure_logging",
    # Errors
    "VoerbalansError",
    "InvalidInputError",
    "CatalogError",
    # Unit conversion helpers
    "kg_to_tonnes",
    "tonnes_to_kg",
    "mass_to_display",
    "format_mass",
    "format_vem",
    "format_percent",
    "get_mass_unit",
]
