"""Unit conversion utilities using pint.

All internal data is stored in base units:
- Mass: kilograms (kg), usually kg dry matter (DS)
- Energy: VEM (a dimensionless feed unit, counted as-is)
- Protein: grams (g)

Display units are controlled by settings.display_units:
- "metric": Display masses in tonnes
- "kg": Display as stored

Note: VEM is not a physical unit, so it is formatted directly rather than
registered with pint.
"""

import math

import pint

from voerbalans.core.config import settings

# Create a unit registry (lazily initialized)
_ureg: pint.UnitRegistry | None = None


def get_ureg() -> pint.UnitRegistry:
    """Get the pint unit registry (lazily initialized)."""
    global _ureg
    if _ureg is None:
        _ureg = pint.UnitRegistry()
    return _ureg


# =============================================================================
# Mass Conversions
# =============================================================================


def kg_to_tonnes(kg: float) -> float:
    """Convert kilograms to metric tonnes."""
    ureg = get_ureg()
    return (kg * ureg.kilogram).to(ureg.tonne).magnitude


def tonnes_to_kg(tonnes: float) -> float:
    """Convert metric tonnes to kilograms."""
    ureg = get_ureg()
    return (tonnes * ureg.tonne).to(ureg.kilogram).magnitude


def mass_to_display(kg: float) -> tuple[float, str]:
    """Convert kilograms to display units.

    Args:
        kg: Mass in kilograms

    Returns:
        Tuple of (value, unit_symbol) in display units
    """
    if settings.display_units == "metric":
        return (kg_to_tonnes(kg), "t")
    return (kg, "kg")


def format_mass(kg: float, decimals: int | None = None, suffix: str = "DS") -> str:
    """Format a mass for display.

    Args:
        kg: Mass in kilograms
        decimals: Number of decimal places (default: 1 for tonnes, 0 for kg)
        suffix: Basis label appended after the unit ("DS", "product", or "")

    Returns:
        Formatted string like "448.0 t DS" or "448,000 kg DS"
    """
    value, unit = mass_to_display(kg)

    if decimals is None:
        decimals = 1 if unit == "t" else 0

    text = f"{value:,.{decimals}f} {unit}"
    return f"{text} {suffix}" if suffix else text


# =============================================================================
# Feed Unit Formatting
# =============================================================================


def format_vem(vem: float) -> str:
    """Format an energy amount, switching to millions for farm-scale values.

    Returns:
        Formatted string like "23,750 VEM" or "407.4 million VEM"
    """
    if abs(vem) >= 1_000_000:
        return f"{vem / 1_000_000:,.1f} million VEM"
    return f"{vem:,.0f} VEM"


def format_percent(value: float | None, decimals: int = 1) -> str:
    """Format a percentage, rendering undefined values as a dash."""
    if value is None or not math.isfinite(value):
        return "—"
    return f"{value:.{decimals}f}%"


def get_mass_unit() -> str:
    """Get the mass unit symbol for current display settings."""
    return "t" if settings.display_units == "metric" else "kg"
