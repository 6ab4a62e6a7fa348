"""Conversion of entered feed amounts to a dry matter basis."""

import math

from voerbalans.feeds.models import Basis


def to_dry_matter_kg(amount: float, dry_matter_percent: float, basis: Basis | str) -> float:
    """
    Convert an entered feed amount to kg dry matter (DS).

    Feeds tabulated per kg DS are already entered in kg DS. Feeds tabulated
    per kg product are scaled by their dry matter content. Nutrient values are
    always per kg DS, so callers multiply the result by the tabulated value
    regardless of basis.

    Args:
        amount: Entered amount in kg (product or DS, depending on basis)
        dry_matter_percent: Dry matter content, 0-100
        basis: Basis enum, its string value, or the shorthand "DS" / "product"
            (case-insensitive)

    Returns:
        kg DS, or 0.0 for a non-positive or non-finite amount

    Raises:
        ValueError: If basis names neither basis
    """
    if not math.isfinite(amount) or amount <= 0:
        return 0.0
    if Basis(basis) is Basis.PER_KG_DS:
        return amount
    if not math.isfinite(dry_matter_percent):
        return 0.0
    return amount * dry_matter_percent / 100
