"""Feed catalog value objects.

Nutrient values follow CVB feed table conventions:
- VEM: feed units for lactation (energy), per unit of basis
- DVE: intestinally digestible protein, grams per unit of basis
- OEB: rumen degradable protein balance, grams per unit of basis (signed)
- SW: structure value, per kg dry matter (roughage only)
- VW: filling value, per kg dry matter (intake capacity check)

Roughage is usually tabulated per kg DS; concentrates and byproducts are often
sold and tabulated per kg product.
"""

import math
from dataclasses import dataclass
from enum import Enum

from voerbalans.core.errors import InvalidInputError


class Basis(Enum):
    """Reference quantity that a feed's nutrient values are expressed against."""

    PER_KG_PRODUCT = "per kg product"
    PER_KG_DS = "per kg DS"

    @classmethod
    def _missing_(cls, value):
        # Accept "DS" / "product" shorthand and any casing of the full names
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value.lower(), member.value.lower().removeprefix("per kg ")):
                    return member
        return None


class FeedCategory(Enum):
    ROUGHAGE = "roughage"
    CONCENTRATE = "concentrate"
    BYPRODUCT = "byproduct"
    MINERAL = "mineral"


@dataclass(frozen=True)
class FeedDefinition:
    """A catalog feed with its nutrient values.

    Raises:
        InvalidInputError: dry matter outside (0, 100] or negative energy value
    """

    name: str
    display_name: str
    vem_per_unit: float
    dve_per_unit: float  # grams
    oeb_per_unit: float  # grams, may be negative
    basis: Basis
    default_dry_matter_percent: float
    structure_value_per_kg_ds: float | None = None
    filling_value_per_kg_ds: float | None = None
    category: FeedCategory = FeedCategory.ROUGHAGE

    def __post_init__(self):
        if not self.name:
            raise InvalidInputError("name", self.name, "feed name is required")
        dm = self.default_dry_matter_percent
        if not math.isfinite(dm) or not 0 < dm <= 100:
            raise InvalidInputError("default_dry_matter_percent", dm, "must be in (0, 100]")
        if not math.isfinite(self.vem_per_unit) or self.vem_per_unit < 0:
            raise InvalidInputError("vem_per_unit", self.vem_per_unit, "must be >= 0")
        if self.structure_value_per_kg_ds is not None and self.structure_value_per_kg_ds < 0:
            raise InvalidInputError("structure_value_per_kg_ds", self.structure_value_per_kg_ds, "must be >= 0")

    @classmethod
    def from_dict(cls, data: dict) -> "FeedDefinition":
        """Create from a catalog record (JSON object)."""
        try:
            return cls(
                name=data["name"],
                display_name=data.get("display_name") or data["name"],
                vem_per_unit=float(data["vem"]),
                dve_per_unit=float(data["dve"]),
                oeb_per_unit=float(data["oeb"]),
                basis=Basis(data.get("basis", Basis.PER_KG_DS.value)),
                default_dry_matter_percent=float(data.get("dry_matter_percent", 100.0)),
                structure_value_per_kg_ds=data.get("structure_value"),
                filling_value_per_kg_ds=data.get("filling_value"),
                category=FeedCategory(data.get("category", FeedCategory.ROUGHAGE.value)),
            )
        except KeyError as e:
            raise InvalidInputError(str(e.args[0]), None, "missing from feed record") from e

    @property
    def is_per_kg_ds(self) -> bool:
        return self.basis is Basis.PER_KG_DS


@dataclass
class FeedInput:
    """Amount of one feed in a ration, as entered by the user.

    amount_kg is in the feed's basis: kg DS for per-kg-DS feeds, kg product
    otherwise. A missing dry_matter_percent means "use the feed default".
    """

    feed_name: str
    amount_kg: float
    dry_matter_percent: float | None = None

    @classmethod
    def for_feed(cls, feed: FeedDefinition, amount_kg: float, dry_matter_percent: float | None = None) -> "FeedInput":
        """Create an input for a catalog feed, filling in the default dry matter."""
        if dry_matter_percent is None:
            dry_matter_percent = feed.default_dry_matter_percent
        return cls(feed_name=feed.name, amount_kg=amount_kg, dry_matter_percent=dry_matter_percent)
