"""Animal descriptions used by the requirement calculator."""

import math
from dataclasses import dataclass

from voerbalans.core.errors import InvalidInputError

MAX_DAYS_IN_MILK = 500
MAX_DAYS_PREGNANT = 283  # average gestation length


@dataclass(frozen=True)
class AnimalProfile:
    """Reference animal template with fixed daily targets.

    Used for young stock and reference groups that have no milk-recording data.
    """

    name: str
    weight_kg: float
    vem_target: float
    dve_target_grams: float
    max_dry_matter_kg: float
    parity: int | None = None
    days_in_milk: int | None = None
    days_pregnant: int | None = None
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "AnimalProfile":
        """Create from a catalog record (JSON object)."""
        try:
            return cls(
                name=data["name"],
                weight_kg=float(data["weight_kg"]),
                vem_target=float(data["vem_target"]),
                dve_target_grams=float(data["dve_target_grams"]),
                max_dry_matter_kg=float(data["max_dry_matter_kg"]),
                parity=data.get("parity"),
                days_in_milk=data.get("days_in_milk"),
                days_pregnant=data.get("days_pregnant"),
                description=data.get("description", ""),
            )
        except KeyError as e:
            raise InvalidInputError(str(e.args[0]), None, "missing from profile record") from e


@dataclass(frozen=True)
class PhysiologicalState:
    """
    Physiological state of one cow, typically from a milk recording (MPR).

    Raises:
        InvalidInputError: any field missing or outside its plausible range
    """

    weight_kg: float
    parity: int
    days_in_milk: int
    days_pregnant: int
    milk_yield_kg: float
    fat_percent: float
    protein_percent: float
    grazing: bool = False
    lactating: bool = True

    def __post_init__(self):
        _require_finite("weight_kg", self.weight_kg)
        if self.weight_kg <= 0:
            raise InvalidInputError("weight_kg", self.weight_kg, "must be > 0")
        if not isinstance(self.parity, int) or isinstance(self.parity, bool) or self.parity < 1:
            raise InvalidInputError("parity", self.parity, "must be an integer >= 1")
        _require_finite("days_in_milk", self.days_in_milk)
        _require_finite("days_pregnant", self.days_pregnant)
        if not 0 <= self.days_in_milk <= MAX_DAYS_IN_MILK:
            raise InvalidInputError("days_in_milk", self.days_in_milk, f"must be in 0-{MAX_DAYS_IN_MILK}")
        if not 0 <= self.days_pregnant <= MAX_DAYS_PREGNANT:
            raise InvalidInputError("days_pregnant", self.days_pregnant, f"must be in 0-{MAX_DAYS_PREGNANT}")
        _require_finite("milk_yield_kg", self.milk_yield_kg)
        if self.milk_yield_kg < 0:
            raise InvalidInputError("milk_yield_kg", self.milk_yield_kg, "must be >= 0")
        for name in ("fat_percent", "protein_percent"):
            value = getattr(self, name)
            _require_finite(name, value)
            if not 0 <= value <= 100:
                raise InvalidInputError(name, value, "must be in 0-100")

    @classmethod
    def dry_cow(cls, weight_kg: float, parity: int, days_pregnant: int, grazing: bool = False) -> "PhysiologicalState":
        """Create the state of a dry (non-lactating) cow."""
        return cls(
            weight_kg=weight_kg,
            parity=parity,
            days_in_milk=0,
            days_pregnant=days_pregnant,
            milk_yield_kg=0.0,
            fat_percent=0.0,
            protein_percent=0.0,
            grazing=grazing,
            lactating=False,
        )


def _require_finite(name: str, value: float) -> None:
    if value is None or not math.isfinite(value):
        raise InvalidInputError(name, value, "is required")
