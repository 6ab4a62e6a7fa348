"""
Daily energy (VEM) and protein (DVE) requirements of dairy cows.

The VEM requirement is built from independent components:
- Maintenance on metabolic body weight (BW^0.75)
- Milk production on fat/protein corrected milk (FPCM)
- Youth growth in early lactation for parity 1 and 2
- Late-gestation pregnancy supplement in step bands
- Flat grazing activity supplement

The DVE requirement follows the same structure with a quadratic production
term on milk protein yield.

Animals without milk-recording data (young stock, reference groups) use the
profile-target model instead: fixed targets from an AnimalProfile plus the
grazing supplement.

References:
-----------
[1] CVB (2025). Tabellenboek Veevoeding, Tables 3.1-3.5 and 4.1-4.4.
[2] CVB Documentation Report 79 (2022), energy requirement of dairy cows.
[3] CVB Documentation Report 80 (2022), protein requirement of dairy cows.
"""

from dataclasses import dataclass, field

from voerbalans.animal.state import AnimalProfile, PhysiologicalState
from voerbalans.core.standards import (
    CVB_ENERGY,
    CVB_FPCM,
    CVB_GROWTH,
    CVB_PREGNANCY_BANDS,
    CVB_PROTEIN,
    EnergyStandard,
    FpcmCoefficients,
    GrowthSupplement,
    PregnancyBand,
    ProteinStandard,
)

# -----------------------------------------------------------------------------
# VEM Components
# -----------------------------------------------------------------------------


def calculate_fpcm(
    milk_kg: float,
    fat_percent: float,
    protein_percent: float,
    coefficients: FpcmCoefficients = CVB_FPCM,
) -> float:
    """
    Fat and protein corrected milk (kg/day).

    Args:
        milk_kg: Milk yield (kg/day)
        fat_percent: Milk fat (%)
        protein_percent: Milk protein (%)
        coefficients: FPCM coefficients (default: CVB 2025)

    Returns:
        FPCM in kg/day, e.g. 41 kg at 4.60% fat / 3.75% protein -> 44.92 kg
    """
    c = coefficients
    return (c.base + c.fat * fat_percent + c.protein * protein_percent) * milk_kg


def maintenance_vem(weight_kg: float, lactating: bool = True, standard: EnergyStandard = CVB_ENERGY) -> float:
    """Maintenance requirement on metabolic weight (VEM/day)."""
    coefficient = standard.maintenance_lactating if lactating else standard.maintenance_dry
    return coefficient * weight_kg**standard.metabolic_exponent


def production_vem(fpcm: float, standard: EnergyStandard = CVB_ENERGY) -> float:
    """Milk production requirement (VEM/day)."""
    return standard.vem_per_kg_fpcm * fpcm


def growth_supplement_vem(parity: int, days_in_milk: int, growth: GrowthSupplement = CVB_GROWTH) -> float:
    """
    Youth growth supplement (VEM/day).

    Cows in their first or second lactation are still growing. The supplement
    applies up to and including day 100 of lactation; from parity 3 on there is
    no supplement.
    """
    if days_in_milk > growth.max_days_in_milk:
        return 0.0
    if parity == 1:
        return growth.vem_parity_1
    if parity == 2:
        return growth.vem_parity_2
    return 0.0


def pregnancy_supplement_vem(days_pregnant: int, bands: tuple[PregnancyBand, ...] = CVB_PREGNANCY_BANDS) -> float:
    """
    Late-gestation supplement (VEM/day) from the highest band reached.

    Band lower bounds are inclusive; the last band is unbounded.
    """
    supplement = 0.0
    for band in bands:
        if days_pregnant >= band.from_day:
            supplement = band.vem
    return supplement


def grazing_supplement_vem(grazing: bool, standard: EnergyStandard = CVB_ENERGY) -> float:
    """Walking and grazing activity (VEM/day)."""
    return standard.grazing_activity_vem if grazing else 0.0


# -----------------------------------------------------------------------------
# DVE Components
# -----------------------------------------------------------------------------


def protein_yield_grams(milk_kg: float, protein_percent: float) -> float:
    """Milk protein yield (g/day)."""
    return milk_kg * protein_percent / 100 * 1000


def dve_requirement(
    weight_kg: float,
    milk_kg: float,
    protein_percent: float,
    parity: int,
    days_in_milk: int,
    days_pregnant: int,
    protein: ProteinStandard = CVB_PROTEIN,
    growth: GrowthSupplement = CVB_GROWTH,
) -> dict[str, float]:
    """
    DVE requirement components (g/day).

    Returns:
        Dict with maintenance, production, growth, pregnancy and total
    """
    py = protein_yield_grams(milk_kg, protein_percent)
    maintenance = protein.maintenance_base + protein.maintenance_per_kg_bw * weight_kg
    production = protein.production_linear * py + protein.production_quadratic * py**2

    growth_dve = 0.0
    if days_in_milk <= growth.max_days_in_milk:
        if parity == 1:
            growth_dve = growth.dve_parity_1
        elif parity == 2:
            growth_dve = growth.dve_parity_2

    pregnancy = protein.pregnancy_dve if days_pregnant >= protein.pregnancy_start_day else 0.0

    return {
        "maintenance": maintenance,
        "production": production,
        "growth": growth_dve,
        "pregnancy": pregnancy,
        "total": maintenance + production + growth_dve + pregnancy,
    }


# -----------------------------------------------------------------------------
# Combined Requirement
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class RequirementResult:
    """Daily requirement of one animal."""

    vem: float
    dve: float  # grams
    model: str  # "physiological" or "profile"
    fpcm: float | None = None
    vem_breakdown: dict[str, float] = field(default_factory=dict)
    dve_breakdown: dict[str, float] = field(default_factory=dict)
    max_dry_matter_kg: float | None = None


def calculate_requirements(
    state: PhysiologicalState,
    energy: EnergyStandard = CVB_ENERGY,
    protein: ProteinStandard = CVB_PROTEIN,
) -> RequirementResult:
    """
    Calculate the daily VEM and DVE requirement from a physiological state.

    Args:
        state: Validated physiological state of the cow
        energy: Energy standard (default: CVB 2025)
        protein: Protein standard (default: CVB 2025)

    Returns:
        RequirementResult with totals and per-component breakdowns
    """
    fpcm = calculate_fpcm(state.milk_yield_kg, state.fat_percent, state.protein_percent)

    vem_breakdown = {
        "maintenance": maintenance_vem(state.weight_kg, state.lactating, energy),
        "production": production_vem(fpcm, energy),
        "growth": growth_supplement_vem(state.parity, state.days_in_milk),
        "pregnancy": pregnancy_supplement_vem(state.days_pregnant),
        "grazing": grazing_supplement_vem(state.grazing, energy),
    }

    dve = dve_requirement(
        weight_kg=state.weight_kg,
        milk_kg=state.milk_yield_kg,
        protein_percent=state.protein_percent,
        parity=state.parity,
        days_in_milk=state.days_in_milk,
        days_pregnant=state.days_pregnant,
        protein=protein,
    )
    total_dve = dve.pop("total")

    return RequirementResult(
        vem=sum(vem_breakdown.values()),
        dve=total_dve,
        model="physiological",
        fpcm=fpcm,
        vem_breakdown=vem_breakdown,
        dve_breakdown=dve,
    )


def requirement_from_profile(
    profile: AnimalProfile,
    grazing: bool = False,
    energy: EnergyStandard = CVB_ENERGY,
) -> RequirementResult:
    """
    Requirement from a reference profile's fixed targets.

    Used when no milk-recording data are available. The grazing supplement is
    the only adjustment applied on top of the targets.
    """
    vem_breakdown = {
        "profile_target": profile.vem_target,
        "grazing": grazing_supplement_vem(grazing, energy),
    }
    return RequirementResult(
        vem=sum(vem_breakdown.values()),
        dve=profile.dve_target_grams,
        model="profile",
        vem_breakdown=vem_breakdown,
        dve_breakdown={"profile_target": profile.dve_target_grams},
        max_dry_matter_kg=profile.max_dry_matter_kg,
    )


COMPONENT_LABELS = {
    "maintenance": "Maintenance",
    "production": "Milk production",
    "growth": "Youth growth",
    "pregnancy": "Pregnancy",
    "grazing": "Grazing activity",
    "profile_target": "Profile target",
}


def explain_requirements(result: RequirementResult) -> list[str]:
    """Human-readable breakdown lines, skipping zero components."""
    lines = []
    if result.fpcm is not None:
        lines.append(f"FPCM: {result.fpcm:.2f} kg")
    for key, vem in result.vem_breakdown.items():
        if vem:
            lines.append(f"{COMPONENT_LABELS.get(key, key)}: {vem:,.0f} VEM")
    lines.append(f"Total: {result.vem:,.0f} VEM")
    for key, dve in result.dve_breakdown.items():
        if dve:
            lines.append(f"{COMPONENT_LABELS.get(key, key)}: {dve:,.0f} g DVE")
    lines.append(f"Total: {result.dve:,.0f} g DVE")
    return lines
