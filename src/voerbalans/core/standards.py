"""
Reference standards for dairy cattle requirements and feed evaluation.

Every constant the engine uses lives in one table per formula family. Each
table carries a `source` citation so a value can be checked (and updated)
against the reference standard without touching calculation code. The
per-animal engine and the annual farm engine import the same objects.

References:
-----------
[1] CVB (2025). "Tabellenboek Veevoeding 2025 - Voedernormen landbouwhuisdieren
    en voederwaarde veevoeders". Energy: Tables 3.1-3.5. Protein: Tables 4.1-4.4.

[2] CVB Documentation Report 79 (2022). "Actualisatie energiebehoefte melkkoeien".
    Maintenance on metabolic weight (BW^0.75), 390 VEM per kg FPCM.

[3] CVB Documentation Report 80 (2022). "Eiwitbehoefte melkkoeien".
    DVE requirement quadratic in milk protein yield.

[4] Zom, R.L.G., et al. (2012). "Development of a model for the prediction of
    feed intake by dairy cows". Livestock Science 146:71-83.
    Basis of the CVB feed intake capacity (VOC) and filling value (VW) system.

[5] De Brabander, D.L., et al. (1999). "Structure value system for dairy cows".
    Minimum 1.00 SW per kg DS for healthy rumen function (CVB Table 6.1).

[6] CVB (2025), Table 7.1. OEB (rumen degradable protein balance) guidelines.

[7] Report 20 - Kwantitatieve Informatie Veehouderij (KWIN-V). Roughage
    yields and daily roughage demand per animal class, intensive farming.

[8] CVB (2025). Silage quality presets (maize and grass silage averages).

Note: "Practical guideline" thresholds (coverage bands, purchase policy) are
advisory policy rather than derived constants.
"""

from dataclasses import dataclass
from enum import Enum

# -----------------------------------------------------------------------------
# Energy (VEM) Requirements
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class EnergyStandard:
    """VEM requirement coefficients.

    Maintenance: coefficient × BW^exponent
    Production: vem_per_kg_fpcm × FPCM
    """

    name: str
    maintenance_lactating: float  # VEM per kg^0.75, lactating cows
    maintenance_dry: float  # VEM per kg^0.75, dry cows
    metabolic_exponent: float  # species-standard exponent
    vem_per_kg_fpcm: float  # VEM per kg fat/protein corrected milk
    grazing_activity_vem: float  # flat VEM/day for pasture activity
    source: str


CVB_ENERGY = EnergyStandard(
    name="CVB 2025 energy",
    maintenance_lactating=53.0,
    maintenance_dry=42.4,
    metabolic_exponent=0.75,
    vem_per_kg_fpcm=390.0,
    grazing_activity_vem=500.0,
    source="CVB 2025 Tables 3.1, 3.2, 3.5 [1]; CVB Report 79 [2]",
)


@dataclass(frozen=True)
class FpcmCoefficients:
    """FPCM = milk × (base + fat × fat% + protein × protein%)."""

    base: float
    fat: float
    protein: float
    source: str


CVB_FPCM = FpcmCoefficients(
    base=0.337,
    fat=0.116,
    protein=0.06,
    source="CVB 2025 FPCM definition [1]",
)


@dataclass(frozen=True)
class GrowthSupplement:
    """Youth growth supplement for cows still growing in early lactation.

    Applies when days in milk <= max_days_in_milk; parity 3+ gets nothing.
    """

    max_days_in_milk: int  # inclusive cutoff
    vem_parity_1: float
    vem_parity_2: float
    dve_parity_1: float  # grams
    dve_parity_2: float  # grams
    source: str


CVB_GROWTH = GrowthSupplement(
    max_days_in_milk=100,
    vem_parity_1=625.0,
    vem_parity_2=325.0,
    dve_parity_1=64.0,
    dve_parity_2=37.0,
    source="CVB 2025 Tables 3.4, 4.4 [1]",
)


@dataclass(frozen=True)
class PregnancyBand:
    """Late-gestation VEM supplement band. Lower bound is inclusive."""

    from_day: int
    vem: float
    source: str


# Bands in ascending order; the last band is unbounded above
CVB_PREGNANCY_BANDS: tuple[PregnancyBand, ...] = (
    PregnancyBand(from_day=190, vem=1000.0, source="CVB 2025 Table 3.3 [1], fetal growth from day 190"),
    PregnancyBand(from_day=220, vem=2000.0, source="CVB 2025 Table 3.3 [1]"),
    PregnancyBand(from_day=250, vem=3000.0, source="CVB 2025 Table 3.3 [1], final 30 days"),
)

# -----------------------------------------------------------------------------
# Protein (DVE) Requirements
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ProteinStandard:
    """DVE requirement coefficients (grams/day).

    Maintenance: maintenance_base + maintenance_per_kg_bw × BW
    Production: linear × PY + quadratic × PY², PY = milk protein yield (g/day)
    """

    maintenance_base: float
    maintenance_per_kg_bw: float
    production_linear: float
    production_quadratic: float
    pregnancy_start_day: int
    pregnancy_dve: float
    source: str


CVB_PROTEIN = ProteinStandard(
    maintenance_base=54.0,
    maintenance_per_kg_bw=0.1,
    production_linear=1.396,
    production_quadratic=0.000195,
    pregnancy_start_day=190,
    pregnancy_dve=150.0,
    source="CVB 2025 Tables 4.1-4.3 [1]; CVB Report 80 [3]",
)

# -----------------------------------------------------------------------------
# Intake Capacity (VOC)
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class IntakeCapacityStandard:
    """
    Feed intake capacity (VOC) coefficients.

    VOC = [a0 + a1 × (1 - exp(-rho_a × a))] × [1 - beta × exp(-rho_b × d)] × [1 - delta_220 × (g/220)²]
    with a = (parity - 1) + DIM/365, d = DIM, g = days pregnant.
    """

    alpha_0: float  # base capacity (first-lactation heifer)
    alpha_1: float  # additional capacity at maturity
    rho_alpha: float  # maturity speed
    beta: float  # post-calving appetite dip
    rho_beta: float  # appetite recovery speed
    delta_220: float  # pregnancy reduction at 220 days
    vw_to_kg_ds: float  # approximate kg DS per VW unit for a mixed ration
    warning_percent: float  # VW saturation above this is a warning
    exceeded_percent: float  # VW saturation above this cannot be eaten
    source: str


CVB_INTAKE = IntakeCapacityStandard(
    alpha_0=8.743,
    alpha_1=3.563,
    rho_alpha=1.140,
    beta=0.3156,
    rho_beta=0.05889,
    delta_220=0.05529,
    vw_to_kg_ds=2.0,
    warning_percent=95.0,
    exceeded_percent=100.0,
    source="Zom et al. 2012 [4]; CVB 2025 Tables 5.1-5.3 [1]",
)

# Default filling value (VW per kg DS) when a feed record has none [4]
DEFAULT_FILLING_VALUE: dict[str, float] = {
    "roughage": 1.00,
    "concentrate": 0.45,
    "byproduct": 0.55,
    "mineral": 0.30,
}

# -----------------------------------------------------------------------------
# Balance Classification Thresholds
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class CoverageThresholds:
    """VEM/DVE coverage bands, percent of requirement."""

    surplus: float  # >= surplus
    ok: float  # >= ok
    warning: float  # >= warning, below is deficit
    target_met: float  # both VEM and DVE at or above this = target met
    source: str


COVERAGE = CoverageThresholds(
    surplus=110.0,
    ok=100.0,
    warning=90.0,
    target_met=95.0,
    source="CVB 2025 practical guidelines; 95% MPR validation (CRV/Qlip)",
)


@dataclass(frozen=True)
class StructureThresholds:
    """Structure value (SW) per kg DS bands."""

    minimum_per_kg_ds: float  # >= minimum is ok
    warning_fraction: float  # >= fraction × minimum is warning, below is deficient
    source: str

    @property
    def warning_per_kg_ds(self) -> float:
        return self.minimum_per_kg_ds * self.warning_fraction


STRUCTURE = StructureThresholds(
    minimum_per_kg_ds=1.00,
    warning_fraction=0.85,
    source="De Brabander et al. 1999 [5]; CVB 2025 Table 6.1",
)


@dataclass(frozen=True)
class OebRationThresholds:
    """OEB bands for whole-ration totals (g/day). Zero-centered, no requirement."""

    ok_minimum: float
    warning_minimum: float
    source: str


OEB_RATION = OebRationThresholds(
    ok_minimum=0.0,
    warning_minimum=-50.0,
    source="CVB 2025 Table 7.1 [6]",
)


@dataclass(frozen=True)
class OebDensityThresholds:
    """OEB bands for a single feed or crop (g per kg DS)."""

    warning_below: float
    critical_below: float
    source: str


OEB_DENSITY = OebDensityThresholds(
    warning_below=-20.0,
    critical_below=-50.0,
    source="CVB 2025 Table 7.1 [6], per kg DS silage guidance",
)

# -----------------------------------------------------------------------------
# Concentrate and Substitution
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ConcentrateStandard:
    """Reference production concentrate used to express nutrient gaps."""

    vem_per_kg_ds: float
    dve_per_kg_ds: float
    structure_value_per_kg_ds: float
    substitution_rate: float  # kg roughage DS displaced per kg concentrate DS
    tons_per_load: float  # bulk truck capacity
    price_per_ton_ds: float  # euro per tonne DS
    source: str


STANDARD_CONCENTRATE = ConcentrateStandard(
    vem_per_kg_ds=1000.0,
    dve_per_kg_ds=100.0,
    structure_value_per_kg_ds=0.0,
    substitution_rate=0.45,
    tons_per_load=30.0,
    price_per_ton_ds=350.0,
    source="CVB 2025 substitution 0.40-0.50 (mid 0.45); standard production pellet",
)

# -----------------------------------------------------------------------------
# Annual Farm Balance
# -----------------------------------------------------------------------------

DAYS_PER_YEAR = 365


class QualityTier(Enum):
    """Harvest quality tier for a crop-plan forecast."""

    TOP = "top"
    AVERAGE = "average"
    SOBER = "sober"


class HerdClass(Enum):
    """Animal classes in the annual demand projection."""

    MILKING_COW = "milking_cow"
    YOUNG_STOCK_JUNIOR = "young_stock_junior"  # < 1 year
    YOUNG_STOCK_SENIOR = "young_stock_senior"  # > 1 year


@dataclass(frozen=True)
class CropQuality:
    """Nutrient density of a crop's silage, per kg DS."""

    vem: float
    dve: float
    oeb: float
    structure_value: float


@dataclass(frozen=True)
class TierPreset:
    """Silage quality expected for one quality tier."""

    name: str
    maize: CropQuality
    grass: CropQuality
    grass_spring_vem: float  # first cut (May): high energy, low structure
    grass_summer_vem: float  # second+ cuts (July-Aug): lower energy, high structure
    source: str


QUALITY_PRESETS: dict[QualityTier, TierPreset] = {
    QualityTier.TOP: TierPreset(
        name="Top quality",
        maize=CropQuality(vem=990, dve=52, oeb=-40, structure_value=1.65),
        grass=CropQuality(vem=960, dve=75, oeb=30, structure_value=2.80),
        grass_spring_vem=980,
        grass_summer_vem=900,
        source="CVB 2025 silage averages [8], top decile",
    ),
    QualityTier.AVERAGE: TierPreset(
        name="Average",
        maize=CropQuality(vem=950, dve=48, oeb=-45, structure_value=1.60),
        grass=CropQuality(vem=920, dve=70, oeb=20, structure_value=2.60),
        grass_spring_vem=950,
        grass_summer_vem=880,
        source="CVB 2025 silage averages [8]",
    ),
    QualityTier.SOBER: TierPreset(
        name="Sober",
        maize=CropQuality(vem=900, dve=44, oeb=-50, structure_value=1.50),
        grass=CropQuality(vem=880, dve=65, oeb=10, structure_value=2.40),
        grass_spring_vem=910,
        grass_summer_vem=850,
        source="CVB 2025 silage averages [8], bottom quartile",
    ),
}

# Share of annual grass yield harvested as first (spring) cut
GRASS_SPRING_CUT_FRACTION = 0.40

# Roughage demand per animal (kg DS/day) [7]
ROUGHAGE_DEMAND_KG_DS: dict[HerdClass, float] = {
    HerdClass.MILKING_COW: 15.0,
    HerdClass.YOUNG_STOCK_JUNIOR: 5.0,
    HerdClass.YOUNG_STOCK_SENIOR: 8.0,
}

# Young stock energy demand (VEM/day), roughage demand at ~900 VEM/kg DS [7]
YOUNG_STOCK_DAILY_VEM: dict[HerdClass, float] = {
    HerdClass.YOUNG_STOCK_JUNIOR: 4500.0,
    HerdClass.YOUNG_STOCK_SENIOR: 7200.0,
}


@dataclass(frozen=True)
class Byproduct:
    """Purchasable roughage replacement."""

    key: str
    name: str
    dry_matter_percent: float
    tons_per_load: float
    reason: str  # template, may contain {sw} and {oeb}


BYPRODUCTS: dict[str, Byproduct] = {
    "brewers_grains": Byproduct(
        key="brewers_grains",
        name="Brewers' grains",
        dry_matter_percent=22.0,
        tons_per_load=30.0,
        reason="Roughage is low in structure (SW {sw}) and protein (OEB {oeb}). Brewers' grains fill both gaps.",
    ),
    "soybean_hulls": Byproduct(
        key="soybean_hulls",
        name="Soybean hulls",
        dry_matter_percent=90.0,
        tons_per_load=25.0,
        reason="Roughage has a negative OEB ({oeb}). Soybean hulls are protein rich.",
    ),
    "maize_silage": Byproduct(
        key="maize_silage",
        name="Extra maize silage",
        dry_matter_percent=100.0,
        tons_per_load=35.0,
        reason="General roughage shortage. Extra maize silage is the most cost-effective option.",
    ),
}


@dataclass(frozen=True)
class PurchasePolicy:
    """Decision thresholds for the purchase recommendation (advisory policy)."""

    low_structure_below: float  # crop-mix SW per kg DS
    negative_oeb_below: float  # crop-mix OEB g/kg DS
    very_negative_oeb_below: float  # crop-mix OEB g/kg DS
    source: str


PURCHASE_POLICY = PurchasePolicy(
    low_structure_below=2.0,
    negative_oeb_below=0.0,
    very_negative_oeb_below=-20.0,
    source="Advisory practice; OEB per kg DS bands from CVB 2025 Table 7.1 [6]",
)
