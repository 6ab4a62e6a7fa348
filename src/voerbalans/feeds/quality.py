"""
Silage and hay quality assessment from lab-analysis values.

Scores a roughage lot against practical quality bands and attaches warnings,
feeding recommendations and an estimated milk-yield impact. Feed type is
detected from the product name (English and Dutch keywords).

All values are per kg DS.

References:
-----------
[1] CVB (2025). Tabellenboek Veevoeding, roughage quality averages.
[2] Practical guidance from Dutch feed advisors (silage quality bands).
"""

from dataclasses import dataclass, field
from enum import Enum

from voerbalans.core.standards import OEB_DENSITY, OebDensityThresholds
from voerbalans.ration.classify import OebDensityStatus, classify_oeb_density

# -----------------------------------------------------------------------------
# Quality Bands
# -----------------------------------------------------------------------------

# Grass silage VEM bands
GRASS_VEM_EXCELLENT = 940
GRASS_VEM_GOOD = 900
GRASS_VEM_AVERAGE = 860
GRASS_OEB_HIGH = 50  # g/kg DS - above this, nitrogen is lost via urine

# Maize silage bands (VEM, OEB lower bound exclusive)
MAIZE_EXCELLENT = (1000, -30)
MAIZE_GOOD = (970, -40)
MAIZE_VEM_AVERAGE = 940
MAIZE_OEB_LOW = -30  # g/kg DS
MAIZE_OEB_VERY_LOW = -40  # g/kg DS, flagged on average-scoring lots

# Hay VEM bands
HAY_VEM_GOOD = 800
HAY_VEM_AVERAGE = 750

# Estimated milk loss per cow per day for sub-par lots
MILK_IMPACT = {
    "grass": {"poor": "-1.5 to -2.5 kg milk", "average": "-0.5 to -1.0 kg milk"},
    "maize": {"poor": "-1.0 to -2.0 kg milk", "average": "-0.5 to -1.0 kg milk"},
}

FEED_TYPE_KEYWORDS = {
    "grass": ("grass", "gras"),
    "maize": ("maize", "maïs", "mais"),
    "hay": ("hay", "hooi"),
}


class QualityScore(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"
    UNKNOWN = "unknown"


QUALITY_BADGES = {
    QualityScore.EXCELLENT: "Excellent",
    QualityScore.GOOD: "Good",
    QualityScore.AVERAGE: "Average",
    QualityScore.POOR: "Poor",
    QualityScore.UNKNOWN: "Unknown",
}


@dataclass(frozen=True)
class QualityAssessment:
    """Quality verdict for one roughage lot."""

    score: QualityScore
    feed_type: str  # "grass", "maize", "hay" or "unknown"
    warnings: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    impact_estimate: str | None = None

    @property
    def badge(self) -> str:
        return QUALITY_BADGES[self.score]


def detect_feed_type(name: str) -> str:
    """Detect roughage type from a product name. Grass wins over maize over hay."""
    lowered = name.lower()
    for feed_type, keywords in FEED_TYPE_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return feed_type
    return "unknown"


# -----------------------------------------------------------------------------
# Per-Type Assessment
# -----------------------------------------------------------------------------


def assess_grass_silage(
    vem: float,
    oeb: float,
    oeb_thresholds: OebDensityThresholds = OEB_DENSITY,
) -> QualityAssessment:
    """Score grass silage on energy, then flag OEB extremes."""
    warnings = []
    recommendations = []

    if vem >= GRASS_VEM_EXCELLENT:
        score = QualityScore.EXCELLENT
    elif vem >= GRASS_VEM_GOOD:
        score = QualityScore.GOOD
    elif vem >= GRASS_VEM_AVERAGE:
        score = QualityScore.AVERAGE
        warnings.append(f"Low energy ({vem:g} VEM). Raises the concentrate requirement.")
    else:
        score = QualityScore.POOR
        warnings.append(f"Very low energy ({vem:g} VEM)! Expect -1.5 to -2.5 kg milk per cow.")
        recommendations.append("Consider supplementing energy-rich roughage or raising concentrate.")

    if oeb < oeb_thresholds.warning_below:
        warnings.append(f"Low OEB ({oeb:g}). Protein balance is suboptimal.")
        recommendations.append("Add protein-rich concentrate (e.g. rapeseed meal).")
    elif oeb > GRASS_OEB_HIGH:
        warnings.append(f"High OEB ({oeb:g}). Possible nitrogen loss.")

    return QualityAssessment(
        score=score,
        feed_type="grass",
        warnings=warnings,
        recommendations=recommendations,
        impact_estimate=MILK_IMPACT["grass"].get(score.value),
    )


def assess_maize_silage(
    vem: float,
    oeb: float,
    oeb_thresholds: OebDensityThresholds = OEB_DENSITY,
) -> QualityAssessment:
    """Score maize silage on energy and OEB combined.

    Maize is naturally protein-poor, so OEB carries more weight than for grass.
    """
    warnings = []
    recommendations = []

    if vem >= MAIZE_EXCELLENT[0] and oeb > MAIZE_EXCELLENT[1]:
        score = QualityScore.EXCELLENT
    elif vem >= MAIZE_GOOD[0] and oeb > MAIZE_GOOD[1]:
        score = QualityScore.GOOD
    elif vem >= MAIZE_VEM_AVERAGE:
        score = QualityScore.AVERAGE
        if oeb < MAIZE_OEB_VERY_LOW:
            warnings.append(f"Very low OEB ({oeb:g}). Protein supplementation required.")
    else:
        score = QualityScore.POOR
        warnings.append(f"Low energy ({vem:g} VEM) for maize. Expect -1.0 to -2.0 kg milk.")

    if classify_oeb_density(oeb, oeb_thresholds) is OebDensityStatus.CRITICAL:
        warnings.append(f"Critically low OEB ({oeb:g})! Increase protein-rich concentrate.")
        recommendations.append("Add at least 2 kg protein-rich concentrate per cow per day.")
    elif oeb < MAIZE_OEB_LOW:
        warnings.append(f"Low OEB ({oeb:g}). Protein balance is suboptimal.")
        recommendations.append("Consider protein-rich concentrate (rapeseed meal, soybean meal).")

    return QualityAssessment(
        score=score,
        feed_type="maize",
        warnings=warnings,
        recommendations=recommendations,
        impact_estimate=MILK_IMPACT["maize"].get(score.value),
    )


def assess_hay(vem: float) -> QualityAssessment:
    if vem >= HAY_VEM_GOOD:
        score = QualityScore.GOOD
    elif vem >= HAY_VEM_AVERAGE:
        score = QualityScore.AVERAGE
    else:
        score = QualityScore.POOR

    warnings = [f"Low energy ({vem:g} VEM) for hay."] if score is QualityScore.POOR else []
    return QualityAssessment(score=score, feed_type="hay", warnings=warnings)


def assess_feed_quality(name: str, vem: float, oeb: float, dve: float | None = None) -> QualityAssessment:
    """
    Assess a roughage lot by product name and lab values.

    Args:
        name: Product name, used to detect the feed type
        vem: Energy value (VEM/kg DS)
        oeb: Rumen degradable protein balance (g/kg DS)
        dve: Digestible protein (g/kg DS); reported but not scored

    Returns:
        QualityAssessment; unknown feed types score "unknown" without warnings
    """
    feed_type = detect_feed_type(name)
    if feed_type == "grass":
        return assess_grass_silage(vem, oeb)
    if feed_type == "maize":
        return assess_maize_silage(vem, oeb)
    if feed_type == "hay":
        return assess_hay(vem)
    return QualityAssessment(score=QualityScore.UNKNOWN, feed_type="unknown")
