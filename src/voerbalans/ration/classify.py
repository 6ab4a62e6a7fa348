"""
Status classifiers for nutrient supply.

Coverage bands (percent of requirement):
- surplus: >= 110
- ok: >= 100
- warning: >= 90
- deficit: below 90
- not_applicable: requirement is zero or undefined

OEB is classified on two scales that must not be mixed:
- ration totals (g/day), zero-centered: OebStatus
- feed or crop densities (g/kg DS): OebDensityStatus
"""

import math
from enum import Enum

from voerbalans.core.standards import (
    COVERAGE,
    OEB_DENSITY,
    OEB_RATION,
    STRUCTURE,
    CoverageThresholds,
    OebDensityThresholds,
    OebRationThresholds,
    StructureThresholds,
)


class CoverageStatus(Enum):
    SURPLUS = "surplus"
    OK = "ok"
    WARNING = "warning"
    DEFICIT = "deficit"
    NOT_APPLICABLE = "not_applicable"


class StructureStatus(Enum):
    OK = "ok"
    WARNING = "warning"
    DEFICIENT = "deficient"


class OebStatus(Enum):
    """OEB status of a whole ration (g/day totals)."""

    OK = "ok"
    WARNING = "warning"
    DEFICIT = "deficit"


class OebDensityStatus(Enum):
    """OEB status of a single feed or crop (g/kg DS)."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


class IntakeStatus(Enum):
    OK = "ok"
    WARNING = "warning"
    EXCEEDED = "exceeded"


# -----------------------------------------------------------------------------
# Classifiers
# -----------------------------------------------------------------------------


def coverage_percent(supply: float, requirement: float) -> float | None:
    """Supply as a percentage of requirement, None when the requirement is not positive."""
    if requirement is None or not math.isfinite(requirement) or requirement <= 0:
        return None
    return supply / requirement * 100


def classify_coverage(coverage: float | None, thresholds: CoverageThresholds = COVERAGE) -> CoverageStatus:
    if coverage is None:
        return CoverageStatus.NOT_APPLICABLE
    if coverage >= thresholds.surplus:
        return CoverageStatus.SURPLUS
    elif coverage >= thresholds.ok:
        return CoverageStatus.OK
    elif coverage >= thresholds.warning:
        return CoverageStatus.WARNING
    else:
        return CoverageStatus.DEFICIT


def classify_structure(sw_per_kg_ds: float, thresholds: StructureThresholds = STRUCTURE) -> StructureStatus:
    if sw_per_kg_ds >= thresholds.minimum_per_kg_ds:
        return StructureStatus.OK
    elif sw_per_kg_ds >= thresholds.warning_per_kg_ds:
        return StructureStatus.WARNING
    else:
        return StructureStatus.DEFICIENT


def classify_oeb_ration(oeb_total_g: float, thresholds: OebRationThresholds = OEB_RATION) -> OebStatus:
    """Classify a ration's total OEB (g/day)."""
    if oeb_total_g >= thresholds.ok_minimum:
        return OebStatus.OK
    elif oeb_total_g >= thresholds.warning_minimum:
        return OebStatus.WARNING
    else:
        return OebStatus.DEFICIT


def classify_oeb_density(oeb_g_per_kg_ds: float, thresholds: OebDensityThresholds = OEB_DENSITY) -> OebDensityStatus:
    """Classify the OEB density of a feed or crop (g/kg DS)."""
    if oeb_g_per_kg_ds < thresholds.critical_below:
        return OebDensityStatus.CRITICAL
    elif oeb_g_per_kg_ds < thresholds.warning_below:
        return OebDensityStatus.WARNING
    else:
        return OebDensityStatus.OK

