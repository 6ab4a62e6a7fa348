"""Feed definitions, dry matter normalization and roughage quality.

This module provides:
- Feed catalog value objects (models.py)
- Conversion of entered amounts to a dry matter basis (normalize.py)
- Silage and hay quality assessment (quality.py)
"""

from voerbalans.feeds.models import Basis, FeedCategory, FeedDefinition, FeedInput
from voerbalans.feeds.normalize import to_dry_matter_kg
from voerbalans.feeds.quality import (
    QualityAssessment,
    QualityScore,
    assess_feed_quality,
    detect_feed_type,
)

__all__ = [
    # models
    "Basis",
    "FeedCategory",
    "FeedDefinition",
    "FeedInput",
    # normalize
    "to_dry_matter_kg",
    # quality
    "QualityAssessment",
    "QualityScore",
    "assess_feed_quality",
    "detect_feed_type",
]
