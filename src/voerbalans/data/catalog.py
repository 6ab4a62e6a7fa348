"""
Feed and animal-profile catalog.

The catalog is a JSON file with two lists:

    {
      "feeds": [{"name": ..., "vem": ..., "dve": ..., "oeb": ..., "basis": ..., ...}],
      "profiles": [{"name": ..., "weight_kg": ..., "vem_target": ..., ...}]
    }

A missing file is an empty catalog (nothing loaded yet); lookups then return
None. A file that exists but cannot be parsed raises CatalogError.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from voerbalans.animal.state import AnimalProfile
from voerbalans.core.config import DEFAULT_CATALOG_PATH
from voerbalans.core.errors import CatalogError, InvalidInputError
from voerbalans.feeds.models import FeedDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    feeds: dict[str, FeedDefinition] = field(default_factory=dict)
    profiles: dict[str, AnimalProfile] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.feeds and not self.profiles

    def get_feed(self, name: str) -> FeedDefinition | None:
        return self.feeds.get(name)

    def get_profile(self, name: str) -> AnimalProfile | None:
        return self.profiles.get(name)


def parse_catalog(data: dict) -> Catalog:
    """Build a Catalog from decoded JSON.

    Raises:
        CatalogError: record is missing fields or holds invalid values
    """
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog must be a JSON object, got {type(data).__name__}")

    try:
        feeds = [FeedDefinition.from_dict(record) for record in data.get("feeds", [])]
        profiles = [AnimalProfile.from_dict(record) for record in data.get("profiles", [])]
    except (InvalidInputError, TypeError, ValueError) as e:
        raise CatalogError(f"Invalid catalog record: {e}") from e

    return Catalog(
        feeds={feed.name: feed for feed in feeds},
        profiles={profile.name: profile for profile in profiles},
    )


def load_catalog(path: Path | None = None) -> Catalog:
    """
    Load the catalog from a JSON file.

    Args:
        path: Catalog file (default: the catalog shipped with the package)

    Returns:
        Catalog; empty when the file does not exist

    Raises:
        CatalogError: file exists but is not a valid catalog
    """
    if path is None:
        path = DEFAULT_CATALOG_PATH

    if not path.exists():
        logger.info("Catalog %s not found, using an empty catalog", path)
        return Catalog()

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Malformed catalog {path}: {e}") from e

    catalog = parse_catalog(data)
    logger.debug("Loaded %d feeds and %d profiles from %s", len(catalog.feeds), len(catalog.profiles), path)
    return catalog
