"""Feed and animal-profile catalog provider."""

from voerbalans.data.catalog import Catalog, load_catalog, parse_catalog

__all__ = [
    "Catalog",
    "load_catalog",
    "parse_catalog",
]
