from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# .env file lives in the project root (parent of src/)
# Only use if it exists (CI uses environment variables directly)
# Path: core/config.py -> voerbalans -> src -> project root -> .env
_ENV_FILE = Path(__file__).parent.parent.parent.parent / ".env"
_ENV_FILE = _ENV_FILE if _ENV_FILE.exists() else None

# Catalog shipped with the package
DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "data" / "catalog.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="VOERBALANS_",
        extra="ignore",
    )

    # Feed and animal-profile catalog (JSON)
    catalog_path: Path = DEFAULT_CATALOG_PATH

    # Logging level for the voerbalans logger
    log_level: str = "WARNING"

    # Display units for CLI output ("metric" = tonnes, "kg" = kilograms)
    # Note: the engine always computes in kg internally
    display_units: Literal["metric", "kg"] = "metric"

    # Minimum structure value (SW per kg DS) of the reference standard in use
    # CVB 2025 uses 1.00; some advisors work with 0.90 for high-yield herds
    structure_minimum_per_kg_ds: float = 1.00

    # Energy density of the standard concentrate used to express VEM gaps (VEM/kg DS)
    concentrate_vem_per_kg_ds: float = 1000.0

    # Price of the standard concentrate (euro per tonne DS), used for cost estimates
    concentrate_price_per_ton_ds: float = 350.0


settings = Settings()
