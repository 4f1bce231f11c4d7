"""Application settings.

Values come from environment variables (or a ``.env`` file in the
working directory) and fall back to defaults suitable for local use.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Catalog settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Storage
    data_dir: Path = Field(default=ROOT / "data", alias="CATALOG_DATA_DIR")
    catalog_file: str = Field(default="products.json", alias="CATALOG_FILE")

    # Logging
    log_level: str = Field(default="WARNING", alias="CATALOG_LOG_LEVEL")

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / self.catalog_file


def get_settings() -> Settings:
    return Settings()
