"""Mini README: Centralised configuration for Spendwise.

Structure:
    * SpendwiseSettings - Pydantic settings model read from ``SPENDWISE_*`` variables.
    * get_settings - cached accessor shared by the CLI and the web interface.

Usage:
    ``get_settings().storage_path`` tells the persistence layer where the
    serialised transaction list lives. Tests call ``get_settings.cache_clear()``
    after changing environment variables.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class SpendwiseSettings(BaseSettings):
    """Runtime configuration for the ledger service and CLI."""

    environment: str = Field(
        "development",
        description="Environment label; 'production' disables auto-reload when serving.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the persisted transaction store and exports.",
    )
    storage_file: Path = Field(
        Path("transactions.json"),
        description="Store file name; relative paths resolve inside the data directory.",
    )
    storage_key: str = Field(
        "transactions",
        description="Key under which the serialised transaction list is stored.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web service exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field("INFO", description="Root logging level name.")
    top_categories_limit: int = Field(
        5,
        description="Default number of entries returned by category rankings.",
        ge=1,
    )
    export_filename: Optional[str] = Field(
        "expenses.csv",
        description="File name used for CSV downloads and CLI exports.",
    )

    class Config:
        env_prefix = "SPENDWISE_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure the data directory expands user paths and exists."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"

    @property
    def storage_path(self) -> Path:
        """Absolute location of the transaction store."""

        if self.storage_file.is_absolute():
            return self.storage_file
        return self.data_directory / self.storage_file


@lru_cache()
def get_settings() -> SpendwiseSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SpendwiseSettings()
