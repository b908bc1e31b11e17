# backend/app/core/config.py
from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings with local-disk defaults.

    - The catalog lives at DATA_DIR/CATALOG_FILE
    - Uploaded files live under PUBLIC_DIR/<category dir>/original/
    - Paths are resolved on every access so tests/scripts can repoint them
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Environment
    env: str = Field(default="dev", alias="ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Storage
    data_dir: str = Field(default="data", alias="DATA_DIR")
    catalog_file: str = Field(default="mediaData.json", alias="CATALOG_FILE")
    public_dir: str = Field(default="public", alias="PUBLIC_DIR")

    # CORS
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")  # comma-separated or "*"

    # Geo lookup (locale detection)
    geo_lookup_url: str = Field(default="https://ipapi.co/{ip}/country_code/", alias="GEO_LOOKUP_URL")
    geo_timeout_sec: float = Field(default=3.0, alias="GEO_TIMEOUT_SEC")

    # Image preloading
    preload_batch_size: int = Field(default=3, ge=1, alias="PRELOAD_BATCH_SIZE")
    preload_batch_delay_ms: int = Field(default=10, ge=0, alias="PRELOAD_BATCH_DELAY_MS")

    # Orphan sweep
    orphan_grace_hours: float = Field(default=24.0, ge=0, alias="ORPHAN_GRACE_HOURS")

    @property
    def cors_origins_list(self) -> list[str]:
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def catalog_path(self) -> Path:
        return Path(self.data_dir) / self.catalog_file

    @property
    def public_path(self) -> Path:
        return Path(self.public_dir)


settings = Settings()
