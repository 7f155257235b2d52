"""
Configuration for Raster Tone.

Settings are pydantic models populated from environment variables with the
RASTER_TONE_ prefix, e.g. RASTER_TONE_LOG_LEVEL=DEBUG or RASTER_TONE_PORT=8100.
"""

import os
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from core.constants import HistogramConstants, StoreConstants, SystemConstants

ENV_PREFIX = "RASTER_TONE_"

# Environment variable suffix -> (section, field); a section of None is top level
ENV_FIELDS: Dict[str, Tuple[Optional[str], str]] = {
    "ENVIRONMENT": (None, "environment"),
    "LOG_LEVEL": ("system", "log_level"),
    "DEBUG": ("system", "debug"),
    "HOST": ("api", "host"),
    "PORT": ("api", "port"),
    "CORS_ENABLED": ("api", "cors_enabled"),
    "CORS_ORIGINS": ("api", "cors_origins"),
    "MAX_RASTERS": ("store", "max_rasters"),
    "HISTOGRAM_WORKERS": ("processing", "histogram_workers"),
    "DEFAULT_BIN_COUNT": ("processing", "default_bin_count"),
}


class SystemSettings(BaseModel):
    """Logging and debug settings"""

    log_level: str = SystemConstants.LOG_LEVEL_DEFAULT
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


class APISettings(BaseModel):
    """HTTP server settings"""

    host: str = "0.0.0.0"
    port: int = Field(8000, ge=1, le=65535)
    cors_enabled: bool = True
    cors_origins: List[str] = ["*"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class StoreSettings(BaseModel):
    """Raster store settings"""

    max_rasters: int = Field(
        StoreConstants.DEFAULT_MAX_RASTERS,
        ge=StoreConstants.MIN_RASTERS,
        le=StoreConstants.MAX_RASTERS,
    )


class ProcessingSettings(BaseModel):
    """Raster engine settings"""

    histogram_workers: int = Field(
        HistogramConstants.DEFAULT_WORKERS, ge=1, le=HistogramConstants.MAX_WORKERS
    )
    default_bin_count: int = Field(
        HistogramConstants.DEFAULT_BIN_COUNT, ge=1, le=HistogramConstants.MAX_BIN_COUNT
    )


class Settings(BaseModel):
    """Application settings"""

    environment: str = "development"
    system: SystemSettings = SystemSettings()
    api: APISettings = APISettings()
    store: StoreSettings = StoreSettings()
    processing: ProcessingSettings = ProcessingSettings()

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from RASTER_TONE_* environment variables.

        Only variables that are set are passed on, and pydantic does the type
        coercion, so "ten" for an int or "maybe" for a bool raises ValidationError.
        """
        data: Dict[str, Any] = {}
        for name, (section, field) in ENV_FIELDS.items():
            value = os.getenv(f"{ENV_PREFIX}{name}")
            if value is None:
                continue
            if section is None:
                data[field] = value
            else:
                data.setdefault(section, {})[field] = value

        return cls.model_validate(data)


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings.from_env()
