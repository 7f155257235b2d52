"""
Tests for environment based settings
"""

import pytest
from pydantic import ValidationError

from config import Settings


class TestSettings:
    """Test Settings.from_env"""

    def test_defaults(self, monkeypatch):
        for name in (
            "LOG_LEVEL",
            "MAX_RASTERS",
            "HISTOGRAM_WORKERS",
            "DEFAULT_BIN_COUNT",
            "CORS_ORIGINS",
        ):
            monkeypatch.delenv(f"RASTER_TONE_{name}", raising=False)

        settings = Settings.from_env()

        assert settings.system.log_level == "INFO"
        assert settings.store.max_rasters == 20
        assert settings.processing.histogram_workers == 1
        assert settings.processing.default_bin_count == 64
        assert settings.api.cors_origins == ["*"]

    def test_environment_overrides(self, monkeypatch):
        """Test RASTER_TONE_* variables"""
        monkeypatch.setenv("RASTER_TONE_LOG_LEVEL", "debug")
        monkeypatch.setenv("RASTER_TONE_DEBUG", "yes")
        monkeypatch.setenv("RASTER_TONE_MAX_RASTERS", "5")
        monkeypatch.setenv("RASTER_TONE_HISTOGRAM_WORKERS", "4")
        monkeypatch.setenv("RASTER_TONE_CORS_ORIGINS", "http://a.test, http://b.test")

        settings = Settings.from_env()

        assert settings.system.log_level == "DEBUG"
        assert settings.system.debug is True
        assert settings.store.max_rasters == 5
        assert settings.processing.histogram_workers == 4
        assert settings.api.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.to_dict()["store"]["max_rasters"] == 5

    @pytest.mark.parametrize(
        "name, value",
        [
            ("LOG_LEVEL", "LOUD"),
            ("MAX_RASTERS", "0"),
            ("HISTOGRAM_WORKERS", "64"),
            ("MAX_RASTERS", "ten"),
            ("PORT", "80.5"),
            ("DEBUG", "maybe"),
            ("CORS_ENABLED", "sometimes"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(f"RASTER_TONE_{name}", value)

        with pytest.raises(ValidationError):
            Settings.from_env()

    def test_invalid_values_are_not_defaulted(self, monkeypatch):
        """Test that a malformed variable fails instead of silently becoming False"""
        monkeypatch.setenv("RASTER_TONE_DEBUG", "maybe")

        with pytest.raises(ValidationError) as exc_info:
            Settings.from_env()

        assert exc_info.value.errors()[0]["loc"] == ("system", "debug")

    def test_unset_variables_keep_defaults(self, monkeypatch):
        """Test that setting one section leaves the others at their defaults"""
        monkeypatch.delenv("RASTER_TONE_MAX_RASTERS", raising=False)
        monkeypatch.delenv("RASTER_TONE_CORS_ENABLED", raising=False)
        monkeypatch.setenv("RASTER_TONE_PORT", "8100")

        settings = Settings.from_env()

        assert settings.api.port == 8100
        assert settings.api.cors_enabled is True
        assert settings.store.max_rasters == 20
