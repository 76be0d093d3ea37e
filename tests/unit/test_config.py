"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from src.vehicle_check.config import Settings
from src.vehicle_check.domain.value_objects.checklist import CheckItemKey


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        """Test default checklist and client settings."""
        monkeypatch.delenv("CHECKLIST_KEYS", raising=False)
        monkeypatch.delenv("API_BASE_URL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.configured_checklist == (
            CheckItemKey.TYRES,
            CheckItemKey.BRAKES,
            CheckItemKey.LIGHTS,
        )
        assert settings.api_base_url == "http://localhost:8000/api/v1"
        assert settings.note_max_length == 300

    def test_checklist_from_string(self):
        """Test comma-separated checklist keys, case-insensitive."""
        settings = Settings(_env_file=None, checklist_keys="tyres, brakes,LIGHTS,oil,coolant")

        assert settings.configured_checklist == tuple(CheckItemKey)

    def test_checklist_from_environment(self, monkeypatch):
        """Test checklist keys are read from the environment."""
        monkeypatch.setenv("CHECKLIST_KEYS", "BRAKES,OIL")

        settings = Settings(_env_file=None)

        assert settings.configured_checklist == (CheckItemKey.BRAKES, CheckItemKey.OIL)

    def test_unknown_checklist_key_rejected(self):
        """Test unknown keys fail validation."""
        with pytest.raises(ValidationError, match="Unknown checklist keys: WIPERS"):
            Settings(_env_file=None, checklist_keys="TYRES,WIPERS")

    def test_duplicate_checklist_key_rejected(self):
        """Test repeated keys fail validation."""
        with pytest.raises(ValidationError, match="must not repeat"):
            Settings(_env_file=None, checklist_keys="TYRES,tyres")

    def test_base_url_trailing_slash_stripped(self):
        """Test the API base URL is normalized."""
        settings = Settings(_env_file=None, api_base_url="http://backend/api/v1/")

        assert settings.api_base_url == "http://backend/api/v1"

    def test_allowed_origins_split(self):
        """Test CORS origins are split into a list."""
        settings = Settings(_env_file=None, allowed_origins="http://a, http://b")

        assert settings.allowed_origins == ["http://a", "http://b"]
