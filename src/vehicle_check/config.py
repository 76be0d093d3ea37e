"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List, Optional, Union
from pydantic import model_validator
from pydantic_settings import BaseSettings

from .domain.value_objects.checklist import CheckItemKey


def _split_csv(value: Union[str, List[str]]) -> List[str]:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class Settings(BaseSettings):
    """Application settings."""

    # Check API client
    api_base_url: str = "http://localhost:8000/api/v1"
    request_timeout_seconds: float = 10.0

    # Check form
    checklist_keys: Union[str, List[str]] = "TYRES,BRAKES,LIGHTS"
    note_max_length: int = 300

    # Application
    log_level: str = "INFO"
    log_file: Optional[str] = None
    service_name: str = "vehicle-check"

    # Reference backend
    api_prefix: str = "/api/v1"
    allowed_origins: Union[str, List[str]] = "http://localhost:3000,http://localhost:5173"

    @model_validator(mode='after')
    def convert_lists(self):
        """Convert comma-separated strings to lists and validate checklist keys."""
        self.allowed_origins = _split_csv(self.allowed_origins)
        keys = [key.upper() for key in _split_csv(self.checklist_keys)]

        valid_keys = {key.value for key in CheckItemKey}
        unknown = [key for key in keys if key not in valid_keys]
        if unknown:
            raise ValueError(f"Unknown checklist keys: {', '.join(unknown)}")
        if len(set(keys)) != len(keys):
            raise ValueError("Checklist keys must not repeat")
        if not keys:
            raise ValueError("At least one checklist key must be configured")

        self.checklist_keys = keys
        self.api_base_url = self.api_base_url.rstrip("/")
        return self

    @property
    def configured_checklist(self) -> tuple[CheckItemKey, ...]:
        """Get configured checklist keys in display order."""
        return tuple(CheckItemKey(key) for key in self.checklist_keys)

    class Config:
        """Pydantic config."""
        env_file = ".env"
        case_sensitive = False
        env_ignore_empty = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
