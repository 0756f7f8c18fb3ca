"""
Centralized configuration management using Pydantic Settings.
"""
from pathlib import Path
from typing import List, Optional
import shlex

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigurationError, describe_validation_error


class Settings(BaseSettings):
    """Pipeline settings with environment variable support (EVENTCONTENT_*)."""

    # Roots
    project_root: Path = Field(default_factory=Path.cwd)
    data_dir: Optional[Path] = None  # defaults to <project_root>/data

    # Languages
    source_language: str = "pt"
    target_language: str = "en"

    # External build step; when unset the record tree is copied as-is
    build_command: Optional[str] = None
    build_timeout: Optional[float] = None

    # Logging
    log_level: str = "INFO"

    @field_validator("source_language", "target_language")
    @classmethod
    def normalize_language(cls, v):
        v = v.strip().lower()
        if not v:
            raise ValueError("language tag must not be empty")
        return v

    @model_validator(mode="after")
    def check_languages_differ(self):
        if self.source_language == self.target_language:
            raise ValueError("source_language and target_language must differ")
        return self

    @property
    def resolved_project_root(self) -> Path:
        return self.project_root.expanduser().resolve()

    @property
    def resolved_data_dir(self) -> Path:
        if self.data_dir is None:
            return self.resolved_project_root / "data"
        path = self.data_dir.expanduser()
        if not path.is_absolute():
            path = self.resolved_project_root / path
        return path.resolve()

    @property
    def events_dir(self) -> Path:
        return self.resolved_data_dir / "events"

    @property
    def generated_dir(self) -> Path:
        return self.events_dir / "generated"

    @property
    def output_json(self) -> Path:
        return self.generated_dir / "events.json"

    @property
    def build_command_args(self) -> List[str]:
        return shlex.split(self.build_command) if self.build_command else []

    model_config = SettingsConfigDict(
        env_prefix="EVENTCONTENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Singleton instance
_settings: Optional[Settings] = None


def _build_settings(**overrides) -> Settings:
    try:
        return Settings(**overrides)
    except ValidationError as e:
        issues = "; ".join(describe_validation_error(e, root="settings"))
        raise ConfigurationError(f"Invalid configuration: {issues}") from e


def get_settings() -> Settings:
    """Get the settings singleton instance."""
    global _settings
    if _settings is None:
        _settings = _build_settings()
    return _settings


def reload_settings(**overrides) -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = _build_settings(**overrides)
    return _settings
