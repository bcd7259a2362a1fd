"""Pydantic configuration models for mood-journal."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class PathsConfig(BaseModel):
    """File paths configuration."""

    journal_dir: Path = Path("~/moodjournal/journal")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.journal_dir = self.journal_dir.expanduser()
        return self


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class AnalyticsConfig(BaseModel):
    """Mood statistics configuration."""

    window_days: int = 7
    consistency_target_days: int = 30

    @field_validator("window_days", "consistency_target_days")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Must be a positive number of days, got {v}")
        return v


class JournalConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "JournalConfig":
        """Create config from dict."""
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        """Convert to plain dict."""
        return self.model_dump(mode="python")
