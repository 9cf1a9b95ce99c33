"""
Shared configuration management for the rule-execution engine.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMATS = ("json", "console")


class DiagnosticsConfig(BaseSettings):
    """Settings read by rule sets at execution time."""

    model_config = SettingsConfigDict(
        env_prefix="RULESET_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    debug: bool = Field(default=False, description="Trace each step before it is evaluated")


class RulesetConfig(DiagnosticsConfig):
    """Engine configuration read from RULESET_* environment variables."""

    # Environment
    env: str = Field(default="local", description="Deployment environment name")
    log_level: str = Field(default="info", description="Minimum log level")
    log_format: str = Field(default="json", description="Log renderer: json or console")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return value


def get_config(**overrides) -> RulesetConfig:
    """Get engine configuration, with optional explicit overrides."""
    return RulesetConfig(**overrides)


def get_diagnostics_config() -> DiagnosticsConfig:
    """Get the settings rule sets consult when no debug flag is given."""
    return DiagnosticsConfig()
