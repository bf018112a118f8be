"""
Configuration management for atsfit.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent
PACKAGE_DIR = ROOT_DIR / "atsfit"


class ParserSettings(BaseSettings):
    """Input ceilings for the normalizer and parsers."""

    model_config = SettingsConfigDict(env_prefix="PARSER_")

    # Hard ceilings applied by preprocess_resume / preprocess_job_description
    resume_max_chars: int = 50_000
    jd_max_chars: int = 30_000

    # Ceilings for condensed text handed to a downstream generator
    resume_context_chars: int = 25_000
    jd_context_chars: int = 15_000

    # How many leading lines count as the contact header
    header_scan_lines: int = 8

    @field_validator("resume_max_chars", "jd_max_chars", "resume_context_chars", "jd_context_chars")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Ceilings must leave room for at least some text."""
        if v <= 0:
            raise ValueError("character ceilings must be positive")
        return v


class ScoringSettings(BaseSettings):
    """ATS scoring weights and output limits."""

    model_config = SettingsConfigDict(env_prefix="SCORING_")

    skill_weight: float = 0.40
    keyword_weight: float = 0.30
    seniority_weight: float = 0.15
    impact_weight: float = 0.15

    # Suggestions are always produced below this score
    suggestion_ceiling: int = 90
    max_suggestions: int = 7
    max_previews: int = 3

    # Below this relevance a résumé has too little overlap to tailor
    relevance_floor: int = 10

    @field_validator("skill_weight", "keyword_weight", "seniority_weight", "impact_weight")
    @classmethod
    def validate_weight(cls, v: float) -> float:
        """Weights are blended as a weighted mean, so they only need to be non-negative."""
        if v < 0:
            raise ValueError("scoring weights must be non-negative")
        return v

    @model_validator(mode="after")
    def validate_total(self) -> "ScoringSettings":
        if self.total_weight <= 0:
            raise ValueError("at least one scoring weight must be positive")
        return self

    @property
    def total_weight(self) -> float:
        return self.skill_weight + self.keyword_weight + self.seniority_weight + self.impact_weight


class ClassifierSettings(BaseSettings):
    """Job family classifier tuning."""

    model_config = SettingsConfigDict(env_prefix="CLASSIFIER_")

    # Below this confidence the classifier answers "general"
    min_confidence: float = 0.4

    # Points per lexicon hit, by source
    jd_weight: float = 2.0
    resume_weight: float = 1.0

    # Weighted score at which confidence reaches 1.0
    saturation: float = 12.0

    @field_validator("min_confidence")
    @classmethod
    def validate_confidence(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("min_confidence must be within [0, 1]")
        return v

    @field_validator("saturation")
    @classmethod
    def validate_saturation(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("saturation must be positive")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Optional[Path] = None
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ATSFIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "atsfit"
    version: str = "0.1.0"
    description: str = "Deterministic résumé parsing and ATS scoring"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    parser: ParserSettings = Field(default_factory=ParserSettings)
    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    classifier: ClassifierSettings = Field(default_factory=ClassifierSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
