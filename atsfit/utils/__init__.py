"""
Utility modules for atsfit.

This package contains shared utilities used across the library:
- config: Configuration management
- logger: Logging infrastructure
- constants: Closed vocabularies and lexicon tables
"""

from atsfit.utils.config import (
    AppSettings,
    ClassifierSettings,
    LoggingSettings,
    ParserSettings,
    ScoringSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
)
from atsfit.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    JobFamily,
    MatchLabel,
    MetricType,
    RadarLabel,
    RoleSeniority,
    SeniorityLevel,
    StrategyKey,
)
from atsfit.utils.logger import (
    setup_logging,
    get_logger,
)

__all__ = [
    # Config
    "AppSettings",
    "ClassifierSettings",
    "LoggingSettings",
    "ParserSettings",
    "ScoringSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "JobFamily",
    "MatchLabel",
    "MetricType",
    "RadarLabel",
    "RoleSeniority",
    "SeniorityLevel",
    "StrategyKey",
    # Logger
    "setup_logging",
    "get_logger",
]
