"""Configuration management for the match scorer."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, parse_config, validate_config_file
from .models import (
    AppConfig,
    Language,
    LogFormat,
    LogLevel,
    LoggingConfig,
    RegionConfig,
    ScoringConfig,
    ScoringWeights,
)

__all__ = [
    # Loader functions
    "load_config",
    "parse_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "ScoringConfig",
    "ScoringWeights",
    "RegionConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "Language",
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
