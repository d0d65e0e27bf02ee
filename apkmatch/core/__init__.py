"""Core infrastructure components for apkmatch."""

from .config import Config, MatchingConfig, get_config
from .exceptions import (
    ApkMatchError,
    BuildIntegrityViolationError,
    ConflictingConfigurationError,
    InvalidConfigurationError,
    ValidationError,
)
from .logging import get_logger, setup_logging
from .types import ZipPath

__all__ = [
    "Config",
    "MatchingConfig",
    "get_config",
    "ApkMatchError",
    "BuildIntegrityViolationError",
    "ConflictingConfigurationError",
    "InvalidConfigurationError",
    "ValidationError",
    "get_logger",
    "setup_logging",
    "ZipPath",
]
