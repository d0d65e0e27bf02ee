"""
Configuration management for apkmatch.

Provides centralized, type-safe configuration with environment variable overrides
and sensible defaults.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()


def parse_module_list(raw: str | None) -> list[str] | None:
    """Parse a comma separated module list.

    Args:
        raw: Raw value such as "base, feature_camera".

    Returns:
        The stripped, de-duplicated module names in declared order, or None
        if no module name was given.
    """
    if raw is None:
        return None
    names: list[str] = []
    for part in raw.split(","):
        name = part.strip()
        if name and name not in names:
            names.append(name)
    return names or None


class MatchingConfig(BaseModel):
    """Defaults applied when resolving APKs for a device."""

    allowed_modules: list[str] | None = Field(
        default=None,
        description="Split modules to deliver; None delivers every module",
    )
    output_format: Literal["text", "json"] = Field(
        default="text", description="How matched APK paths are printed"
    )

    @field_validator("allowed_modules")
    @classmethod
    def reject_empty_module_list(cls, value: list[str] | None) -> list[str] | None:
        if value is not None and not value:
            raise ValueError("allowed_modules must be omitted rather than empty")
        return value


class Config(BaseModel):
    """Root configuration for apkmatch."""

    project_name: str = Field(default="apkmatch", description="Project identifier")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    matching: MatchingConfig = Field(default_factory=MatchingConfig)

    model_config = {"extra": "ignore"}

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables."""
        return cls(
            log_level=os.environ.get("APKMATCH_LOG_LEVEL", "INFO"),  # type: ignore
            matching=MatchingConfig(
                allowed_modules=parse_module_list(os.environ.get("APKMATCH_MODULES")),
                output_format=os.environ.get("APKMATCH_OUTPUT_FORMAT", "text"),  # type: ignore
            ),
        )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()
