"""
Custom exception hierarchy for apkmatch.

All exceptions inherit from ApkMatchError so callers can handle every failure
of the targeting engine in one place. Each exception type carries context for
debugging and logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ApkMatchError(Exception):
    """Base exception for all apkmatch errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class ValidationError(ApkMatchError):
    """Raised when targeting or model input is malformed."""

    field_name: str | None = None
    expected_type: str | None = None
    actual_value: Any = None

    def __str__(self) -> str:
        base = super().__str__()
        if self.field_name:
            return f"Validation failed for '{self.field_name}': {base}"
        return f"Validation failed: {base}"


@dataclass
class InvalidConfigurationError(ApkMatchError):
    """Raised when the matcher is constructed with an unusable configuration."""

    parameter: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        if self.parameter:
            return f"Invalid configuration of '{self.parameter}': {base}"
        return f"Invalid configuration: {base}"


@dataclass
class ConflictingConfigurationError(ApkMatchError):
    """Raised when a module restriction is applied to a device served a standalone APK.

    Standalone APKs contain every module, so restricting modules cannot be
    honoured for them.
    """

    module_name: str = ""
    apk_path: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        details = []
        if self.module_name:
            details.append(f"module: {self.module_name}")
        if self.apk_path:
            details.append(f"apk: {self.apk_path}")
        suffix = f" ({', '.join(details)})" if details else ""
        return f"Conflicting configuration{suffix}: {base}"


@dataclass
class BuildIntegrityViolationError(ApkMatchError):
    """Raised when the build output contradicts its own guarantees.

    Variants of one build are expected to cover disjoint device ranges. A
    device matching more than one of them means the build output is broken.
    """

    matching_variants: list[int] = field(default_factory=list)

    def __str__(self) -> str:
        base = super().__str__()
        if self.matching_variants:
            return f"BUILD INTEGRITY VIOLATION (variants {self.matching_variants}): {base}"
        return f"BUILD INTEGRITY VIOLATION: {base}"
