"""
Module allow-list filtering for split APKs.
"""

from __future__ import annotations

from collections.abc import Iterable

from ...core.exceptions import InvalidConfigurationError
from ...core.types import ModuleName


class ModuleFilter:
    """Decides whether split APKs of a module may be delivered.

    Without an allow-list every module is allowed. An allow-list, when given,
    must name at least one module.
    """

    def __init__(self, allowed_modules: Iterable[ModuleName] | None = None) -> None:
        """Initialize the filter.

        Args:
            allowed_modules: Names of the modules to deliver, or None to
                deliver every module

        Raises:
            InvalidConfigurationError: If an empty allow-list is given.
        """
        if allowed_modules is None:
            self._allowed: frozenset[ModuleName] | None = None
            return

        allowed = frozenset(allowed_modules)
        if not allowed:
            raise InvalidConfigurationError(
                message="Set of allowed split modules cannot be empty.",
                parameter="allowed_split_modules",
            )
        self._allowed = allowed

    @property
    def is_restricted(self) -> bool:
        """Whether an allow-list is configured."""
        return self._allowed is not None

    @property
    def allowed_modules(self) -> frozenset[ModuleName] | None:
        """The configured allow-list, or None when unrestricted."""
        return self._allowed

    def allows(self, module_name: ModuleName) -> bool:
        """Check whether split APKs of a module may be delivered.

        Args:
            module_name: Name of the module owning the APK

        Returns:
            True if no allow-list is configured or the module is on it.
        """
        return self._allowed is None or module_name in self._allowed

    def __repr__(self) -> str:
        if self._allowed is None:
            return "ModuleFilter(all modules)"
        return f"ModuleFilter({sorted(self._allowed)})"
