"""
APK selection within a variant.
"""

from __future__ import annotations

from collections.abc import Callable

from ...core.types import ModuleName, ZipPath
from ...models.build_output import Variant
from ...models.targeting import ApkTargeting

ApkDecision = Callable[[ApkTargeting, bool, ModuleName], bool]


class ApkSelector:
    """Collects the APKs of a variant that should be delivered to the device."""

    def __init__(self, decide: ApkDecision) -> None:
        """Initialize the selector.

        Args:
            decide: Per-APK decision taking (targeting, is_split, module name)
        """
        self.decide = decide

    def select(self, variant: Variant) -> list[ZipPath]:
        """Select matching APKs of a variant.

        Modules are visited in declared order, and APKs within a module in
        declared order; the result keeps that order.

        Args:
            variant: The variant chosen for the device

        Returns:
            Paths of the APKs to deliver.
        """
        matched: list[ZipPath] = []

        for apk_set in variant.apk_sets:
            module_name = apk_set.module_metadata.name

            for apk_description in apk_set.apk_descriptions:
                if self.decide(apk_description.targeting, apk_description.is_split, module_name):
                    matched.append(ZipPath(apk_description.path))

        return matched
