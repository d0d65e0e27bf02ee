"""
APK Matching Service.

Decides which APKs of a build output should be installed on a device: first
the variant whose coarse targeting fits the device, then every APK of that
variant whose fine-grained targeting fits and whose module is allowed.
"""

from __future__ import annotations

from collections.abc import Iterable

from ...core.exceptions import ConflictingConfigurationError
from ...core.logging import get_logger
from ...core.types import ModuleName, ZipPath
from ...matchers import (
    AbiMatcher,
    LanguageMatcher,
    ScreenDensityMatcher,
    SdkVersionMatcher,
    all_of,
)
from ...models.build_output import BuildApksResult, Variant
from ...models.device import DeviceSpec
from ...models.targeting import ApkTargeting, VariantTargeting
from .apks import ApkSelector
from .modules import ModuleFilter
from .variants import VariantSelector

logger = get_logger(__name__)


class ApkMatcher:
    """Calculates whether a given device can be served the APKs of a build.

    The matcher holds only the device and the module allow-list, both fixed at
    construction, so one instance can be shared between threads.
    """

    def __init__(
        self,
        device_spec: DeviceSpec,
        allowed_split_modules: Iterable[ModuleName] | None = None,
    ) -> None:
        """Initialize the matcher.

        Args:
            device_spec: Device to resolve APKs for
            allowed_split_modules: Modules whose split APKs may be delivered,
                or None to deliver every module

        Raises:
            InvalidConfigurationError: If allowed_split_modules is given but empty.
        """
        self.device_spec = device_spec
        self.module_filter = ModuleFilter(allowed_split_modules)

        sdk_version_matcher = SdkVersionMatcher(device_spec)
        abi_matcher = AbiMatcher(device_spec)
        screen_density_matcher = ScreenDensityMatcher(device_spec)
        language_matcher = LanguageMatcher(device_spec)

        self._matches_variant_targeting = all_of(
            [
                sdk_version_matcher.variant_targeting_predicate(),
                abi_matcher.variant_targeting_predicate(),
                screen_density_matcher.variant_targeting_predicate(),
            ]
        )
        self._matches_apk_targeting = all_of(
            [
                sdk_version_matcher.apk_targeting_predicate(),
                abi_matcher.apk_targeting_predicate(),
                screen_density_matcher.apk_targeting_predicate(),
                language_matcher.apk_targeting_predicate(),
            ]
        )
        self._variant_selector = VariantSelector(self._matches_variant_targeting)
        self._apk_selector = ApkSelector(self.matches_apk)

    def get_matching_apks(self, build_apks_result: BuildApksResult) -> list[ZipPath]:
        """Get all APKs that should be installed on the device.

        Args:
            build_apks_result: Variants and APKs produced by the build

        Returns:
            Paths of the matching APKs, in module then APK declaration order.
            Empty if no variant matches the device.

        Raises:
            BuildIntegrityViolationError: If more than one variant matches.
            ConflictingConfigurationError: If a module restriction is set and
                the device matches a standalone APK.
        """
        variant = self.get_matching_variant(build_apks_result)
        if variant is None:
            logger.info(
                "No variant matches device",
                package_name=build_apks_result.package_name,
            )
            return []

        return self.get_matching_apks_from_variant(variant)

    def get_matching_apks_from_variant(self, variant: Variant) -> list[ZipPath]:
        """Get the APKs of an already selected variant that should be installed.

        Args:
            variant: Variant chosen for the device, e.g. by get_matching_variant

        Returns:
            Paths of the matching APKs, in module then APK declaration order.

        Raises:
            ConflictingConfigurationError: If a module restriction is set and
                the device matches a standalone APK.
        """
        matched = self._apk_selector.select(variant)
        logger.info(
            "Resolved matching APKs",
            variant_number=variant.variant_number,
            apk_count=len(matched),
        )
        return matched

    def get_matching_variant(self, build_apks_result: BuildApksResult) -> Variant | None:
        """Get the variant of a build that fits the device.

        Args:
            build_apks_result: Variants and APKs produced by the build

        Returns:
            The matching variant, or None if none matches.

        Raises:
            BuildIntegrityViolationError: If more than one variant matches.
        """
        return self._variant_selector.select(build_apks_result.variants)

    def matches_variant(self, variant_targeting: VariantTargeting) -> bool:
        """Check whether a variant's targeting fits the device."""
        return self._matches_variant_targeting(variant_targeting)

    def matches_apk(
        self, apk_targeting: ApkTargeting, is_split: bool, module_name: ModuleName
    ) -> bool:
        """Check whether a single APK should be installed on the device.

        Args:
            apk_targeting: Targeting of the APK
            is_split: Whether the APK is a module split (False for standalone APKs)
            module_name: Module owning the APK

        Returns:
            Whether to deliver the APK to the device.

        Raises:
            ConflictingConfigurationError: If the APK is standalone, fits the
                device, and a module restriction is configured.
        """
        matches_targeting = self._matches_apk_targeting(apk_targeting)

        if is_split:
            return matches_targeting and self.module_filter.allows(module_name)

        if matches_targeting and self.module_filter.is_restricted:
            logger.error(
                "Module restriction conflicts with standalone APK",
                module_name=module_name,
                allowed_modules=sorted(self.module_filter.allowed_modules or ()),
            )
            raise ConflictingConfigurationError(
                message="Cannot restrict modules when the device matches a non-split APK.",
                module_name=module_name,
            )
        return matches_targeting
