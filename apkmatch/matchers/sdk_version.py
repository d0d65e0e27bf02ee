"""
API level matching.
"""

from __future__ import annotations

from ..core.exceptions import ValidationError
from ..models.targeting import ApkTargeting, SdkVersionTargeting, VariantTargeting
from .base import VariantTargetingDimensionMatcher


class SdkVersionMatcher(VariantTargetingDimensionMatcher[SdkVersionTargeting]):
    """Matches API level targeting against the device API level.

    The targeted range starts at its minimum API level and extends up to the
    next alternative, so a device only matches the most specific range that
    still applies to it.
    """

    def get_apk_targeting_value(self, apk_targeting: ApkTargeting) -> SdkVersionTargeting:
        return apk_targeting.sdk_version_targeting

    def get_variant_targeting_value(
        self, variant_targeting: VariantTargeting
    ) -> SdkVersionTargeting:
        return variant_targeting.sdk_version_targeting

    def is_device_dimension_present(self) -> bool:
        return self.device_spec.sdk_version > 0

    def matches_targeting(self, targeting: SdkVersionTargeting) -> bool:
        if len(targeting.value) != 1:
            raise ValidationError(
                message="API level targeting must have exactly one value",
                field_name="sdk_version_targeting.value",
                expected_type="list of length 1",
                actual_value=[v.min for v in targeting.value],
            )

        device_sdk = self.device_spec.sdk_version
        value_min = targeting.value[0].min
        if value_min > device_sdk:
            return False

        return not any(
            value_min < alternative.min <= device_sdk for alternative in targeting.alternatives
        )
