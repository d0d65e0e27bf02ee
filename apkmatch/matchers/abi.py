"""
Native instruction set (ABI) matching.
"""

from __future__ import annotations

from ..core.exceptions import ValidationError
from ..models.targeting import AbiTargeting, ApkTargeting, VariantTargeting
from .base import VariantTargetingDimensionMatcher


class AbiMatcher(VariantTargetingDimensionMatcher[AbiTargeting]):
    """Matches ABI targeting against the device's ABIs in order of preference.

    The first device ABI that is covered by either the targeted values or the
    alternatives decides: a targeted value matches, an alternative means a
    sibling APK is the better fit.
    """

    def get_apk_targeting_value(self, apk_targeting: ApkTargeting) -> AbiTargeting:
        return apk_targeting.abi_targeting

    def get_variant_targeting_value(self, variant_targeting: VariantTargeting) -> AbiTargeting:
        return variant_targeting.abi_targeting

    def is_device_dimension_present(self) -> bool:
        return bool(self.device_spec.supported_abis)

    def matches_targeting(self, targeting: AbiTargeting) -> bool:
        values = {abi.alias.value for abi in targeting.value}
        alternatives = {abi.alias.value for abi in targeting.alternatives}

        overlap = values & alternatives
        if overlap:
            raise ValidationError(
                message="ABI targeting values and alternatives must be disjoint",
                field_name="abi_targeting",
                actual_value=sorted(overlap),
            )

        for device_abi in self.device_spec.supported_abis:
            if device_abi in values:
                return True
            if device_abi in alternatives:
                return False
        return False
