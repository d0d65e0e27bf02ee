"""
Resource language matching.
"""

from __future__ import annotations

from ..models.targeting import ApkTargeting, LanguageTargeting
from .base import TargetingDimensionMatcher


class LanguageMatcher(TargetingDimensionMatcher[LanguageTargeting]):
    """Matches language targeting against the device's locales.

    Languages never split a build into variants, so this matcher only
    provides an APK-level predicate.
    """

    def get_apk_targeting_value(self, apk_targeting: ApkTargeting) -> LanguageTargeting:
        return apk_targeting.language_targeting

    def is_device_dimension_present(self) -> bool:
        return bool(self.device_spec.languages)

    def matches_targeting(self, targeting: LanguageTargeting) -> bool:
        device_languages = self.device_spec.languages

        if targeting.value:
            return any(language.lower() in device_languages for language in targeting.value)

        # Fallback split: serves the device only if no language split does
        return not any(
            language.lower() in device_languages for language in targeting.alternatives
        )
