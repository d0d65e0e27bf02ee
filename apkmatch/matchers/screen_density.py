"""
Screen density matching.

Density splits are chosen the way the Android framework picks density-specific
resources: among all densities the build offers, the device gets the one it
would load itself, and only the APK targeting that density matches.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.exceptions import ValidationError
from ..models.targeting import (
    DENSITY_ALIAS_DPI,
    ApkTargeting,
    ScreenDensity,
    ScreenDensityTargeting,
    VariantTargeting,
)
from .base import VariantTargetingDimensionMatcher


def density_dpi(density: ScreenDensity) -> int:
    """Resolve a screen density to its dpi value.

    Args:
        density: Density given as alias or raw dpi

    Returns:
        The dpi value.

    Raises:
        ValidationError: If the alias has no dpi value (nodpi, anydpi).
    """
    if density.density_dpi is not None:
        return density.density_dpi

    alias = density.density_alias
    if alias not in DENSITY_ALIAS_DPI:
        raise ValidationError(
            message=f"Density '{alias.value}' cannot be targeted",
            field_name="screen_density_targeting",
            actual_value=alias,
        )
    return DENSITY_ALIAS_DPI[alias]


def is_better_density(candidate: int, current: int, requested: int) -> bool:
    """Whether a candidate density fits a device better than the current pick.

    Mirrors the framework's resource resolution: above the device density the
    smaller density wins, below it the larger one wins, and between the two
    scaling down is considered twice as good as scaling up.
    """
    if candidate == current:
        return False

    candidate_is_higher = candidate > current
    high, low = (candidate, current) if candidate_is_higher else (current, candidate)

    if requested >= high:
        return candidate_is_higher
    if low >= requested:
        return not candidate_is_higher
    if (2 * low - requested) * high > requested * requested:
        return not candidate_is_higher
    return candidate_is_higher


def select_best_density(densities: Iterable[int], requested: int) -> int:
    """Select the density the device would load resources from.

    Args:
        densities: Available densities in dpi (must not be empty)
        requested: Device density in dpi

    Returns:
        The best-fitting available density.
    """
    best: int | None = None
    for dpi in sorted(set(densities)):
        if best is None or is_better_density(dpi, best, requested):
            best = dpi
    if best is None:
        raise ValueError("No densities to select from")
    return best


class ScreenDensityMatcher(VariantTargetingDimensionMatcher[ScreenDensityTargeting]):
    """Matches screen density targeting against the device density."""

    def get_apk_targeting_value(self, apk_targeting: ApkTargeting) -> ScreenDensityTargeting:
        return apk_targeting.screen_density_targeting

    def get_variant_targeting_value(
        self, variant_targeting: VariantTargeting
    ) -> ScreenDensityTargeting:
        return variant_targeting.screen_density_targeting

    def is_device_dimension_present(self) -> bool:
        return self.device_spec.screen_density > 0

    def matches_targeting(self, targeting: ScreenDensityTargeting) -> bool:
        values = {density_dpi(density) for density in targeting.value}
        alternatives = {density_dpi(density) for density in targeting.alternatives}

        best = select_best_density(values | alternatives, self.device_spec.screen_density)
        return best in values
