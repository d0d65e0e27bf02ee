"""
Base classes for targeting dimension matchers.

A matcher answers, for one device and one targeting dimension (API level,
instruction set, screen density, language), whether a given targeting fits the
device. Matchers expose their decision as predicates over whole
VariantTargeting / ApkTargeting objects so they can be combined freely.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Generic, Protocol, TypeVar

from ..models.device import DeviceSpec
from ..models.targeting import ApkTargeting, VariantTargeting


class DimensionTargeting(Protocol):
    """Any per-dimension targeting with value and alternatives lists."""

    @property
    def is_empty(self) -> bool: ...


T = TypeVar("T", bound=DimensionTargeting)
S = TypeVar("S")

VariantPredicate = Callable[[VariantTargeting], bool]
ApkPredicate = Callable[[ApkTargeting], bool]


class VariantPredicateProvider(ABC):
    """Provides a predicate over variant-level targeting."""

    @abstractmethod
    def variant_targeting_predicate(self) -> VariantPredicate:
        """Get the predicate deciding whether a variant fits the device."""
        ...


class ApkPredicateProvider(ABC):
    """Provides a predicate over APK-level targeting."""

    @abstractmethod
    def apk_targeting_predicate(self) -> ApkPredicate:
        """Get the predicate deciding whether an APK fits the device."""
        ...


class TargetingDimensionMatcher(ApkPredicateProvider, Generic[T]):
    """Matches one targeting dimension of APKs against a device.

    Subclasses pick the dimension out of the targeting and decide whether a
    non-empty targeting fits. Empty targeting, and devices that do not declare
    the dimension at all, always match.
    """

    def __init__(self, device_spec: DeviceSpec) -> None:
        """Initialize the matcher.

        Args:
            device_spec: Device the matcher decides for
        """
        self.device_spec = device_spec

    @abstractmethod
    def get_apk_targeting_value(self, apk_targeting: ApkTargeting) -> T:
        """Extract this matcher's dimension from APK targeting."""
        ...

    @abstractmethod
    def matches_targeting(self, targeting: T) -> bool:
        """Decide whether a non-empty targeting fits the device."""
        ...

    @abstractmethod
    def is_device_dimension_present(self) -> bool:
        """Whether the device declares this dimension."""
        ...

    def matches(self, targeting: T) -> bool:
        """Decide whether a targeting of this dimension fits the device.

        Args:
            targeting: Targeting of this matcher's dimension

        Returns:
            True if the targeting is empty, the device does not declare the
            dimension, or the targeting fits the device.
        """
        if targeting.is_empty or not self.is_device_dimension_present():
            return True
        return self.matches_targeting(targeting)

    def apk_targeting_predicate(self) -> ApkPredicate:
        return lambda apk_targeting: self.matches(self.get_apk_targeting_value(apk_targeting))


class VariantTargetingDimensionMatcher(TargetingDimensionMatcher[T], VariantPredicateProvider):
    """Dimension matcher for dimensions that also split the build into variants."""

    @abstractmethod
    def get_variant_targeting_value(self, variant_targeting: VariantTargeting) -> T:
        """Extract this matcher's dimension from variant targeting."""
        ...

    def variant_targeting_predicate(self) -> VariantPredicate:
        return lambda variant_targeting: self.matches(
            self.get_variant_targeting_value(variant_targeting)
        )


def all_of(predicates: Sequence[Callable[[S], bool]]) -> Callable[[S], bool]:
    """Combine predicates with logical AND, evaluated left to right.

    Args:
        predicates: Predicates to combine

    Returns:
        A predicate that holds iff every given predicate holds.
    """
    combined = tuple(predicates)
    return lambda value: all(predicate(value) for predicate in combined)
