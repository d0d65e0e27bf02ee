"""Targeting dimension matchers for apkmatch."""

from .abi import AbiMatcher
from .base import (
    ApkPredicateProvider,
    TargetingDimensionMatcher,
    VariantPredicateProvider,
    VariantTargetingDimensionMatcher,
    all_of,
)
from .language import LanguageMatcher
from .screen_density import ScreenDensityMatcher
from .sdk_version import SdkVersionMatcher

__all__ = [
    "AbiMatcher",
    "ApkPredicateProvider",
    "TargetingDimensionMatcher",
    "VariantPredicateProvider",
    "VariantTargetingDimensionMatcher",
    "all_of",
    "LanguageMatcher",
    "ScreenDensityMatcher",
    "SdkVersionMatcher",
]
