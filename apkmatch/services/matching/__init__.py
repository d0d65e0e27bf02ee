"""Targeting resolution: which variant and APKs a device should receive."""

from .apks import ApkSelector
from .modules import ModuleFilter
from .service import ApkMatcher
from .variants import VariantSelector

__all__ = ["ApkMatcher", "ApkSelector", "ModuleFilter", "VariantSelector"]
