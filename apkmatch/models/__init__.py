"""Data models for apkmatch."""

from .build_output import (
    ApkDescription,
    ApkSet,
    BuildApksResult,
    ModuleMetadata,
    SplitApkMetadata,
    StandaloneApkMetadata,
    Variant,
)
from .device import DeviceSpec
from .targeting import (
    DENSITY_ALIAS_DPI,
    Abi,
    AbiAlias,
    AbiTargeting,
    ApkTargeting,
    DensityAlias,
    LanguageTargeting,
    ScreenDensity,
    ScreenDensityTargeting,
    SdkVersion,
    SdkVersionTargeting,
    VariantTargeting,
)

__all__ = [
    "ApkDescription",
    "ApkSet",
    "BuildApksResult",
    "ModuleMetadata",
    "SplitApkMetadata",
    "StandaloneApkMetadata",
    "Variant",
    "DeviceSpec",
    "DENSITY_ALIAS_DPI",
    "Abi",
    "AbiAlias",
    "AbiTargeting",
    "ApkTargeting",
    "DensityAlias",
    "LanguageTargeting",
    "ScreenDensity",
    "ScreenDensityTargeting",
    "SdkVersion",
    "SdkVersionTargeting",
    "VariantTargeting",
]
