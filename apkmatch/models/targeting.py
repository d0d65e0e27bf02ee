"""
Targeting models.

Targeting describes which devices a variant or an APK is meant for. Every
dimension lists the values the entity targets and the alternatives that sibling
entities target, so a matcher can tell whether a better fit exists elsewhere.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class AbiAlias(str, Enum):
    """Android native instruction sets."""

    ARMEABI = "armeabi"
    ARMEABI_V7A = "armeabi-v7a"
    ARM64_V8A = "arm64-v8a"
    X86 = "x86"
    X86_64 = "x86_64"
    MIPS = "mips"
    MIPS64 = "mips64"
    RISCV64 = "riscv64"


class DensityAlias(str, Enum):
    """Named Android screen density buckets."""

    NODPI = "nodpi"
    LDPI = "ldpi"
    MDPI = "mdpi"
    TVDPI = "tvdpi"
    HDPI = "hdpi"
    XHDPI = "xhdpi"
    XXHDPI = "xxhdpi"
    XXXHDPI = "xxxhdpi"
    ANYDPI = "anydpi"


# Only buckets with a concrete dpi value take part in density matching.
DENSITY_ALIAS_DPI: dict[DensityAlias, int] = {
    DensityAlias.LDPI: 120,
    DensityAlias.MDPI: 160,
    DensityAlias.TVDPI: 213,
    DensityAlias.HDPI: 240,
    DensityAlias.XHDPI: 320,
    DensityAlias.XXHDPI: 480,
    DensityAlias.XXXHDPI: 640,
}


class _Frozen(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}


class SdkVersion(_Frozen):
    """Lower bound of an Android API level range."""

    min: int = Field(ge=1, description="Minimum API level (inclusive)")


class Abi(_Frozen):
    """A single native instruction set."""

    alias: AbiAlias


class ScreenDensity(_Frozen):
    """A screen density given either as a named bucket or as raw dpi."""

    density_alias: DensityAlias | None = Field(default=None)
    density_dpi: int | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def exactly_one_form(self) -> ScreenDensity:
        if (self.density_alias is None) == (self.density_dpi is None):
            raise ValueError("exactly one of density_alias or density_dpi must be set")
        return self


class SdkVersionTargeting(_Frozen):
    """API level targeting."""

    value: list[SdkVersion] = Field(default_factory=list)
    alternatives: list[SdkVersion] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.value and not self.alternatives


class AbiTargeting(_Frozen):
    """Native instruction set targeting."""

    value: list[Abi] = Field(default_factory=list)
    alternatives: list[Abi] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.value and not self.alternatives


class ScreenDensityTargeting(_Frozen):
    """Screen density targeting."""

    value: list[ScreenDensity] = Field(default_factory=list)
    alternatives: list[ScreenDensity] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.value and not self.alternatives


class LanguageTargeting(_Frozen):
    """Resource language targeting, as two-letter language codes."""

    value: list[str] = Field(default_factory=list)
    alternatives: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.value and not self.alternatives


class VariantTargeting(_Frozen):
    """Coarse targeting of a whole variant."""

    sdk_version_targeting: SdkVersionTargeting = Field(default_factory=SdkVersionTargeting)
    abi_targeting: AbiTargeting = Field(default_factory=AbiTargeting)
    screen_density_targeting: ScreenDensityTargeting = Field(
        default_factory=ScreenDensityTargeting
    )


class ApkTargeting(_Frozen):
    """Fine-grained targeting of a single APK."""

    sdk_version_targeting: SdkVersionTargeting = Field(default_factory=SdkVersionTargeting)
    abi_targeting: AbiTargeting = Field(default_factory=AbiTargeting)
    screen_density_targeting: ScreenDensityTargeting = Field(
        default_factory=ScreenDensityTargeting
    )
    language_targeting: LanguageTargeting = Field(default_factory=LanguageTargeting)
