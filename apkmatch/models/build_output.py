"""
Build output models.

These models describe the table of contents of an APK set: the variants a build
produced, the APKs each variant holds per module, and how each of them is
targeted. They are decoded upstream and only read here.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from .targeting import ApkTargeting, VariantTargeting


class ModuleMetadata(BaseModel):
    """Metadata of an application module."""

    name: str = Field(min_length=1, description="Module name, e.g. 'base'")

    model_config = {"frozen": True}


class SplitApkMetadata(BaseModel):
    """Marks an APK as one split of a module."""

    split_id: str = Field(default="", description="Split identifier, empty for the master split")
    is_master_split: bool = Field(default=False)

    model_config = {"frozen": True}


class StandaloneApkMetadata(BaseModel):
    """Marks an APK as self-contained, with every listed module fused in."""

    fused_module_names: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class ApkDescription(BaseModel):
    """A single APK of the build output."""

    targeting: ApkTargeting = Field(default_factory=ApkTargeting)
    path: str = Field(min_length=1, description="Location of the APK inside the APK set")
    split_apk_metadata: SplitApkMetadata | None = Field(default=None)
    standalone_apk_metadata: StandaloneApkMetadata | None = Field(default=None)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def exactly_one_kind(self) -> ApkDescription:
        if (self.split_apk_metadata is None) == (self.standalone_apk_metadata is None):
            raise ValueError(
                f"APK '{self.path}' must be either a split or a standalone APK"
            )
        return self

    @property
    def is_split(self) -> bool:
        """Whether the APK is a module split rather than a standalone APK."""
        return self.split_apk_metadata is not None


class ApkSet(BaseModel):
    """All APKs generated for one module within a variant."""

    module_metadata: ModuleMetadata
    apk_descriptions: list[ApkDescription] = Field(default_factory=list)

    model_config = {"frozen": True}


class Variant(BaseModel):
    """One alternative delivery configuration."""

    variant_number: int = Field(default=0, ge=0)
    targeting: VariantTargeting = Field(default_factory=VariantTargeting)
    apk_sets: list[ApkSet] = Field(default_factory=list)

    model_config = {"frozen": True}


class BuildApksResult(BaseModel):
    """Root of the build output: every variant the build produced."""

    package_name: str = Field(default="")
    variants: list[Variant] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def module_names(self) -> list[str]:
        """Get every module name in declaration order, without duplicates.

        Returns:
            list[str]: Names of all modules across all variants.
        """
        names: list[str] = []
        for variant in self.variants:
            for apk_set in variant.apk_sets:
                if apk_set.module_metadata.name not in names:
                    names.append(apk_set.module_metadata.name)
        return names
