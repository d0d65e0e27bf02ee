"""Unit tests for core models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from apkmatch.models import (
    AbiAlias,
    ApkDescription,
    BuildApksResult,
    DensityAlias,
    DeviceSpec,
    ScreenDensity,
    SplitApkMetadata,
    StandaloneApkMetadata,
)


class TestDeviceSpec:
    """Tests for the device description."""

    def test_languages_from_locales(self):
        """Test extraction of primary language subtags.

        Verifies that region subtags are dropped and both '-' and '_'
        separators are understood.
        """
        device = DeviceSpec(supported_locales=["en-US", "pt_BR", "DE", "en-GB"])
        assert device.languages == frozenset({"en", "pt", "de"})

    def test_device_spec_is_immutable(self):
        """Test that device specs cannot be modified after construction."""
        device = DeviceSpec(sdk_version=30)
        with pytest.raises(PydanticValidationError):
            device.sdk_version = 21

    def test_negative_density_rejected(self):
        """Test that negative densities are invalid."""
        with pytest.raises(PydanticValidationError):
            DeviceSpec(screen_density=-1)


class TestApkDescription:
    """Tests for APK descriptions."""

    def test_split_apk(self):
        """Test that split metadata marks the APK as a split."""
        apk = ApkDescription(path="splits/base-master.apk", split_apk_metadata=SplitApkMetadata())
        assert apk.is_split

    def test_standalone_apk(self):
        """Test that standalone metadata marks the APK as standalone."""
        apk = ApkDescription(
            path="standalones/standalone.apk",
            standalone_apk_metadata=StandaloneApkMetadata(fused_module_names=["base"]),
        )
        assert not apk.is_split

    def test_apk_kind_required(self):
        """Test that an APK must be exactly one of split or standalone."""
        with pytest.raises(PydanticValidationError):
            ApkDescription(path="unknown.apk")
        with pytest.raises(PydanticValidationError):
            ApkDescription(
                path="both.apk",
                split_apk_metadata=SplitApkMetadata(),
                standalone_apk_metadata=StandaloneApkMetadata(),
            )


class TestScreenDensity:
    """Tests for density values."""

    def test_alias_or_dpi_required(self):
        """Test that exactly one density form must be given."""
        with pytest.raises(PydanticValidationError):
            ScreenDensity()
        with pytest.raises(PydanticValidationError):
            ScreenDensity(density_alias=DensityAlias.HDPI, density_dpi=240)


class TestBuildApksResult:
    """Tests for build output parsing."""

    def test_parse_json(self):
        """Test decoding a build output from JSON.

        Verifies enum values are read from their string form and nested
        defaults are filled in.
        """
        raw = """
        {
          "package_name": "com.example.app",
          "variants": [
            {
              "variant_number": 0,
              "targeting": {"abi_targeting": {"value": [{"alias": "arm64-v8a"}]}},
              "apk_sets": [
                {
                  "module_metadata": {"name": "base"},
                  "apk_descriptions": [
                    {"path": "splits/base-master.apk", "split_apk_metadata": {"is_master_split": true}}
                  ]
                },
                {
                  "module_metadata": {"name": "camera"},
                  "apk_descriptions": [
                    {"path": "splits/camera-master.apk", "split_apk_metadata": {}}
                  ]
                }
              ]
            }
          ]
        }
        """
        result = BuildApksResult.model_validate_json(raw)
        variant = result.variants[0]
        assert variant.targeting.abi_targeting.value[0].alias == AbiAlias.ARM64_V8A
        assert variant.targeting.sdk_version_targeting.is_empty
        assert variant.apk_sets[0].apk_descriptions[0].is_split
        assert result.module_names == ["base", "camera"]
