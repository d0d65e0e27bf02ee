"""Test configuration for apkmatch."""

import tempfile
from pathlib import Path

import pytest

from apkmatch.core.config import get_config
from apkmatch.core.logging import reset_logging
from apkmatch.models import (
    Abi,
    AbiAlias,
    AbiTargeting,
    ApkDescription,
    ApkSet,
    ApkTargeting,
    BuildApksResult,
    DensityAlias,
    DeviceSpec,
    ModuleMetadata,
    ScreenDensity,
    ScreenDensityTargeting,
    SdkVersion,
    SdkVersionTargeting,
    SplitApkMetadata,
    Variant,
    VariantTargeting,
)

ALL_DENSITIES = [
    DensityAlias.LDPI,
    DensityAlias.MDPI,
    DensityAlias.HDPI,
    DensityAlias.XHDPI,
    DensityAlias.XXHDPI,
    DensityAlias.XXXHDPI,
]


def sdk_targeting(value: int, *alternatives: int) -> SdkVersionTargeting:
    """Build API level targeting from minimum API levels."""
    return SdkVersionTargeting(
        value=[SdkVersion(min=value)],
        alternatives=[SdkVersion(min=alt) for alt in alternatives],
    )


def density_targeting(value: DensityAlias) -> ScreenDensityTargeting:
    """Build density targeting for one bucket, with every other bucket as alternative."""
    return ScreenDensityTargeting(
        value=[ScreenDensity(density_alias=value)],
        alternatives=[ScreenDensity(density_alias=d) for d in ALL_DENSITIES if d != value],
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests.

    Yields:
        Path: A Path object pointing to the temporary directory.
            The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Drop the cached configuration so environment changes take effect."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture(autouse=True)
def clean_logging():
    """Start and end every test with logging unconfigured."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def device_spec():
    """A modern arm64 phone: API 30, hdpi, English.

    Returns:
        DeviceSpec: The device description.
    """
    return DeviceSpec(
        sdk_version=30,
        supported_abis=["arm64-v8a", "armeabi-v7a"],
        screen_density=240,
        supported_locales=["en-US"],
    )


@pytest.fixture
def build_apks_result():
    """A build with a split variant for API 21+ and an empty legacy variant.

    Variant 0 targets API 21 and above and holds one split of module "base"
    targeting arm64 and hdpi. Variant 1 targets API levels below 21 and is
    empty.

    Returns:
        BuildApksResult: The build output.
    """
    split_targeting = ApkTargeting(
        abi_targeting=AbiTargeting(
            value=[Abi(alias=AbiAlias.ARM64_V8A)],
            alternatives=[Abi(alias=AbiAlias.X86_64)],
        ),
        screen_density_targeting=density_targeting(DensityAlias.HDPI),
    )
    return BuildApksResult(
        package_name="com.example.app",
        variants=[
            Variant(
                variant_number=0,
                targeting=VariantTargeting(sdk_version_targeting=sdk_targeting(21, 1)),
                apk_sets=[
                    ApkSet(
                        module_metadata=ModuleMetadata(name="base"),
                        apk_descriptions=[
                            ApkDescription(
                                path="splits/base-arm64_v8a_hdpi.apk",
                                targeting=split_targeting,
                                split_apk_metadata=SplitApkMetadata(
                                    split_id="config.arm64_v8a_hdpi"
                                ),
                            )
                        ],
                    )
                ],
            ),
            Variant(
                variant_number=1,
                targeting=VariantTargeting(sdk_version_targeting=sdk_targeting(1, 21)),
            ),
        ],
    )
