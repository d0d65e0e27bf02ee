"""
Device description model.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DeviceSpec(BaseModel):
    """Characteristics of a target device.

    A zero or empty field means the device does not declare that dimension, in
    which case targeting on that dimension is not used to filter APKs.
    """

    sdk_version: int = Field(default=0, ge=0, description="Android API level")
    supported_abis: list[str] = Field(
        default_factory=list,
        description="Native instruction sets, most preferred first (e.g. arm64-v8a)",
    )
    screen_density: int = Field(default=0, ge=0, description="Screen density in dpi")
    supported_locales: list[str] = Field(
        default_factory=list,
        description="Locales as BCP-47 language tags (e.g. en-US, pt-BR)",
    )

    model_config = {"frozen": True}

    @property
    def languages(self) -> frozenset[str]:
        """Get the primary language subtags of all supported locales.

        Returns:
            frozenset[str]: Lower-cased languages, e.g. {"en", "pt"} for
                ["en-US", "pt_BR"].
        """
        return frozenset(
            locale.replace("_", "-").split("-")[0].lower()
            for locale in self.supported_locales
            if locale.strip()
        )
