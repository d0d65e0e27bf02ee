"""
Core type definitions for apkmatch.
"""

from __future__ import annotations

from pathlib import PurePosixPath

# Paths inside an APK set archive always use forward slashes, whatever the host OS.
ZipPath = PurePosixPath

# A module name as declared in the build output (e.g. "base", "feature_camera").
ModuleName = str
