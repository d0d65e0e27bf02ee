"""Services package for apkmatch."""

from .matching import ApkMatcher

__all__ = ["ApkMatcher"]
