"""
apkmatch: Device targeting resolution for multi-variant APK builds.

Given a description of a device and the output of a split APK build, this
package decides which variant applies to the device and which of its APKs
should be delivered.
"""

__version__ = "1.0.0"
__author__ = "apkmatch Team"
