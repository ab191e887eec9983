"""
APK Puller - pull installed Android application packages from a device.

Lists the devices attached to ``adb``, lets the user pick one, lists the
packages installed on it and copies the chosen package's APK to the local
machine as ``<package>.apk``.
"""

__version__ = "0.1.0"
__author__ = "APK Puller Contributors"
