"""ADB module initialization."""

from .client import ADBClient, ADBError, DeviceBridge
from .device import DeviceInfo, parse_devices_output
from .package import Package, PackageManager, parse_package_list
from .pull import FilePuller

__all__ = [
    # client
    "ADBClient",
    "ADBError",
    "DeviceBridge",
    # device
    "DeviceInfo",
    "parse_devices_output",
    # package
    "Package",
    "PackageManager",
    "parse_package_list",
    # pull
    "FilePuller",
]
