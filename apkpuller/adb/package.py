"""Installed package listing."""

from dataclasses import dataclass
from typing import List

from .client import DeviceBridge
from ..errors import NoPackagesFoundError
from ..util.logging import get_logger

logger = get_logger(__name__)

PACKAGE_PREFIX = "package:"


@dataclass(frozen=True)
class Package:
    """An installed package and the path of its APK on the device."""
    
    name: str
    path: str
    
    @property
    def apk_filename(self) -> str:
        return f"{self.name}.apk"


def parse_package_list(output: str) -> List[Package]:
    """Parse ``pm list packages -f`` output.
    
    Lines look like ``package:/data/app/com.foo/base.apk=com.foo``. Lines
    without the ``package:`` prefix are skipped; malformed ones are logged
    and skipped.
    
    Raises:
        NoPackagesFoundError: If no line yields a package
    """
    packages = []
    
    for line in output.split("\n"):
        line = line.strip()
        if not line.startswith(PACKAGE_PREFIX):
            continue
        
        parts = line[len(PACKAGE_PREFIX):].split("=", 1)
        if len(parts) != 2:
            logger.warning(f"Bad package manager response: '{line}'")
            continue
        
        packages.append(Package(name=parts[1], path=parts[0]))
    
    if not packages:
        raise NoPackagesFoundError("No packages found")
    
    logger.debug(f"Found {len(packages)} packages")
    return packages


class PackageManager:
    """Queries the package manager of one device."""
    
    def __init__(self, bridge: DeviceBridge, serial: str):
        self.bridge = bridge
        self.serial = serial
    
    def list_packages(self, include_system: bool = True) -> List[Package]:
        """List installed packages with their APK paths."""
        cmd = "pm list packages -f"
        
        if not include_system:
            cmd += " -3"  # Third-party packages only
        
        return parse_package_list(self.bridge.shell(self.serial, cmd))
