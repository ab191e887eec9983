"""Pulls one installed APK from a device chosen by the user."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .adb.client import ADBError, DeviceBridge
from .adb.package import PackageManager
from .adb.pull import FilePuller
from .selector import ReadLine, Selector
from .util.logging import get_logger

logger = get_logger(__name__)


class APKPuller:
    """Sequences device selection, package selection and the pull."""
    
    def __init__(self, bridge: DeviceBridge, console: Console, read_line: Optional[ReadLine] = None):
        self.bridge = bridge
        self.console = console
        self.selector = Selector(console, read_line)
    
    def run(
        self,
        package_name: Optional[str] = None,
        device_serial: Optional[str] = None,
        output_dir: Path = Path("."),
        include_system: bool = True,
    ) -> Path:
        """Pull a package's APK to ``output_dir/<package>.apk``.
        
        Returns:
            Path of the pulled APK
        
        Raises:
            ADBError: If adb fails at any stage
            PullerError: If no device or package could be resolved
        """
        try:
            devices = self.bridge.list_devices()
        except ADBError as e:
            raise ADBError(f"Failed to get list of devices: {e}") from e
        
        device = self.selector.resolve_device(devices, device_serial)
        logger.debug(f"Using device {device.serial} ({device.state})")
        
        try:
            packages = PackageManager(self.bridge, device.serial).list_packages(include_system)
        except ADBError as e:
            raise ADBError(f"Failed to retrieve packages: {e}") from e
        
        package = self.selector.resolve_package(packages, package_name)
        
        local_path = output_dir / package.apk_filename
        self.console.print(f"Pulling {escape(package.apk_filename)} from device... ", end="")
        
        try:
            FilePuller(self.bridge, device.serial).pull_file(package.path, local_path)
        except ADBError as e:
            self.console.print("[red]Failed[/red]")
            raise ADBError(f"Failed to pull package from device: {e}") from e
        
        self.console.print("[green]Success[/green]")
        return local_path
