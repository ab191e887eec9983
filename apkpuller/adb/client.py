"""ADB client wrapper for device communication."""

import subprocess
import typing as t
from pathlib import Path

from .device import DeviceInfo, parse_devices_output
from ..util.logging import get_logger

logger = get_logger(__name__)


class ADBError(Exception):
    """ADB operation error."""
    pass


class DeviceBridge(t.Protocol):
    """Operations the puller needs from the device bridge."""
    
    def list_devices(self) -> t.List[DeviceInfo]:
        ...
    
    def shell(self, serial: str, command: str) -> str:
        ...
    
    def pull(self, serial: str, remote_path: str, local_path: Path) -> None:
        ...


class ADBClient:
    """Simple ADB client wrapper."""
    
    def __init__(self, adb_path: str = "adb", timeout: int = 30, pull_timeout: int = 300) -> None:
        """Initialize ADB client.
        
        Args:
            adb_path: Path to adb executable
            timeout: Command timeout in seconds
            pull_timeout: Timeout in seconds for file transfers
        """
        self.adb_path = adb_path
        self.timeout = timeout
        self.pull_timeout = pull_timeout
    
    def _run_command(self, args: t.List[str], timeout: t.Optional[int] = None) -> str:
        """Run ADB command and return output.
        
        Args:
            args: Command arguments
            timeout: Override for the default timeout
            
        Returns:
            Command output
            
        Raises:
            ADBError: If command fails
        """
        timeout = timeout or self.timeout
        cmd = [self.adb_path] + args
        logger.debug(f"Running ADB command: {' '.join(cmd)}")
        
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=timeout,
                check=True
            )
            return result.stdout.strip()
        except subprocess.CalledProcessError as e:
            message = (e.stderr or e.stdout or "").strip()
            raise ADBError(f"ADB command failed: {message}") from e
        except subprocess.TimeoutExpired as e:
            raise ADBError(f"ADB command timed out after {timeout}s") from e
        except FileNotFoundError as e:
            raise ADBError("ADB not found. Please install Android platform tools.") from e
    
    def is_available(self) -> bool:
        """Check if the adb executable can be run."""
        try:
            self._run_command(["version"], timeout=10)
            return True
        except ADBError:
            return False
    
    def list_devices(self) -> t.List[DeviceInfo]:
        """List connected devices.
        
        Returns:
            Devices in the order adb reports them
        """
        return parse_devices_output(self._run_command(["devices"]))
    
    def shell(self, serial: str, command: str) -> str:
        """Execute shell command on device.
        
        Args:
            serial: Device serial number
            command: Shell command to execute
            
        Returns:
            Command output
        """
        return self._run_command(["-s", serial, "shell", command])
    
    def pull(self, serial: str, remote_path: str, local_path: Path) -> None:
        """Pull file from device.
        
        Args:
            serial: Device serial number
            remote_path: Remote file path
            local_path: Local destination path
        """
        self._run_command(
            ["-s", serial, "pull", remote_path, str(local_path)],
            timeout=self.pull_timeout,
        )
