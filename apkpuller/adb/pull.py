"""ADB file pulling utilities."""

from pathlib import Path

from .client import ADBError, DeviceBridge
from ..util.logging import get_logger
from ..util.paths import ensure_directory, format_size

logger = get_logger(__name__)


class FilePuller:
    """Utility for pulling files from Android device via ADB."""
    
    def __init__(self, bridge: DeviceBridge, serial: str):
        self.bridge = bridge
        self.serial = serial
    
    def pull_file(self, device_path: str, local_path: Path) -> Path:
        """Pull a single file from device to local storage.
        
        Raises:
            ADBError: If the destination cannot be created, or the transfer
                fails or leaves no local file
        """
        try:
            ensure_directory(local_path.parent)
        except OSError as e:
            raise ADBError(f"Cannot write {local_path}: {e}") from e
        
        logger.debug(f"Pulling {device_path} -> {local_path}")
        self.bridge.pull(self.serial, device_path, local_path)
        
        if not local_path.exists():
            raise ADBError(f"File was not pulled successfully: {local_path}")
        
        logger.debug(f"Pulled {device_path} ({format_size(local_path.stat().st_size)})")
        return local_path
