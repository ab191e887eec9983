"""Devices attached to the adb server."""

from dataclasses import dataclass
from typing import List

from ..util.logging import get_logger

logger = get_logger(__name__)

DEVICES_HEADER = "List of devices attached"


@dataclass(frozen=True)
class DeviceInfo:
    """A device as reported by ``adb devices``."""
    
    serial: str
    state: str = "device"
    
    @property
    def is_ready(self) -> bool:
        """Whether adb can run commands on the device."""
        return self.state == "device"


def parse_devices_output(output: str) -> List[DeviceInfo]:
    """Parse the output of ``adb devices`` into device records.
    
    Devices are returned in every state (``unauthorized``, ``offline``, ...)
    so the user can see why a device cannot be used.
    """
    devices = []
    
    for line in output.split("\n"):
        line = line.strip()
        if not line or line.startswith(DEVICES_HEADER) or line.startswith("*"):
            continue
        
        parts = line.split(None, 2)
        if len(parts) < 2:
            logger.warning(f"Bad device list line: '{line}'")
            continue
        
        devices.append(DeviceInfo(serial=parts[0], state=parts[1]))
    
    return devices
