"""Interactive selection of a device and a package."""

import re
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .adb.device import DeviceInfo
from .adb.package import Package
from .errors import (
    InputCancelledError,
    InputOutOfRangeError,
    InvalidInputError,
    NoDevicesError,
    PackageNotFoundError,
)
from .util.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

ReadLine = Callable[[str], str]

_INTEGER = re.compile(r"[+-]?[0-9]+")


def read_input_number(prompt: str, minimum: int, maximum: int, read_line: ReadLine) -> int:
    """Prompt for an integer in ``[minimum, maximum]``.
    
    Raises:
        InputCancelledError: On end of input or an empty answer
        InvalidInputError: If the answer is not a base-10 integer
        InputOutOfRangeError: If the number is outside the range
    """
    try:
        answer = read_line(f"{prompt} [{minimum}-{maximum}]: ")
    except EOFError as e:
        raise InputCancelledError("Input cancelled") from e
    
    answer = answer.strip()
    if not answer:
        raise InputCancelledError("Input cancelled")
    
    if not _INTEGER.fullmatch(answer):
        raise InvalidInputError(f"Invalid input: {answer!r} is not a number")
    
    index = int(answer)
    if index < minimum or index > maximum:
        raise InputOutOfRangeError(f"Input out of range: {index}")
    
    return index


class Selector:
    """Resolves one device or package, prompting when it has to."""
    
    def __init__(self, console: Console, read_line: Optional[ReadLine] = None):
        self.console = console
        self.read_line = read_line or self._console_input
    
    def _console_input(self, prompt: str) -> str:
        return self.console.input(prompt, markup=False)
    
    def choose(
        self,
        candidates: Sequence[T],
        kind: str,
        columns: Tuple[str, ...],
        describe: Callable[[T], Tuple[str, ...]],
    ) -> T:
        """Pick one candidate, automatically if it is the only one."""
        if len(candidates) == 1:
            self.console.print(f"{kind.capitalize()}: {escape(describe(candidates[0])[0])}")
            return candidates[0]
        
        table = Table(title=f"{kind.capitalize()}s", title_justify="left")
        table.add_column("#", justify="right", style="bold")
        for column in columns:
            table.add_column(column)
        
        for i, candidate in enumerate(candidates):
            table.add_row(str(i), *(escape(field) for field in describe(candidate)))
        
        self.console.print(table)
        
        index = read_input_number(f"Which {kind}?", 0, len(candidates) - 1, self.read_line)
        return candidates[index]
    
    def resolve_device(self, devices: List[DeviceInfo], serial: Optional[str] = None) -> DeviceInfo:
        """Resolve the device to pull from.
        
        A requested serial that is not attached only produces a warning;
        the user is asked instead.
        """
        if not devices:
            raise NoDevicesError("No devices found")
        
        if serial:
            for device in devices:
                if device.serial == serial:
                    return device
            logger.warning(f"Could not locate device: {serial}")
        
        device = self.choose(devices, "device", ("Serial", "State"), lambda d: (d.serial, d.state))
        
        if not device.is_ready:
            logger.warning(f"Device {device.serial} is {device.state}")
        
        return device
    
    def resolve_package(self, packages: List[Package], name: Optional[str] = None) -> Package:
        """Resolve the package to pull.
        
        A requested package must be installed; there is no prompt fallback.
        """
        if name:
            for package in packages:
                if package.name == name:
                    return package
            raise PackageNotFoundError(f"Could not locate package: {name}")
        
        return self.choose(packages, "package", ("Package", "Path"), lambda p: (p.name, p.path))
