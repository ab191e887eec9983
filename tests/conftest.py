"""Shared fixtures for APK Puller tests."""

import io
from pathlib import Path
from typing import Dict, List

import pytest
from rich.console import Console

from apkpuller.adb.client import ADBError
from apkpuller.adb.device import DeviceInfo


class FakeBridge:
    """In-memory stand-in for the adb client."""
    
    def __init__(self, devices: List[DeviceInfo], shell_output: Dict[str, str] = None):
        self.devices = devices
        self.shell_output = shell_output or {}
        self.shell_calls = []
        self.pull_calls = []
        self.pull_error = None
    
    def list_devices(self) -> List[DeviceInfo]:
        return list(self.devices)
    
    def shell(self, serial: str, command: str) -> str:
        self.shell_calls.append((serial, command))
        if serial not in self.shell_output:
            raise ADBError(f"device '{serial}' not found")
        return self.shell_output[serial]
    
    def pull(self, serial: str, remote_path: str, local_path: Path) -> None:
        self.pull_calls.append((serial, remote_path, local_path))
        if self.pull_error:
            raise ADBError(self.pull_error)
        local_path.write_bytes(b"PK\x03\x04")


class Answers:
    """Feeds canned lines to a prompt, raising EOFError when exhausted."""
    
    def __init__(self, *lines: str):
        self.lines = list(lines)
        self.prompts = []
    
    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


def console_text(console: Console) -> str:
    return console.file.getvalue()
