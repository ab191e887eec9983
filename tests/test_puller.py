"""Tests for the end-to-end pull sequence."""

from unittest.mock import MagicMock

import pytest

from apkpuller.adb.client import ADBError
from apkpuller.adb.device import DeviceInfo
from apkpuller.errors import InputCancelledError, NoDevicesError, NoPackagesFoundError, PackageNotFoundError
from apkpuller.puller import APKPuller

from conftest import Answers, FakeBridge, console_text

FOO_LISTING = "package:/data/app/com.foo.apk=com.foo\n"


@pytest.fixture
def bridge():
    return FakeBridge(
        [DeviceInfo("emulator-5554", "device"), DeviceInfo("R58M123ABC", "device")],
        {"emulator-5554": "", "R58M123ABC": FOO_LISTING},
    )


class TestAPKPuller:
    """Test the device, package and pull sequence."""
    
    def test_pull_selected_device_single_package(self, bridge, console, tmp_path):
        """Test choosing the second device and auto-resolving its only package."""
        answers = Answers("1")
        
        apk_path = APKPuller(bridge, console, answers).run(output_dir=tmp_path)
        
        assert answers.prompts == ["Which device? [0-1]: "]
        assert bridge.shell_calls == [("R58M123ABC", "pm list packages -f")]
        assert bridge.pull_calls == [("R58M123ABC", "/data/app/com.foo.apk", tmp_path / "com.foo.apk")]
        assert apk_path == tmp_path / "com.foo.apk"
        assert apk_path.exists()
        
        output = console_text(console)
        assert "Pulling com.foo.apk from device..." in output
        assert "Success" in output
    
    def test_requested_package_and_device(self, bridge, console, tmp_path):
        """Test pre-selected device and package skip every prompt."""
        answers = Answers()
        
        apk_path = APKPuller(bridge, console, answers).run(
            package_name="com.foo", device_serial="R58M123ABC", output_dir=tmp_path
        )
        
        assert answers.prompts == []
        assert apk_path.name == "com.foo.apk"
    
    def test_output_directory_is_created(self, bridge, console, tmp_path):
        output_dir = tmp_path / "apks" / "today"
        
        apk_path = APKPuller(bridge, console, Answers()).run(
            device_serial="R58M123ABC", output_dir=output_dir
        )
        
        assert apk_path.parent == output_dir
        assert output_dir.is_dir()
    
    def test_device_listing_failure(self, console, tmp_path):
        """Test a failing device listing is fatal."""
        bridge = FakeBridge([])
        bridge.list_devices = MagicMock(side_effect=ADBError("cannot connect to daemon"))
        
        with pytest.raises(ADBError, match="Failed to get list of devices: cannot connect to daemon"):
            APKPuller(bridge, console, Answers()).run(output_dir=tmp_path)
    
    def test_no_devices(self, console, tmp_path):
        with pytest.raises(NoDevicesError):
            APKPuller(FakeBridge([]), console, Answers()).run(output_dir=tmp_path)
    
    def test_package_listing_failure(self, bridge, console, tmp_path):
        """Test a failing package manager query is fatal."""
        bridge.shell_output.pop("R58M123ABC")
        
        with pytest.raises(ADBError, match="Failed to retrieve packages"):
            APKPuller(bridge, console, Answers()).run(device_serial="R58M123ABC", output_dir=tmp_path)
        
        assert bridge.pull_calls == []
    
    def test_empty_package_listing(self, bridge, console, tmp_path):
        """Test a device without packages fails before any package prompt."""
        answers = Answers("0")
        
        with pytest.raises(NoPackagesFoundError):
            APKPuller(bridge, console, answers).run(output_dir=tmp_path)
        
        assert answers.prompts == ["Which device? [0-1]: "]
    
    def test_unknown_package(self, bridge, console, tmp_path):
        with pytest.raises(PackageNotFoundError):
            APKPuller(bridge, console, Answers()).run(
                package_name="com.nope", device_serial="R58M123ABC", output_dir=tmp_path
            )
        
        assert bridge.pull_calls == []
    
    def test_cancelled_device_prompt(self, bridge, console, tmp_path):
        """Test cancelling the prompt stops before listing packages."""
        with pytest.raises(InputCancelledError):
            APKPuller(bridge, console, Answers("")).run(output_dir=tmp_path)
        
        assert bridge.shell_calls == []
    
    def test_pull_failure(self, bridge, console, tmp_path):
        """Test a failed pull reports Failed and raises."""
        bridge.pull_error = "remote object does not exist"
        
        with pytest.raises(ADBError, match="Failed to pull package from device: remote object does not exist"):
            APKPuller(bridge, console, Answers()).run(device_serial="R58M123ABC", output_dir=tmp_path)
        
        assert "Failed" in console_text(console)
    
    def test_pull_without_local_file(self, bridge, console, tmp_path):
        """Test a pull that writes nothing counts as a failure."""
        bridge.pull = lambda serial, remote_path, local_path: None
        
        with pytest.raises(ADBError, match="File was not pulled successfully"):
            APKPuller(bridge, console, Answers()).run(device_serial="R58M123ABC", output_dir=tmp_path)
    
    def test_output_directory_cannot_be_created(self, bridge, console, tmp_path):
        """Test an unwritable destination reports Failed instead of crashing."""
        blocker = tmp_path / "apks"
        blocker.write_text("not a directory")
        
        with pytest.raises(ADBError, match="Failed to pull package from device: Cannot write"):
            APKPuller(bridge, console, Answers()).run(
                device_serial="R58M123ABC", output_dir=blocker / "sub"
            )
        
        assert bridge.pull_calls == []
        assert "Failed" in console_text(console)
    
    def test_package_name_is_not_markup(self, bridge, console, tmp_path):
        """Test square brackets from the device are printed literally."""
        bridge.shell_output["R58M123ABC"] = "package:/data/app/odd.apk=com.[bold]odd\n"
        
        APKPuller(bridge, console, Answers()).run(device_serial="R58M123ABC", output_dir=tmp_path)
        
        assert "Pulling com.[bold]odd.apk from device..." in console_text(console)
