"""Command Line Interface for APK Puller."""

import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .adb import ADBClient, ADBError
from .config import load_config
from .errors import PullerError
from .puller import APKPuller
from .util import format_size, get_logger, setup_logging

console = Console()
err_console = Console(stderr=True)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def fail(message: str) -> NoReturn:
    """Print a fatal error and exit with status 1."""
    err_console.print(f"[red]{escape(message)}[/red]")
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("package_arg", metavar="[PACKAGE]", required=False)
@click.argument("device_arg", metavar="[DEVICE]", required=False)
@click.option("--package", "-package", "package_name", help="Application package you'd like to pull from the device.")
@click.option("--device", "-device", "device_serial", help="Device serial number used to identify a specific device.")
@click.option("--output", "-o", type=click.Path(file_okay=False, path_type=Path), help="Directory to write the APK to")
@click.option("--adb", "adb_path", help="Path to the adb executable")
@click.option("--system/--no-system", default=None, help="Include system packages in the listing")
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Configuration file path")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(__version__, prog_name="apkpuller")
def cli(
    package_arg: Optional[str],
    device_arg: Optional[str],
    package_name: Optional[str],
    device_serial: Optional[str],
    output: Optional[Path],
    adb_path: Optional[str],
    system: Optional[bool],
    config: Optional[Path],
    verbose: bool,
):
    """APK Puller - pull an installed application package from an Android device.
    
    PACKAGE and DEVICE may be given as arguments or with -package and
    -device; the flags win when both are present.
    """
    try:
        settings = load_config(config)
    except ValueError as e:
        fail(f"Invalid configuration: {e}")
    
    setup_logging(level="DEBUG" if verbose else settings.log_level, console=err_console)
    logger = get_logger(__name__)
    
    client = ADBClient(
        adb_path=adb_path or settings.adb_path,
        timeout=settings.timeout,
        pull_timeout=settings.pull_timeout,
    )
    if not client.is_available():
        fail("ADB is not available or not in PATH")
    
    puller = APKPuller(client, console)
    
    try:
        apk_path = puller.run(
            package_name=package_name or package_arg,
            device_serial=device_serial or device_arg,
            output_dir=output or settings.output_dir,
            include_system=settings.include_system if system is None else system,
        )
    except (ADBError, PullerError) as e:
        fail(str(e))
    
    logger.info(f"Wrote {apk_path} ({format_size(apk_path.stat().st_size)})")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
