"""Errors raised while resolving and pulling a package."""


class PullerError(Exception):
    """Fatal error that aborts a pull."""
    pass


class NoDevicesError(PullerError):
    """No device is attached to adb."""
    pass


class NoPackagesFoundError(PullerError):
    """The package manager listed no packages."""
    pass


class PackageNotFoundError(PullerError):
    """A requested package is not installed on the device."""
    pass


class SelectionError(PullerError):
    """The user did not make a valid selection."""
    pass


class InputCancelledError(SelectionError):
    """The user gave no answer."""
    pass


class InvalidInputError(SelectionError):
    """The answer is not a number."""
    pass


class InputOutOfRangeError(SelectionError):
    """The number is not one of the listed indexes."""
    pass
