"""Installed version of the eql distribution."""

from importlib.metadata import PackageNotFoundError, version

UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    """Get the eql version from package metadata, or ``0.0.0`` when not installed."""
    try:
        return version("eql")
    except PackageNotFoundError:
        return UNKNOWN_VERSION
