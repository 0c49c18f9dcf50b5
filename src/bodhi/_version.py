"""Installed distribution version of bodhi-tokens."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "bodhi-tokens"


def get_version() -> str:
    # Running from a source checkout without an install has no metadata
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0+unknown"
