"""Version information for :mod:`radixtree`."""

__all__ = [
    "VERSION",
    "get_version",
]

VERSION = "0.1.0-dev"


def get_version() -> str:
    """Get the :mod:`radixtree` version string."""
    return VERSION
