"""Package version, read from the installed distribution's metadata."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "figtokens"


def get_version() -> str:
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        # Running from a source tree that was never installed
        return "0.0.0"


__version__ = get_version()
