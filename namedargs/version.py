"""namedargs version information."""

from importlib import metadata

__all__ = ["__version__", "RELEASE"]

# pyproject.toml reads the project version from here.
RELEASE = "0.1.0"

try:  # pragma: no cover - only hit when installed as a package
    __version__ = metadata.version("namedargs")
except metadata.PackageNotFoundError:  # pragma: no cover - development fallback
    __version__ = RELEASE
