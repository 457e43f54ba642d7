"""Metadata for the Project."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ("__version__",)

try:
    __version__ = version("sqlrows")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.1"
finally:
    del version, PackageNotFoundError
