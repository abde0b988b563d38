# File: src/vsixpack/errors.py
from __future__ import annotations

"""
Error types raised by the packaging pipeline.

Callers catch `PackagingError` to handle every failure the packager reports;
the subclasses tell which stage went wrong.
"""


class PackagingError(RuntimeError):
    """Base class for packaging failures."""


class ValidationError(PackagingError):
    """A manifest field is missing or malformed. Raised before packaging starts."""


class ProcessingError(PackagingError):
    """A processor failed while streaming files or finalizing. The run is aborted."""


class ConfigurationError(PackagingError):
    """
    Declared configuration does not match the package contents (e.g. a
    license path with no matching file), or a config file is unreadable.
    """


__all__ = ["PackagingError", "ValidationError", "ProcessingError", "ConfigurationError"]
