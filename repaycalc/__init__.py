"""Mortgage repayment calculation utilities.

This module also exposes the package version for runtime display."""

from importlib import metadata

__all__ = ["__version__"]

try:
    __version__ = metadata.version("repaycalc")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    # Keep in sync with the version declared in ``pyproject.toml``
    __version__ = "0.1.0"
