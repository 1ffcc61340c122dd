"""Exception types raised by PlanarQ."""
from __future__ import annotations


class PlanarQError(Exception):
    """Base class for PlanarQ failures."""


class UsageError(PlanarQError):
    """Command-line arguments are missing, extra, or out of range."""


class FormatError(PlanarQError, ValueError):
    """Input bytes do not match the expected planar RGB layout."""
