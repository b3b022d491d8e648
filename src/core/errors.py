"""Chronoline exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class ChronolineError(Exception):
    """Base exception for all Chronoline failures."""


class ChronolineConfigError(ChronolineError):
    """Raised for invalid runtime configuration."""


class ChronolineIngestError(ChronolineError):
    """Raised when a delimited source table cannot be read."""


class ChronolineConversionError(ChronolineError):
    """Raised when rows cannot be converted into a timeline document."""


class ChronolineOptionsError(ChronolineError):
    """Raised for invalid or unsupported rendering options."""
