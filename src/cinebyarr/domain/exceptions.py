"""Domain exceptions for the resolution pipeline."""

from __future__ import annotations


class CinebyarrError(Exception):
    """Base class for all resolution errors."""


class ContentNotFoundError(CinebyarrError):
    """Raised when the site search yields no usable result link."""
