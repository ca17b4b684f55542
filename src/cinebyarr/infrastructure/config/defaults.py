"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "cinebyarr",
    "environment": "dev",
    "http": {
        "timeout_seconds": None,  # no client-side timeout
        "follow_redirects": True,
        "user_agent": "Cinebyarr/3.0.0",
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "tmdb": {
        "api_key": None,
        "base_url": "https://api.themoviedb.org/3",
        "language": None,
    },
    "cineby": {
        "base_url": "https://www.cineby.app",
        "user_agent": "Mozilla/5.0",
    },
}
