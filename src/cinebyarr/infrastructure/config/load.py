from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides

_SECTION_KEYS: set[str] = {"http", "logging", "tmdb", "cineby"}

# Flat key -> (section, key in section)
_FLAT_MAP: dict[str, tuple[str, str]] = {
    "http_timeout_seconds": ("http", "timeout_seconds"),
    "http_follow_redirects": ("http", "follow_redirects"),
    "http_user_agent": ("http", "user_agent"),
    "log_level": ("logging", "level"),
    "log_format": ("logging", "format"),
    "tmdb_api_key": ("tmdb", "api_key"),
    "tmdb_base_url": ("tmdb", "base_url"),
    "tmdb_language": ("tmdb", "language"),
    "cineby_base_url": ("cineby", "base_url"),
    "cineby_user_agent": ("cineby", "user_agent"),
}


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """
    Recursively merge `override` into `base` and return `base`.

    Rules:
    - dict + dict => deep merge
    - otherwise => override wins
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, Mapping):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _normalize_layer(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Normalize a layer (defaults/YAML/ENV/CLI) into the canonical *sectioned* shape.

    Canonical top-level keys:
    - app_name, environment
    - http.timeout_seconds, http.follow_redirects, http.user_agent
    - logging.level, logging.format
    - tmdb.api_key, tmdb.base_url, tmdb.language
    - cineby.base_url, cineby.user_agent
    """
    out: dict[str, Any] = {}

    for section in _SECTION_KEYS:
        if section in data and isinstance(data[section], Mapping):
            out[section] = dict(data[section])

    for key in ("app_name", "environment"):
        if key in data:
            out[key] = data[key]

    for flat_key, (section, section_key) in _FLAT_MAP.items():
        if flat_key in data:
            out.setdefault(section, {})
            out[section][section_key] = data[flat_key]

    return out


def _read_yaml_config(config_path: Path) -> dict[str, Any]:
    raw = config_path.read_text(encoding="utf-8")
    parsed = yaml.safe_load(raw)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Config YAML must be a mapping, got: {type(parsed)!r}")
    return parsed


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """
    Load configuration with strict precedence:
    defaults < YAML file < env vars < cli overrides

    This function MUST NOT create files or directories (no filesystem side-effects).
    """
    cli_overrides = cli_overrides or {}

    # Load .env first so it participates as "env vars" layer.
    if dotenv_path is not None:
        if not dotenv_path.exists():
            raise FileNotFoundError(dotenv_path)
        load_dotenv(dotenv_path, override=False)

    base = _normalize_layer(deepcopy(DEFAULT_CONFIG))

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(config_path)
        _deep_merge(base, _normalize_layer(_read_yaml_config(config_path)))

    _deep_merge(base, _normalize_layer(EnvOverrides().to_update_dict()))
    _deep_merge(base, _normalize_layer(cli_overrides))

    # Validate final merged config (single source of truth).
    return AppConfig.model_validate(base)
