from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from wordperms.core.model import RunConfig, parse_capitalization


DEFAULT_CONFIG = RunConfig()

_INT_KEYS = ("max_len", "limit", "workers")
_KNOWN_KEYS = frozenset(("max_len", "cap_style", "limit", "workers", "sort"))


class ConfigError(ValueError):
    pass


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load run settings from a YAML file.

    Format:
      max_len: 3
      cap_style: first
      limit: 1000
      workers: 8
      sort: true

    Every key is optional. Returns the validated mapping (cap_style parsed).
    """
    p = Path(path)
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"config file is not valid YAML: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("config file must be a mapping of setting -> value")
    return _validate(raw)


def _validate(raw: dict[Any, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for k, v in raw.items():
        if k not in _KNOWN_KEYS:
            raise ConfigError(
                f"unknown setting: {k} (choose from: {', '.join(sorted(_KNOWN_KEYS))})"
            )
        if k in _INT_KEYS:
            if k == "limit" and v is None:
                out[k] = None
                continue
            # bool is an int subclass; reject it explicitly
            if not isinstance(v, int) or isinstance(v, bool):
                raise ConfigError(f"setting '{k}' must be an integer")
            if v < 0:
                raise ConfigError(f"setting '{k}' must not be negative")
            if k == "workers" and v < 1:
                raise ConfigError("setting 'workers' must be at least 1")
            out[k] = v
        elif k == "sort":
            if not isinstance(v, bool):
                raise ConfigError("setting 'sort' must be true or false")
            out[k] = v
        else:
            if not isinstance(v, str):
                raise ConfigError("setting 'cap_style' must be a string")
            try:
                out[k] = parse_capitalization(v)
            except ValueError as e:
                raise ConfigError(str(e)) from e
    return out


def merged_config(overrides: dict[str, Any] | None = None) -> RunConfig:
    """Return DEFAULT_CONFIG with overrides applied. None values are ignored."""
    if not overrides:
        return DEFAULT_CONFIG
    return replace(DEFAULT_CONFIG, **{k: v for k, v in overrides.items() if v is not None})


def load_and_merge(config_file: str | None, **cli_overrides: Any) -> RunConfig:
    """Defaults, then the config file, then explicit CLI options (non-None)."""
    settings: dict[str, Any] = {}
    if config_file:
        settings.update(load_config_file(config_file))
    settings.update(_validate({k: v for k, v in cli_overrides.items() if v is not None}))
    return merged_config(settings)
