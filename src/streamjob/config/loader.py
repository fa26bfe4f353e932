from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import yaml

from streamjob.kernel.conf import normalize_key


# ConfigError is raised for an unusable configuration file (fail fast at job start).
class ConfigError(ValueError):
    pass


def load_yaml_conf(path: Path) -> dict[str, str]:
    # YAML job configuration for local runs: nested mappings become dotted keys, then normalized.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    conf: dict[str, str] = {}
    for key, value in _flatten(raw, prefix=""):
        conf[normalize_key(key)] = value
    return conf


def _flatten(raw: Mapping[object, object], *, prefix: str) -> list[tuple[str, str]]:
    items: list[tuple[str, str]] = []
    for key, value in raw.items():
        if not isinstance(key, (str, int)):
            raise ConfigError(f"Config keys must be strings, got {key!r}")
        name = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            items.extend(_flatten(value, prefix=name))
        elif isinstance(value, (list, tuple)):
            # Hadoop takes multi-valued settings as comma separated strings.
            items.append((name, ",".join(_scalar(item, name) for item in value)))
        else:
            items.append((name, _scalar(value, name)))
    return items


def _scalar(value: object, name: str) -> str:
    if isinstance(value, (dict, list, tuple)):
        raise ConfigError(f"Config value for '{name}' must be a scalar")
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
