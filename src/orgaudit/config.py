from __future__ import annotations

import json
import os
import pathlib
from dataclasses import asdict, dataclass
from typing import Any

import yaml

from .errors import ConfigError

CONFIG_ENV_VAR = "ORGAUDIT_CONFIG"


@dataclass(frozen=True)
class AnalysisPolicy:
    # Managers should earn between 20% and 50% more than their direct reports' average.
    min_raise: float = 0.20
    max_raise: float = 0.50
    max_reporting_depth: int = 4

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


DEFAULT_POLICY = AnalysisPolicy()


def load_config(path: str | pathlib.Path) -> dict[str, Any]:
    """
    Read a JSON or YAML (.yml/.yaml) config into a dict.

    An empty file counts as an empty config; anything that does not parse to a
    mapping is a ConfigError.
    """
    p = pathlib.Path(path).expanduser().resolve()
    if not p.exists():
        raise FileNotFoundError(p)

    suffix = p.suffix.lower()
    text = p.read_text(encoding="utf-8")
    try:
        if suffix == ".json":
            data = json.loads(text) if text.strip() else None
        elif suffix in {".yml", ".yaml"}:
            data = yaml.safe_load(text)
        else:
            raise ConfigError(f"Unsupported config extension: {p.suffix} (use .json/.yaml)")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot parse {p.name}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{p.name} must hold a mapping, got: {type(data).__name__}")
    return data


def resolve_config_path(explicit: str | None = None) -> pathlib.Path | None:
    """
    Config path resolution:
    1) explicit path (CLI flag)
    2) ORGAUDIT_CONFIG
    3) none (built-in defaults)
    """
    if explicit:
        return pathlib.Path(explicit).expanduser().resolve()
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return pathlib.Path(env).expanduser().resolve()
    return None


def policy_from_config(cfg: dict[str, Any] | None) -> AnalysisPolicy:
    if not cfg:
        return DEFAULT_POLICY
    if not isinstance(cfg, dict):
        raise ConfigError(f"config must be a mapping, got: {type(cfg).__name__}")

    section = cfg.get("policy", {}) or {}
    if not isinstance(section, dict):
        raise ConfigError("config 'policy' section must be a mapping")
    unknown = sorted(set(section) - {"min_raise", "max_raise", "max_reporting_depth"})
    if unknown:
        raise ConfigError(f"unknown policy key(s): {', '.join(unknown)}")

    try:
        min_raise = float(section.get("min_raise", DEFAULT_POLICY.min_raise))
        max_raise = float(section.get("max_raise", DEFAULT_POLICY.max_raise))
        max_depth = int(section.get("max_reporting_depth", DEFAULT_POLICY.max_reporting_depth))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid policy value: {e}") from e

    if min_raise < 0 or max_raise < min_raise:
        raise ConfigError(f"policy requires 0 <= min_raise <= max_raise, got: {min_raise}, {max_raise}")
    if max_depth < 0:
        raise ConfigError(f"max_reporting_depth must be >= 0, got: {max_depth}")

    return AnalysisPolicy(min_raise=min_raise, max_raise=max_raise, max_reporting_depth=max_depth)
