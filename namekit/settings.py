#!/usr/bin/env python3
"""Settings loader for namekit."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_ROOT.parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    data = yaml.safe_load(APP_CONFIG_PATH.read_text())
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    data = load_app_config()
    current: Any = data
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def get_limits(key: str) -> tuple[int, int]:
    """Get an inclusive (low, high) range from generation.limits."""
    value = get_setting(f"generation.limits.{key}")
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"generation.limits.{key} must be a [min, max] pair in app.yaml")
    low, high = int(value[0]), int(value[1])
    if low > high:
        raise ValueError(f"generation.limits.{key}: min {low} is greater than max {high}")
    return low, high


def clamp(value: int, key: str) -> int:
    """Clamp a value into the configured generation.limits range."""
    low, high = get_limits(key)
    return max(low, min(high, value))


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path string relative to project root (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    expanded = os.path.expanduser(str(value))
    path = Path(expanded)
    if not path.is_absolute():
        base = base or PROJECT_ROOT
        path = (base / path).resolve()
    return path


__all__ = [
    "load_app_config",
    "get_setting",
    "get_limits",
    "clamp",
    "resolve_path",
    "PROJECT_ROOT",
    "APP_CONFIG_PATH",
]
