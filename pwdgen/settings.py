#!/usr/bin/env python3
"""
Settings
========
Reads pwdgen defaults from configs/app.yaml.

The file holds defaults only (default lengths, the iteration cap, CLI
count, worker count). The character-class policy and the 32-bit entropy
floor are fixed in pwdgen.builder and are not read from here.

Usage:
    from pwdgen.settings import get_setting, get_int_setting

    get_setting("cli")                                # {'count': 100, ...}
    get_int_setting("generator.max_iterations", 1000)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    """Parse app.yaml once per process."""
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing pwdgen config: {APP_CONFIG_PATH}")
    data = yaml.safe_load(APP_CONFIG_PATH.read_text())
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get a nested setting by dotted path, e.g. "generator.max_iterations"."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def get_int_setting(path: str, default: int, minimum: int = 1) -> int:
    """
    Get an integer setting, falling back to default when it is absent.

    Raises:
        ValueError: If the configured value is not an integer >= minimum
    """
    value = get_setting(path, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ValueError(
            f"{path} in {APP_CONFIG_PATH.name} must be an integer >= {minimum}, got {value!r}"
        )
    return value


__all__ = [
    "load_app_config",
    "get_setting",
    "get_int_setting",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
