"""
Tests for Settings
==================
Tests for the YAML settings loader in pwdgen/settings.py.
"""

import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from pwdgen import settings
from pwdgen.settings import APP_CONFIG_PATH, get_int_setting, get_setting, load_app_config


def test_app_config_exists():
    assert APP_CONFIG_PATH.exists()
    assert isinstance(load_app_config(), dict)


def test_generator_defaults():
    assert get_setting("generator.default_min_length") == 14
    assert get_setting("generator.max_iterations") == 1000


def test_cli_defaults():
    assert get_setting("cli.count") == 100
    assert get_setting("cli.min_length") == 12


def test_missing_setting_returns_default():
    assert get_setting("generator.nope") is None
    assert get_setting("nope.deeper.path", 7) == 7


def test_non_dict_path_returns_default():
    assert get_setting("cli.count.value", "fallback") == "fallback"


def test_int_setting_reads_config():
    assert get_int_setting("parallel.workers", 1) == 4
    assert get_int_setting("cli.count", 1, minimum=0) == 100


def test_int_setting_default_when_missing():
    assert get_int_setting("generator.nope", 9) == 9


def test_int_setting_rejects_bad_values(monkeypatch):
    monkeypatch.setattr(settings, "load_app_config", lambda: {
        "generator": {"max_iterations": "many", "zero": 0, "flag": True},
    })
    with pytest.raises(ValueError):
        get_int_setting("generator.max_iterations", 1000)
    with pytest.raises(ValueError):
        get_int_setting("generator.zero", 5)
    with pytest.raises(ValueError):
        get_int_setting("generator.flag", 5)
    assert get_int_setting("generator.zero", 5, minimum=0) == 0


def test_bad_config_reaches_builder(monkeypatch):
    from pwdgen.builder import PasswordBuilder
    from pwdgen.random_source import SeededRandom

    monkeypatch.setattr(settings, "load_app_config", lambda: {"generator": {"max_iterations": -1}})
    with pytest.raises(ValueError):
        PasswordBuilder(SeededRandom(1))
