"""Tests for configuration loading and merging."""

import json

import pytest
from pydantic import ValidationError

from nostrscan.config import DEFAULT_CONFIG, deep_merge, get_config_path, get_settings, load_config, save_config


def test_load_config_defaults_when_file_missing(isolated_config):
    assert not isolated_config.exists()
    assert load_config() == DEFAULT_CONFIG


def test_config_path_honors_env_override(isolated_config):
    assert get_config_path() == isolated_config


def test_config_path_falls_back_to_xdg(monkeypatch, tmp_path):
    monkeypatch.delenv("NOSTRSCAN_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_config_path() == tmp_path / "nostrscan" / "config.json"


def test_user_config_is_merged_over_defaults(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(json.dumps({"output": {"format": "json"}, "web": {"port": 9000}}))

    config = load_config()

    assert config["output"]["format"] == "json"
    assert config["output"]["kinds"] == DEFAULT_CONFIG["output"]["kinds"]
    assert config["web"] == {"host": "127.0.0.1", "port": 9000}


def test_load_config_does_not_mutate_defaults(isolated_config):
    config = load_config()
    config["web"]["port"] = 1

    assert DEFAULT_CONFIG["web"]["port"] == 5180


def test_save_config_round_trip(isolated_config):
    config = load_config()
    config["logging"]["level"] = "DEBUG"

    save_config(config)

    assert isolated_config.exists()
    assert get_settings().logging.level == "DEBUG"


def test_get_settings_rejects_invalid_values(isolated_config):
    save_config({"output": {"format": "yaml"}})

    with pytest.raises(ValidationError):
        get_settings()


def test_deep_merge_replaces_non_dict_values():
    merged = deep_merge({"a": {"b": 1, "c": [1]}}, {"a": {"c": [2]}, "d": 3})
    assert merged == {"a": {"b": 1, "c": [2]}, "d": 3}
