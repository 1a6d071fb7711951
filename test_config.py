#!/usr/bin/env python3
"""Tests for configuration loading"""

import pytest

from access_gate.config import DEFAULT_ACCESS_CODE, DEFAULT_PORT, GateConfig, load_config


def test_defaults():
    config = load_config({})
    assert config == GateConfig()
    assert config.access_code == DEFAULT_ACCESS_CODE == "demo2024"
    assert config.port == DEFAULT_PORT


def test_access_code_override():
    assert load_config({"DEMO_ACCESS_CODE": "secretXYZ"}).access_code == "secretXYZ"


def test_empty_access_code_uses_default():
    assert load_config({"DEMO_ACCESS_CODE": ""}).access_code == DEFAULT_ACCESS_CODE


def test_server_settings():
    config = load_config({"HOST": "127.0.0.1", "PORT": "8080", "DEBUG": "True", "LOG_LEVEL": "debug"})
    assert config.host == "127.0.0.1"
    assert config.port == 8080
    assert config.debug is True
    assert config.log_level == "DEBUG"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("DEMO_ACCESS_CODE", "fromEnv")
    assert load_config().access_code == "fromEnv"


def test_config_is_immutable():
    config = GateConfig()
    with pytest.raises(AttributeError):
        config.access_code = "other"


@pytest.mark.parametrize("value", ["loud", "", "verbose"])
def test_unknown_log_level_uses_default(value):
    assert load_config({"LOG_LEVEL": value}).log_level == "INFO"


def test_known_log_level_is_normalised():
    assert load_config({"LOG_LEVEL": " warning "}).log_level == "WARNING"
