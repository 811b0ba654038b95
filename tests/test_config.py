#!/usr/bin/env python3
"""
Tests for configuration management module.
"""

import json

import pytest

from modular_console.config import CONFIG_ENV_VAR, DEFAULTS, ConsoleConfig, load_config
from modular_console.exceptions import ConfigError


# ============================================================================
# Config Model Tests
# ============================================================================

class TestConsoleConfig:
    """Tests for ConsoleConfig model."""

    def test_create_empty_config(self):
        """Test creating config with all defaults."""
        cfg = ConsoleConfig()
        assert cfg.app_name is None
        assert cfg.app_version is None
        assert cfg.collision_policy is None
        assert cfg.log_level is None
        assert cfg.modules is None

    def test_get_falls_back_to_defaults(self):
        cfg = ConsoleConfig()
        assert cfg.get("app_name") == DEFAULTS["app_name"]
        assert cfg.get("collision_policy") == "override"
        assert cfg.get("modules") == []

    def test_get_with_value(self):
        cfg = ConsoleConfig(app_name="billing", collision_policy="error")
        assert cfg.get("app_name") == "billing"
        assert cfg.get("collision_policy") == "error"

    def test_get_unknown_key_uses_default(self):
        cfg = ConsoleConfig()
        assert cfg.get("nonexistent", "fallback") == "fallback"

    def test_invalid_collision_policy(self):
        with pytest.raises(ValueError):
            ConsoleConfig(collision_policy="ignore")

    def test_extra_fields_ignored(self):
        cfg = ConsoleConfig.model_validate({"_comment": "hi", "app_name": "x"})
        assert cfg.app_name == "x"


# ============================================================================
# Config Loading Tests
# ============================================================================

class TestLoadConfig:
    """Tests for load_config()."""

    def test_no_path_returns_defaults(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert load_config() == ConsoleConfig()

    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.json") == ConsoleConfig()

    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / "console.json"
        config_file.write_text(json.dumps({
            "app_name": "billing",
            "modules": ["billing.modules:InvoiceModule"],
        }))

        cfg = load_config(config_file)
        assert cfg.app_name == "billing"
        assert cfg.modules == ["billing.modules:InvoiceModule"]

    def test_load_from_env_var(self, tmp_path, monkeypatch):
        config_file = tmp_path / "console.json"
        config_file.write_text(json.dumps({"log_level": "DEBUG"}))
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        assert load_config().log_level == "DEBUG"

    def test_invalid_json_raises(self, tmp_path):
        config_file = tmp_path / "console.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(config_file)

    def test_invalid_values_raise(self, tmp_path):
        config_file = tmp_path / "console.json"
        config_file.write_text(json.dumps({"collision_policy": "sometimes"}))

        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(config_file)
