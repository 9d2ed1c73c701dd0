"""Tests for the config manager (load_config + env overrides)."""

import json

import pydantic
import pytest

from domwait.config.config_manager import load_config
from domwait.core.models.config import DomWaitConfig


class TestLoadConfig:
    def test_defaults_without_a_file(self):
        cfg = load_config()
        assert isinstance(cfg, DomWaitConfig)
        assert cfg.waits.timeout_ms == 1000
        assert cfg.waits.interval_ms == 50

    def test_load_custom_config(self, tmp_path):
        config_file = tmp_path / "domwait.json"
        config_file.write_text(
            json.dumps(
                {
                    "waits": {"timeout_ms": 2500, "mutation_observer_options": {"attributes": False}},
                    "queries": {"test_id_attribute": "data-qa"},
                    "system": {"log_level": "DEBUG"},
                }
            )
        )
        cfg = load_config(config_file)
        assert cfg.waits.timeout_ms == 2500
        assert cfg.waits.mutation_observer_options.attributes is False
        assert cfg.queries.test_id_attribute == "data-qa"
        assert cfg.system.log_level == "DEBUG"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nonexistent.json")

    def test_path_from_env(self, tmp_path, monkeypatch):
        config_file = tmp_path / "cfg.json"
        config_file.write_text(json.dumps({"waits": {"interval_ms": 5}}))
        monkeypatch.setenv("DOMWAIT_CONFIG_FILE", str(config_file))
        assert load_config().waits.interval_ms == 5

    def test_missing_env_file_raises(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DOMWAIT_CONFIG_FILE", str(tmp_path / "gone.json"))
        with pytest.raises(FileNotFoundError):
            load_config()

    def test_unknown_keys_are_rejected(self, tmp_path):
        config_file = tmp_path / "cfg.json"
        config_file.write_text(json.dumps({"waits": {"timeout": 5}}))
        with pytest.raises(pydantic.ValidationError):
            load_config(config_file)


class TestEnvOverrides:
    def test_timeout_and_interval(self, tmp_path, monkeypatch):
        config_file = tmp_path / "cfg.json"
        config_file.write_text(json.dumps({"waits": {"timeout_ms": 100}}))
        monkeypatch.setenv("DOMWAIT_TIMEOUT_MS", "750")
        monkeypatch.setenv("DOMWAIT_INTERVAL_MS", "12.5")
        cfg = load_config(config_file)
        assert cfg.waits.timeout_ms == 750
        assert cfg.waits.interval_ms == 12.5

    def test_test_id_attribute_and_log_level(self, monkeypatch):
        monkeypatch.setenv("DOMWAIT_TEST_ID_ATTRIBUTE", "data-test")
        monkeypatch.setenv("DOMWAIT_LOG_LEVEL", "INFO")
        cfg = load_config()
        assert cfg.queries.test_id_attribute == "data-test"
        assert cfg.system.log_level == "INFO"

    def test_invalid_number_is_rejected(self, monkeypatch):
        monkeypatch.setenv("DOMWAIT_TIMEOUT_MS", "soon")
        with pytest.raises(ValueError):
            load_config()
