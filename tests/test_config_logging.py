"""
Tests for Configuration and Logging Setup
=========================================
"""

import importlib
import json
import logging

import pytest
import structlog

from passhash_core import config
from passhash_core.config import HashConfig


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module after environment changes, restoring it afterwards."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


class TestHashConfig:
    """Tests for HashConfig defaults and environment overrides."""

    def test_defaults(self):
        cfg = HashConfig()

        assert config.DEFAULT_TIME_COST == 1
        assert config.DEFAULT_MEMORY_COST == 65536
        assert config.DEFAULT_KEY_LEN == 32
        assert config.DEFAULT_SALT_LEN == 16
        assert cfg.resolve_parallelism() >= 1

    def test_constants(self):
        assert config.ALGORITHM == "argon2id"
        assert config.ARGON2_VERSION == 19

    def test_env_overrides(self, monkeypatch, reload_config):
        monkeypatch.setenv("PASSHASH_TIME_COST", "3")
        monkeypatch.setenv("PASSHASH_MEMORY_COST", "4096")
        monkeypatch.setenv("PASSHASH_PARALLELISM", "2")
        cfg = reload_config().HashConfig()

        assert cfg.time_cost == 3
        assert cfg.memory_cost == 4096
        assert cfg.resolve_parallelism() == 2

    def test_cpu_affinity(self, monkeypatch):
        """Only CPUs the process may run on count towards parallelism."""
        monkeypatch.setattr(config.os, "sched_getaffinity", lambda pid: {0, 2}, raising=False)
        monkeypatch.setattr(config.os, "cpu_count", lambda: 64)

        assert HashConfig(parallelism=None).resolve_parallelism() == 2

    def test_cpu_count_fallback(self, monkeypatch):
        monkeypatch.delattr(config.os, "sched_getaffinity", raising=False)
        monkeypatch.setattr(config.os, "cpu_count", lambda: None)

        assert HashConfig(parallelism=None).resolve_parallelism() == 1

    def test_explicit_parallelism_wins(self, monkeypatch):
        monkeypatch.setattr(config, "available_cpus", lambda: 16)

        assert HashConfig(parallelism=3).resolve_parallelism() == 3


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_json_output(self, capsys):
        from passhash_core.logging_setup import get_logger, setup_logging

        setup_logging(service_name="auth-test", level="DEBUG", json_output=True)
        get_logger("passhash_core.test").info("password_hash_upgraded", user="u1")

        lines = [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]
        event = next(line for line in lines if line["event"] == "password_hash_upgraded")

        assert event["service"] == "auth-test"
        assert event["level"] == "info"
        assert event["user"] == "u1"

    def test_level_filtering(self, capsys):
        from passhash_core.logging_setup import get_logger, setup_logging

        setup_logging(level="WARNING", json_output=True)
        get_logger("passhash_core.test").info("should_not_appear")

        assert "should_not_appear" not in capsys.readouterr().out
