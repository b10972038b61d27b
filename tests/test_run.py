"""
Tests for the run.py entry point and application settings.
"""

import logging

from fastapi import FastAPI

import run
from users_api.app.core.config import Settings
from users_api.app.core.logging_config import resolve_level, setup_logging


class TestServerConfig:
    """Tests for build_server_config."""

    def test_uses_settings(self):
        config = run.build_server_config(Settings(host="127.0.0.1", port=3001, log_level="WARNING"))
        assert config.host == "127.0.0.1"
        assert config.port == 3001
        assert config.log_level == "warning"
        assert config.access_log is False
        assert isinstance(config.app, FastAPI)

    def test_app_is_seeded(self):
        config = run.build_server_config(Settings(id_strategy="counter"))
        assert len(config.app.state.store) == 2
        assert config.app.state.store.id_strategy == "counter"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_console_and_file(self, monkeypatch, tmp_path):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        logfile = tmp_path / "users.log"

        setup_logging("debug", str(logfile))
        try:
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 2
            logging.getLogger("users_api.test").debug("hello")
            for handler in root.handlers:
                handler.flush()
            assert "[DEBUG] users_api.test: hello" in logfile.read_text(encoding="utf-8")
        finally:
            for handler in root.handlers:
                handler.close()

    def test_configures_once(self, monkeypatch):
        root = logging.getLogger()
        existing = logging.NullHandler()
        monkeypatch.setattr(root, "handlers", [existing])

        setup_logging("DEBUG")
        assert root.handlers == [existing]

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)

        setup_logging("chatty")
        assert root.level == logging.INFO

    def test_resolve_level(self):
        assert resolve_level("warning") == logging.WARNING
        assert resolve_level("DEBUG") == logging.DEBUG
        assert resolve_level("chatty") == logging.INFO
