"""
Tests for runtime configuration and logging setup.
"""

import os
import logging
import subprocess
import sys
from pathlib import Path

import config

PROJECT_ROOT = Path(__file__).parent.parent


# =============================================================================
# Logging
# =============================================================================

class TestConfigureLogging:
    """Tests for the single place that installs the root log handler."""

    def test_installs_handler_at_requested_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        config.configure_logging("DEBUG")

        assert len(calls) == 1
        assert calls[0]["level"] == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        config.configure_logging("CHATTY")

        assert calls[0]["level"] == logging.INFO

    def test_existing_handlers_are_left_alone(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging.getLogger(), "handlers", [logging.NullHandler()])
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        config.configure_logging("DEBUG")

        assert calls == []

    def test_log_level_env_reaches_root_logger_on_app_import(self):
        """Importing the app in a fresh interpreter honours LOG_LEVEL; no module configures logging first."""
        env = dict(os.environ, LOG_LEVEL="DEBUG")
        completed = subprocess.run(
            [sys.executable, "-c", "import logging, api.main; print(logging.getLogger().level)"],
            cwd=PROJECT_ROOT,
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )

        assert completed.returncode == 0, completed.stderr
        assert completed.stdout.strip().splitlines()[-1] == str(logging.DEBUG)
