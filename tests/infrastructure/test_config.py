"""Tests for settings and logging setup."""

import logging
from pathlib import Path

import pytest

from catalog.infrastructure.config import Settings
from catalog.infrastructure.logging_setup import setup_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CATALOG_DATA_DIR", raising=False)
        monkeypatch.delenv("CATALOG_LOG_LEVEL", raising=False)
        monkeypatch.delenv("CATALOG_FILE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.catalog_file == "products.json"
        assert settings.log_level == "WARNING"
        assert settings.catalog_path == settings.data_dir / "products.json"

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.data_dir == Path(tmp_path)
        assert settings.log_level == "DEBUG"
        assert settings.catalog_path == Path(tmp_path) / "products.json"


class TestSetupLogging:

    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_sets_level_and_single_handler(self):
        root = setup_logging("info")
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging("chatty")
