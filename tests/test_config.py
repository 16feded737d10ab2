#!/usr/bin/env python3
"""Tests for environment settings - demo timing, starting theme, log file.

Run with: pytest tests/test_config.py -v
"""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from cardfolio_tui.cardfolio_tui import _configure_logging
from cardfolio_tui.constants import _get_timing
from cardfolio_tui.theme import CARD_DARK, CARD_LIGHT, initial_theme, other_theme


class TestDemoTiming:

    def test_normal_value_without_demo(self, monkeypatch):
        monkeypatch.delenv("CARDFOLIO_DEMO", raising=False)
        assert _get_timing(3.0, 1.0) == 3.0

    def test_demo_value_with_demo(self, monkeypatch):
        monkeypatch.setenv("CARDFOLIO_DEMO", "1")
        assert _get_timing(3.0, 1.0) == 1.0

    def test_empty_demo_counts_as_unset(self, monkeypatch):
        monkeypatch.setenv("CARDFOLIO_DEMO", "")
        assert _get_timing(3.0, 1.0) == 3.0


class TestInitialTheme:

    @pytest.mark.parametrize("value", ["light", " Light ", "LIGHT"])
    def test_light(self, monkeypatch, value):
        monkeypatch.setenv("CARDFOLIO_THEME", value)
        assert initial_theme() is CARD_LIGHT

    def test_dark(self, monkeypatch):
        monkeypatch.setenv("CARDFOLIO_THEME", "dark")
        assert initial_theme() is CARD_DARK

    def test_missing_falls_back_to_dark(self, monkeypatch):
        monkeypatch.delenv("CARDFOLIO_THEME", raising=False)
        assert initial_theme() is CARD_DARK

    def test_unknown_falls_back_to_dark(self, monkeypatch):
        monkeypatch.setenv("CARDFOLIO_THEME", "sepia")
        assert initial_theme() is CARD_DARK


class TestOtherTheme:

    def test_dark_to_light(self):
        assert other_theme(CARD_DARK) is CARD_LIGHT

    def test_light_to_dark(self):
        assert other_theme(CARD_LIGHT) is CARD_DARK


@pytest.fixture
def root_logger():
    """Root logger, with handlers and level restored afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestConfigureLogging:

    def test_unset_does_nothing(self, monkeypatch, root_logger):
        monkeypatch.delenv("CARDFOLIO_LOG_FILE", raising=False)
        before = list(root_logger.handlers)

        assert _configure_logging() is None
        assert root_logger.handlers == before

    def test_set_writes_to_file(self, monkeypatch, root_logger, tmp_path):
        log_file = tmp_path / "cardfolio.log"
        monkeypatch.setenv("CARDFOLIO_LOG_FILE", str(log_file))

        handler = _configure_logging()
        assert handler in root_logger.handlers

        logging.getLogger("cardfolio_tui.card_form").debug("mode changed")
        handler.flush()

        contents = log_file.read_text()
        assert "DEBUG cardfolio_tui.card_form: mode changed" in contents
