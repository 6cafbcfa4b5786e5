import logging

import pytest

from gim_config.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Puts the root logger back the way conftest left it."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    # pytest's own capture handlers are managed per test phase
    for handler in handlers:
        if handler not in root.handlers and not type(handler).__module__.startswith("_pytest"):
            root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("gim_config.config.store").setLevel(logging.NOTSET)


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv("GIM_LOG_LEVEL", raising=False)
        monkeypatch.delenv("GIM_DEBUG_MODULES", raising=False)
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("GIM_LOG_LEVEL", "warning")
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_argument_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv("GIM_LOG_LEVEL", "ERROR")
        setup_logging(logging.DEBUG)
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_debug_overrides(self, monkeypatch):
        monkeypatch.setenv("GIM_DEBUG_MODULES", "gim_config.config.store, ")
        setup_logging("WARNING")
        assert logging.getLogger("gim_config.config.store").level == logging.DEBUG

    def test_store_messages_reach_handler(self, store, caplog):
        with caplog.at_level(logging.INFO, logger="gim_config"):
            store.load()
        assert any("Created default config" in r.getMessage() for r in caplog.records)
