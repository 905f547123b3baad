import logging

import pytest

from gmtfigures.utils import log_utils

# ========================================= <logging> =====================================


@pytest.mark.parametrize(
    "value, level", [("true", 1), ("TRUE", 1), ("2", 2), ("0", 0), ("yes", 0)]
)
def test_get_debug_level(monkeypatch, value, level):
    monkeypatch.setenv("GMTFIGURES_DEBUG", value)
    assert log_utils.get_debug_level() == level


def test_debug_level_unset(monkeypatch):
    monkeypatch.delenv("GMTFIGURES_DEBUG", raising=False)
    assert log_utils.get_debug_level() == 0


def test_packaged_config_is_loaded(monkeypatch):
    monkeypatch.delenv("GMTFIGURES_DEBUG", raising=False)
    log_utils.setup_logging()

    logger = logging.getLogger("gmtfigures")
    assert logger.level == logging.INFO
    assert not logger.propagate
    assert len(logger.handlers) == 1


def test_turn_on_debug_logging(monkeypatch):
    monkeypatch.setenv("GMTFIGURES_DEBUG", "true")
    log_utils.setup_logging()
    try:
        assert logging.getLogger("gmtfigures").level == logging.DEBUG
    finally:
        monkeypatch.delenv("GMTFIGURES_DEBUG")
        log_utils.setup_logging()
