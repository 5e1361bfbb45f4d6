import logging

import pytest
from rich.logging import RichHandler

from kvopts.logger import logger
from kvopts.option_parser import OptionParser
from kvopts.utils import setup_logging


@pytest.fixture
def restore_kvopts_logger():
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_setup_logging_cli(restore_kvopts_logger):
    handler = setup_logging(mode="cli", level=logging.DEBUG)
    assert isinstance(handler, RichHandler)
    assert restore_kvopts_logger.handlers == [handler]
    assert restore_kvopts_logger.level == logging.DEBUG


def test_setup_logging_json_from_env(restore_kvopts_logger, monkeypatch):
    monkeypatch.setenv("KVOPTS_LOG_MODE", "json")
    handler = setup_logging()
    assert not isinstance(handler, RichHandler)
    assert restore_kvopts_logger.handlers == [handler]


def test_setup_logging_replaces_handler(restore_kvopts_logger):
    setup_logging(mode="cli")
    handler = setup_logging(mode="json")
    assert restore_kvopts_logger.handlers == [handler]


def test_setup_logging_leaves_root_alone(restore_kvopts_logger):
    root_handlers = list(logging.getLogger().handlers)
    setup_logging(mode="cli")
    assert logging.getLogger().handlers == root_handlers


def test_setup_logging_invalid_mode(restore_kvopts_logger):
    handlers = list(restore_kvopts_logger.handlers)
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")
    assert restore_kvopts_logger.handlers == handlers


def test_parser_logs_declarations(caplog):
    caplog.set_level(logging.DEBUG, logger="kvopts")
    parser = OptionParser()
    parser.add_argument("-l", "--logfile", "log file path", "/home/")
    parser.parse("app", [])
    assert "Declared option -l, --logfile" in caplog.text
    assert "Parsed 1 option value(s) for app" in caplog.text
