import logging

import pytest

from tinylisp.observability import HANDLER_NAME, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_adds_stream_handler(root_logger):
    before = len(root_logger.handlers)
    setup_logging("debug")
    assert len(root_logger.handlers) == before + 1
    assert isinstance(root_logger.handlers[-1], logging.StreamHandler)
    assert root_logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_warning(root_logger):
    setup_logging("chatty")
    assert root_logger.level == logging.WARNING


def test_repeated_setup_installs_one_handler(root_logger):
    before = len(root_logger.handlers)
    setup_logging("info")
    setup_logging("debug")
    assert len(root_logger.handlers) == before + 1
    assert root_logger.handlers[-1].get_name() == HANDLER_NAME
    assert root_logger.level == logging.DEBUG
