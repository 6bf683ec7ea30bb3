import logging

import pytest

from filfox_ledger_export.logging_setup import setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    httpx_logger = logging.getLogger("httpx")
    saved = (root.level, list(root.handlers), httpx_logger.level)
    yield root
    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    httpx_logger.setLevel(saved[2])


def test_quiets_httpx_when_root_already_configured(restore_logging):
    root = restore_logging
    root.addHandler(logging.NullHandler())
    logging.getLogger("httpx").setLevel(logging.NOTSET)

    setup_logging("DEBUG")

    assert root.level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


def test_configures_root_when_unconfigured(restore_logging):
    root = restore_logging
    root.handlers[:] = []
    logging.getLogger("httpx").setLevel(logging.NOTSET)

    setup_logging("warning")

    assert root.level == logging.WARNING
    assert root.handlers
    assert logging.getLogger("httpx").level == logging.WARNING
