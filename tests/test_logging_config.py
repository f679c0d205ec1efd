import logging

import pytest

from app.logging_config import ensure_logging

_HOST_FORMAT = "[%(levelname)s] %(aws_request_id)s %(message)s"


@pytest.fixture
def root_handler():
    root = logging.getLogger()
    saved_level = root.level
    saved_formatters = [(h, h.formatter) for h in root.handlers]

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_HOST_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    yield handler

    root.removeHandler(handler)
    for h, formatter in saved_formatters:
        h.setFormatter(formatter)
    root.setLevel(saved_level)


def test_reformats_existing_handlers(root_handler):
    ensure_logging()

    assert root_handler.formatter._fmt == "%(levelname)s: %(message)s"
    assert logging.getLogger().level == logging.INFO


def test_keeps_host_formatter_when_asked(root_handler):
    ensure_logging(reformat_handlers=False)

    assert root_handler.formatter._fmt == _HOST_FORMAT
    assert logging.getLogger().level == logging.INFO
