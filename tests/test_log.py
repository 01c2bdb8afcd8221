import logging

import pytest

from httpsql.log import HANDLER_NAME, configure_logging


@pytest.mark.parametrize(
    "verbosity, level",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_configure_logging_levels(verbosity, level):
    logger = configure_logging(verbosity)

    assert logger.name == "httpsql"
    assert logger.level == level


def test_configure_logging_keeps_single_handler():
    configure_logging(1)
    logger = configure_logging(2)

    handlers = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(handlers) == 1
