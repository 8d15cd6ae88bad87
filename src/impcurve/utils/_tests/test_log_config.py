import io
import logging
import sys

from impcurve.utils.log_config import logger, setup_logging


def test_setup_logging_is_idempotent():
    before = list(logger.handlers)
    stream = io.StringIO()
    try:
        handler = setup_logging(logging.DEBUG, "%(levelname)s:%(message)s", stream=stream)
        assert setup_logging(logging.DEBUG, "%(levelname)s:%(message)s") is handler
        assert logger.handlers == before
        logger.debug("microbasis iteration %d", 3)
        assert stream.getvalue() == "DEBUG:microbasis iteration 3\n"
    finally:
        setup_logging(stream=sys.stdout)
    assert logger.level == logging.INFO
