"""Logging for impcurve.

Every module logs through the package ``logger`` defined here. Records go to
stdout through one handler owned by the package; they also propagate to the
root logger, so applications and pytest's ``caplog`` see them. At DEBUG level
each microbasis step and each determinant column is reported.
"""

import logging
import sys

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger("impcurve")

_handler = None


def setup_logging(level=logging.INFO, format_string=_FORMAT, stream=None):
    """Configure the impcurve logger; calling it again only updates the level,
    format and stream of the existing handler."""
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout if stream is None else stream)
        logger.addHandler(_handler)
    elif stream is not None:
        _handler.setStream(stream)
    _handler.setFormatter(logging.Formatter(format_string))
    logger.setLevel(level)
    return _handler


setup_logging()
