"""Structured logger setup shared across the FAQ Lambda modules."""

import logging
import os

from pythonjsonlogger import jsonlogger


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    The level comes from LOG_LEVEL so warm containers can be made chattier
    without a code change; context travels in ``extra={...}``.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    logger.propagate = False
    return logger
