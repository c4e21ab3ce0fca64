"""Shared logging utilities for the analysis use cases.

Usage example:
    from pay_equity_engine.observability.logging import get_logger

    logger = get_logger("pay_equity_engine.predicted_pay")
    logger.info("Fitted regression over %s eligible jobs", eligible_count)
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a logger with a single UTC-stamped stream handler.

    The handler is attached once per name; later calls return the same logger
    without touching its level.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
    return logger
