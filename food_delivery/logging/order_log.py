"""Order event logger."""

from __future__ import annotations

import logging


def get_order_logger() -> logging.Logger:
    """Return configured order logger instance."""
    logger = logging.getLogger("order_log")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s | ORDER | %(levelname)s | %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger
