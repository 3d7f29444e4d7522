"""Notification event logger."""

from __future__ import annotations

import logging


def get_notification_logger() -> logging.Logger:
    """Return configured notification logger instance."""
    logger = logging.getLogger("notification_log")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s | NOTIFY | %(levelname)s | %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger
