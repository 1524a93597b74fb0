from __future__ import annotations

import logging

LOGGER_NAME = "knight_tour"


def get_logger() -> logging.Logger:
    """
    Return the package logger.

    A stream handler at INFO is attached the first time, unless the
    application already configured one.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
