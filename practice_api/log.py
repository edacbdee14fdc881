"""Logging helpers shared by the server modules."""

import logging

LOGGER_NAME = "practice_api"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str = LOGGER_NAME, log_level: str = "INFO") -> logging.Logger:
    """Create or retrieve a stdlib logger configured with a stream handler.

    Unknown level names fall back to INFO. Repeated calls reuse the existing
    handler instead of stacking new ones.
    """
    lvl = getattr(logging, log_level.upper(), logging.INFO)
    if not isinstance(lvl, int):
        lvl = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(lvl)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
