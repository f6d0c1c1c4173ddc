"""Logging setup for the slicekit logger tree."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "slicekit"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the 'slicekit' logger; repeated calls only change the level."""
    logger = logging.getLogger("slicekit")
    logger.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
