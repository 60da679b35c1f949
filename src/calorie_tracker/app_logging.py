"""Logging setup for the calorie tracker.

Everything under the ``calorie_tracker`` logger goes to one stream handler.
Estimate retries and failures log as warnings, committed entries as info.
"""

import logging


def configure_logging(level: str = "INFO") -> None:
    """Attach the stream handler once and apply the configured level."""
    logger = logging.getLogger("calorie_tracker")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
