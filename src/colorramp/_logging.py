"""Package logger. Handlers are left to the application."""

import logging
import os

logger = logging.getLogger("colorramp")


def _set_log_level():
    logger.setLevel(logging.WARNING)
    level = os.getenv("COLORRAMP_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except ValueError:
            logger.warning(f"Invalid colorramp log level: {level}")


_set_log_level()
