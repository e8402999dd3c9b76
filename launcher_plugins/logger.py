import os
import sys

from loguru import logger

from launcher_plugins.config.data import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{extra[plugin]} | {name}:{function}:{line} - {message}"
)


def setup_logging(plugin_name: str) -> None:
    """
    Send log output to stderr.

    Stdout carries the launcher protocol, so the default loguru sink is replaced.
    """
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()

    logger.remove()
    logger.configure(extra={"plugin": plugin_name})

    try:
        logger.add(sys.stderr, level=level, format=LOG_FORMAT, backtrace=False)
    except ValueError:
        logger.add(
            sys.stderr, level=DEFAULT_LOG_LEVEL, format=LOG_FORMAT, backtrace=False
        )
        logger.warning(f"Unknown log level {level}, using {DEFAULT_LOG_LEVEL}")
