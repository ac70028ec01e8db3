"""Project-wide logger."""
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("console_arithmetic")


def configure_logging(level: str = "WARNING") -> None:
    """
    Attach a single stderr handler to the project logger.

    Calling it again only changes the level, so handlers are never duplicated.

    :param str level: Standard logging level name, e.g. "INFO"
    """
    logger.setLevel(getattr(logging, level.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    # The interactive transcript should not be duplicated by the root logger
    logger.propagate = False
