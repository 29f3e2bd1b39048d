"""Console logging for command line runs of the 'rody' package."""
import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Attach a single stderr handler to the 'rody' logger.

    stdout is left to the formatted block states. Calling this again replaces the
    handler instead of adding a second one.
    """
    logger = logging.getLogger("rody")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)
