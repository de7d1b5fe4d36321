import sys

from loguru import logger

PACKAGE = "skill_lint"
LOG_FORMAT = "<dim>{time:HH:mm:ss}</dim> <level>{level: <7}</level> {message}"


def configure_logging(verbose: bool) -> None:
    """Route package logs to stderr when verbose, keep them silent otherwise."""
    if not verbose:
        logger.disable(PACKAGE)
        return
    logger.remove()
    logger.add(sys.stderr, level="DEBUG", format=LOG_FORMAT)
    logger.enable(PACKAGE)
