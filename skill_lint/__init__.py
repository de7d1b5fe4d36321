from loguru import logger

logger.disable("skill_lint")

__version__ = "0.1.0"
