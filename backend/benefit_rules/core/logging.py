"""Logging setup for the benefit_rules package."""

import logging
from typing import Optional, Union

from benefit_rules.config import Settings

PACKAGE_LOGGER = "benefit_rules"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Calling it again only updates the level; handlers are not duplicated.

    Args:
        level: Level name or number (defaults to BENEFIT_RULES_LOG_LEVEL, else INFO)

    Returns:
        The configured package logger
    """
    if level is None:
        level = Settings().LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger
