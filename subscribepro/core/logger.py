"""
SDK Logger Setup

Attaches a console handler to the SDK's logger hierarchy. Library code only
ever calls logging.getLogger(__name__); applications call setup_sdk_logger()
once if they want SDK output on the console.
"""

import logging
from typing import Optional

from .config import LoggingConfig

SDK_LOGGER_NAME = "subscribepro"


def setup_sdk_logger(
    name: str = SDK_LOGGER_NAME,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Configure and return a logger

    Args:
        name: Logger name (defaults to the SDK root logger)
        config: Logging config, loaded from environment if not provided

    Returns:
        Configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    if config.enable_console and not any(
        getattr(h, "_subscribepro_handler", False) for h in logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.log_format))
        handler._subscribepro_handler = True
        logger.addHandler(handler)

    return logger


# Library default: stay silent unless the application configures logging
logging.getLogger(SDK_LOGGER_NAME).addHandler(logging.NullHandler())


__all__ = ["setup_sdk_logger", "SDK_LOGGER_NAME"]
