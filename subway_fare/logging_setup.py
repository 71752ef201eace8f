"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

logger = logging.getLogger("subway_fare")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again replaces the handler instead of stacking a new one.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level)
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level {config.level!r}",
            setting_name="level",
        )

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
