"""Runtime settings for simplekvstore.

The store itself has nothing to tune. What a host program may want to
control is how chatty the library's loggers are, so that is all that
lives here. Values come from the environment:

    SIMPLEKVSTORE_LOG_LEVEL   logging level name (default WARNING)
    SIMPLEKVSTORE_DEBUG       "true" forces DEBUG

These settings only tune logging verbosity. Nothing here changes how
a Store behaves, and Store never reads the environment. Library
modules never call configure_logging() themselves.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

LOGGER_NAME = "simplekvstore"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env(name: str, default: str) -> str:
    return os.environ.get(name, default)


@dataclass
class Settings:
    """Library settings, read from the environment at construction."""

    LOG_LEVEL: str = field(
        default_factory=lambda: _env("SIMPLEKVSTORE_LOG_LEVEL", "WARNING").upper()
    )
    DEBUG: bool = field(
        default_factory=lambda: _env("SIMPLEKVSTORE_DEBUG", "false").lower() == "true"
    )

    @property
    def effective_level(self) -> int:
        if self.DEBUG:
            return logging.DEBUG
        level = logging.getLevelName(self.LOG_LEVEL)
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {self.LOG_LEVEL!r}")
        return level


# Global settings instance
settings = Settings()


def configure_logging(
    level: int | str | None = None,
    cfg: Settings | None = None,
) -> logging.Logger:
    """Set the package logger's level and give it one stream handler.

    An explicit `level` wins over settings. Calling this twice does not
    add a second handler.
    """
    cfg = cfg or settings
    if level is None:
        level = cfg.effective_level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
