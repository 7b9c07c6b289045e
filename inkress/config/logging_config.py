#!/usr/bin/env python3
"""Logging configuration"""
import logging
import os
from dataclasses import dataclass

# Handlers attached by the last setup_logging call
_installed_handlers = []


@dataclass
class LoggingConfig:
    """Logging configuration"""
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: str = ""

    @classmethod
    def from_env(cls) -> 'LoggingConfig':
        """Load logging config from environment variables"""
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=os.getenv("LOG_FILE", ""),
        )


def setup_logging(config: 'LoggingConfig' = None) -> logging.Logger:
    """
    Attach handlers to the SDK logger.

    The SDK never configures logging on import; applications call this
    explicitly when they want SDK log output. Calling it again replaces the
    handlers from the previous call instead of stacking new ones.

    Args:
        config: Logging configuration (loaded from env if not provided)

    Returns:
        The configured "inkress" logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger("inkress")
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    formatter = logging.Formatter(config.log_format)
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _installed_handlers.append(handler)

    return logger
