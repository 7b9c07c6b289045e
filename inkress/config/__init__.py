#!/usr/bin/env python3
"""Configuration for the Inkress SDK

- sdk_config: API credentials, environment mode and webhook settings
- logging_config: Logging configuration
"""
from dotenv import load_dotenv
from .logging_config import LoggingConfig, setup_logging
from .sdk_config import InkressConfig, BASE_URLS, LIVE_BASE_URL, TEST_BASE_URL, parse_mode

_settings = None


def get_settings() -> InkressConfig:
    """Get global settings instance, loading .env on first use"""
    global _settings
    if _settings is None:
        load_dotenv(override=False)
        _settings = InkressConfig.from_env()
    return _settings


def reload_settings() -> InkressConfig:
    """Reload settings from environment"""
    global _settings
    load_dotenv(override=False)
    _settings = InkressConfig.from_env()
    return _settings


__all__ = [
    'InkressConfig',
    'LoggingConfig',
    'BASE_URLS',
    'LIVE_BASE_URL',
    'TEST_BASE_URL',
    'get_settings',
    'parse_mode',
    'reload_settings',
    'setup_logging',
]
