#!/usr/bin/env python3
"""Configuration for the SubscribePro SDK

Configuration hierarchy:
- client_config: API base URL, credentials, timeout, entity classes
- logging_config: Logging configuration
"""
import os
from dotenv import load_dotenv
from .client_config import ClientConfig
from .logging_config import LoggingConfig

# Environment file is optional; real environment variables always win
load_dotenv(os.getenv("SUBSCRIBEPRO_ENV_FILE", ".env"), override=False)


def get_client_config() -> ClientConfig:
    """Build client configuration from the current environment"""
    return ClientConfig.from_env()


def get_logging_config() -> LoggingConfig:
    """Build logging configuration from the current environment"""
    return LoggingConfig.from_env()


__all__ = [
    'ClientConfig',
    'LoggingConfig',
    'get_client_config',
    'get_logging_config',
]
