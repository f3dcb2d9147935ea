"""
Global configuration for the Merkle funnel.

This module contains environment-specific settings read once at import.
"""

import os

_SUPPORTED_LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

FUNNEL_LOG_LEVEL = os.environ.get("FUNNEL_LOG_LEVEL", "WARNING").upper()
"""The logging level used by the command line entry point. Defaults to 'WARNING'."""

if FUNNEL_LOG_LEVEL not in _SUPPORTED_LOG_LEVELS:
    raise ValueError(
        f"Invalid FUNNEL_LOG_LEVEL environment variable: '{FUNNEL_LOG_LEVEL}'. "
        f"Supported values: {_SUPPORTED_LOG_LEVELS}"
    )
