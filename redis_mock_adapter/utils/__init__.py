"""Utility functions for the redis mock adapter.

This package provides the adapter's error classes and logging setup.
"""

from redis_mock_adapter.utils.error_handling import (
    AdapterError,
    ClientClosedError,
    InvalidArgumentError,
)
from redis_mock_adapter.utils.logging import setup_logging

__all__ = [
    # Error handling
    "AdapterError",
    "ClientClosedError",
    "InvalidArgumentError",

    # Logging
    "setup_logging",
]
