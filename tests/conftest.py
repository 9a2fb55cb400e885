"""Pytest configuration for redis mock adapter tests.

This module contains shared fixtures for all tests of the redis mock adapter.
"""

import logging
from unittest.mock import MagicMock

import pytest

from redis_mock_adapter.adapter import AdaptedClient
from redis_mock_adapter.utils.logging import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def disable_logging():
    """Disable logging during tests to keep the test output clean."""
    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def restore_capabilities():
    """Restore the methods shared by all adapted clients after a test.

    Tests that call set_capability or delete_capability change the
    AdaptedClient class itself, so they must use this fixture.
    """
    original = dict(vars(AdaptedClient))
    yield
    for name in list(vars(AdaptedClient)):
        if name not in original:
            delattr(AdaptedClient, name)
    for name, value in original.items():
        if name not in ("__dict__", "__weakref__") and vars(AdaptedClient).get(name) is not value:
            setattr(AdaptedClient, name, value)


@pytest.fixture
def base_client():
    """A stand-in for a mock client that records how it is called.

    It has ``ping``, ``end`` and ``on`` but no ``info`` or ``exec``.
    """
    client = MagicMock(spec=["ping", "end", "on", "get", "set"])
    client.ping.return_value = "PONG"
    return client


@pytest.fixture
def package_logger():
    """The package logger, with its level restored after the test."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    level = logger.level
    yield logger
    logger.setLevel(level)
