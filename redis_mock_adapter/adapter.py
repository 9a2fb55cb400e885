"""Adapter that gives mock Redis clients the method surface of a production client.

This module wraps a MockRedis client in an AdaptedClient, which adds the
methods code written against a production client expects to find (``info``,
``exec``, ``is_closing``, ``resolve_host_and_port`` and friends), adjusts
``ping`` and ``end`` to behave the same way, and exposes the "moved" error
helpers through ``get_adapter()``.
"""

import logging
import sys
from collections.abc import Mapping
from typing import Any, Callable, Optional, Tuple

from pydantic import ValidationError

from redis_mock_adapter import mockredis
from redis_mock_adapter.config import (
    DEFAULT_HOST,
    DEFAULT_REDIS_PORT,
    AdapterConfig,
    ClientOptionsModel,
    get_option,
    options_to_dict,
)
from redis_mock_adapter.redirect import (
    is_moved_error,
    is_redirect_error,
    resolve_host_and_port_from_moved_error,
    resolve_relocation_target,
)
from redis_mock_adapter.utils.error_handling import InvalidArgumentError
from redis_mock_adapter.utils.logging import PACKAGE_LOGGER_NAME

logger = logging.getLogger(__name__)

DEFAULT_PORT = DEFAULT_REDIS_PORT

# Event names registered by add_event_listeners, in argument order
CLIENT_EVENTS = (
    "connect",
    "ready",
    "reconnecting",
    "error",
    "client_error",
    "end",
    "close",
)


def get_default_host() -> str:
    return DEFAULT_HOST


def get_default_port() -> int:
    return DEFAULT_PORT


def _report_success(*args):
    # Stand-in for commands the mock lacks: succeed with no data
    if args and callable(args[-1]):
        args[-1](None, None)


class AdaptedClient:
    """A mock Redis client normalized to the production client's interface.

    Attributes that AdaptedClient does not define itself are looked up on the
    wrapped client, so every command of the mock remains available.

    Attributes:
        client: The wrapped mock client
        manually_closing: True once ``end`` has been called; never reset
    """

    def __init__(self, client: Any, options: Optional[Mapping] = None):
        self.client = client
        self._options = options
        self.manually_closing = False

    def __getattr__(self, name):
        # Only reached for names not found on the instance or class
        if name == "client":
            raise AttributeError(name)
        return getattr(self.client, name)

    def __repr__(self):
        host, port = self.resolve_host_and_port()
        return f"<{type(self).__name__} {host}:{port} closing={self.manually_closing}>"

    def ping(self, *args):
        """Ping the server.

        Accepts either ``ping(callback)`` or ``ping(message, ..., callback)``.
        The mock cannot echo a message back, so when the first argument is
        not a callback the message and the final argument are dropped and
        only the arguments in between are passed on.
        """
        if args and callable(args[0]):
            return self.client.ping(*args)
        return self.client.ping(*args[1:-1])

    def info(self, *args, **kwargs):
        native = getattr(self.client, "info", None)
        if callable(native):
            return native(*args, **kwargs)
        return _report_success(*args)

    def exec(self, *args, **kwargs):
        native = getattr(self.client, "exec", None)
        if callable(native):
            return native(*args, **kwargs)
        return _report_success(*args)

    def end(self, *args, **kwargs):
        """End the wrapped client and mark this client as closing."""
        result = self.client.end(*args, **kwargs)
        self.manually_closing = True
        logger.debug("Redis mock client %r is closing", self)
        return result

    def get_adapter(self):
        """Return this adapter module, e.g. to reach ``is_redirect_error``."""
        return sys.modules[__name__]

    def is_closing(self) -> bool:
        """Returns True if this client's connection is closing or has closed."""
        return self.manually_closing

    def resolve_host_and_port(self) -> Tuple[str, Any]:
        """Resolve the host and port of this client.

        Returns:
            The host and port from the client's options, with the defaults
            filling in whatever the options leave out
        """
        options = self._options
        if not options:
            return DEFAULT_HOST, DEFAULT_PORT
        return (
            get_option(options, "host") or DEFAULT_HOST,
            get_option(options, "port") or DEFAULT_PORT,
        )

    def get_options(self) -> Optional[Mapping]:
        return self._options

    def add_event_listeners(
        self,
        on_connect: Optional[Callable] = None,
        on_ready: Optional[Callable] = None,
        on_reconnecting: Optional[Callable] = None,
        on_error: Optional[Callable] = None,
        on_client_error: Optional[Callable] = None,
        on_end: Optional[Callable] = None,
        on_close: Optional[Callable] = None,
    ) -> None:
        """Register the given callbacks on the wrapped client's events.

        Arguments that are not callable are skipped.
        """
        listeners = (
            on_connect,
            on_ready,
            on_reconnecting,
            on_error,
            on_client_error,
            on_end,
            on_close,
        )
        for event, listener in zip(CLIENT_EVENTS, listeners):
            if callable(listener):
                self.client.on(event, listener)

    def get_function(self, name: str) -> Optional[Callable]:
        return get_capability(name)

    def set_function(self, name: str, fn: Callable) -> None:
        set_capability(name, fn)

    def delete_function(self, name: str) -> None:
        delete_capability(name)


def get_capability(name: str) -> Optional[Callable]:
    """Return the method named ``name`` shared by all adapted clients."""
    return getattr(AdaptedClient, name, None)


def set_capability(name: str, fn: Callable) -> None:
    """Install ``fn`` as the method ``name`` on all adapted clients."""
    logger.debug("Setting adapted client function %s", name)
    setattr(AdaptedClient, name, fn)


def delete_capability(name: str) -> None:
    """Remove the method ``name`` from all adapted clients.

    Afterwards the name resolves to the wrapped client's attribute, if any.
    """
    if name in vars(AdaptedClient):
        logger.debug("Deleting adapted client function %s", name)
        delattr(AdaptedClient, name)


def adapt_client(client: Any, options: Optional[Mapping] = None) -> AdaptedClient:
    """Normalize a mock client to the production client's interface.

    Adapting a client that is already adapted returns it unchanged.

    Args:
        client: The mock client to adapt
        options: The options the client was created with; defaults to the
            options already attached to the client, if any

    Returns:
        The adapted client
    """
    if isinstance(client, AdaptedClient):
        return client
    if options is None:
        options = getattr(client, "_options", None)
    return AdaptedClient(client, options)


def _validate_options(options: Optional[Mapping]) -> None:
    try:
        ClientOptionsModel(**options_to_dict(options))
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid redis client options {options!r}: {e}") from e


def create_client(
    options: Optional[Mapping] = None, config: Optional[AdapterConfig] = None
) -> AdaptedClient:
    """Create a new adapted mock Redis client.

    Args:
        options: The options to construct the client with, as a mapping or
            an attribute object
        config: Adapter configuration; when given, its logging level is
            applied to the package logger

    Returns:
        The new client

    Raises:
        InvalidArgumentError: If option validation is enabled and fails
    """
    if config is None:
        config = AdapterConfig()
    else:
        logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(config.logging_level.upper())
    if config.validate_options:
        _validate_options(options)

    client = adapt_client(mockredis.create_client(options), options)
    host, port = client.resolve_host_and_port()
    logger.info("Created redis mock client (host=%s, port=%s)", host, port)
    return client


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "CLIENT_EVENTS",
    "AdaptedClient",
    "adapt_client",
    "create_client",
    "delete_capability",
    "get_capability",
    "get_default_host",
    "get_default_port",
    "is_moved_error",
    "is_redirect_error",
    "resolve_host_and_port_from_moved_error",
    "resolve_relocation_target",
    "set_capability",
]
