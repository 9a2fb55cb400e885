"""Redis mock adapter package.

This package normalizes an in-memory mock Redis client so that it exposes the
same methods and error handling conventions as a production Redis client, and
provides helpers to recognise and parse cluster "MOVED" redirect errors.
"""

from redis_mock_adapter.adapter import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    AdaptedClient,
    adapt_client,
    create_client,
    delete_capability,
    get_capability,
    get_default_host,
    get_default_port,
    set_capability,
)
from redis_mock_adapter.config import AdapterConfig
from redis_mock_adapter.redirect import (
    is_moved_error,
    is_redirect_error,
    resolve_host_and_port_from_moved_error,
    resolve_relocation_target,
)
from redis_mock_adapter.utils.error_handling import (
    AdapterError,
    ClientClosedError,
    InvalidArgumentError,
)

__all__ = [
    # Client creation
    "AdaptedClient",
    "AdapterConfig",
    "adapt_client",
    "create_client",
    # Capability escape hatch
    "get_capability",
    "set_capability",
    "delete_capability",
    # Defaults
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "get_default_host",
    "get_default_port",
    # Redirects
    "is_redirect_error",
    "resolve_relocation_target",
    "is_moved_error",
    "resolve_host_and_port_from_moved_error",
    # Errors
    "AdapterError",
    "ClientClosedError",
    "InvalidArgumentError",
]
