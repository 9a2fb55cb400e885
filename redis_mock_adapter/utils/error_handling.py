"""Error classes for the redis mock adapter.

Errors raised by the underlying transport are passed through untouched; the
classes here cover the adapter's own failure modes.
"""

import redis


class AdapterError(Exception):
    """Base class for all redis mock adapter exceptions."""
    pass


class InvalidArgumentError(AdapterError, ValueError):
    """An adapter function was called with an argument it cannot handle."""
    pass


class ClientClosedError(AdapterError, redis.exceptions.ConnectionError):
    """A command was issued against a client that has already ended."""
    pass
