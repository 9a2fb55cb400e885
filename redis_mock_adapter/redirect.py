"""Cluster redirect detection for the redis mock adapter.

A cluster node answers a request for a key it no longer owns with an error
of the form ``MOVED <slot> <host>:<port>``. The functions here recognise such
an error and pull the new host and port out of it, so that the caller can
decide whether to reconnect elsewhere.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Tuple

import redis

from redis_mock_adapter.utils.error_handling import InvalidArgumentError

logger = logging.getLogger(__name__)

MOVED = "MOVED"


def _get(error: Any, name: str) -> Any:
    if isinstance(error, Mapping):
        return error.get(name)
    return getattr(error, name, None)


def _error_message(error: Any) -> Optional[str]:
    message = _get(error, "message")
    if message is None and isinstance(error, BaseException):
        message = str(error)
    return message


def is_redirect_error(error: Any) -> bool:
    """Return True if the error says the key was moved to another host and port.

    The error's ``code`` is checked first, then whether its message starts
    with ``"MOVED "``, e.g. ``"MOVED 14190 127.0.0.1:6379"``. A
    ``redis.exceptions.MovedError`` raised by the production client counts too.

    Args:
        error: An exception or error-shaped object from a failed command

    Returns:
        True if moved; False otherwise
    """
    if isinstance(error, redis.exceptions.MovedError):
        return True
    if _get(error, "code") == MOVED:
        return True
    message = _error_message(error)
    return isinstance(message, str) and message.startswith(MOVED + " ")


def resolve_relocation_target(error: Any) -> Tuple[str, str]:
    """Extract the new host and port from a "moved" error.

    Args:
        error: An error for which ``is_redirect_error`` is True

    Returns:
        The new host and port, both as strings

    Raises:
        InvalidArgumentError: If the error is not a "moved" error
    """
    if not is_redirect_error(error):
        raise InvalidArgumentError(
            f'Unexpected redis mock client "moved" error - {error!r}'
        )
    message = _error_message(error)
    if isinstance(message, bytes):
        message = message.decode(errors="replace")
    elif not isinstance(message, str):
        message = ""
    host, _, port = message[message.rfind(" ") + 1:].partition(":")
    logger.debug("Resolved moved error to host (%s) & port (%s)", host, port)
    return host, port


# Names used by the production client adapters
is_moved_error = is_redirect_error
resolve_host_and_port_from_moved_error = resolve_relocation_target
