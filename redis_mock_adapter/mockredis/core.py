import logging
import threading
import time

import redis
from redis.crc import key_slot

from redis_mock_adapter.config.defaults import DEFAULT_HOST, DEFAULT_REDIS_PORT
from redis_mock_adapter.config.options import options_to_dict
from redis_mock_adapter.utils.error_handling import ClientClosedError

# Create logger
logger = logging.getLogger(__name__)

WRONGTYPE_MESSAGE = "WRONGTYPE Operation against a key holding the wrong kind of value"


class MockRedis:
    """In-memory Redis client with a callback and event driven interface.

    Every command takes an optional trailing ``callback(err, result)``. The
    result is also returned. A failed command is reported to the callback,
    otherwise emitted as an ``error`` event, otherwise raised.
    """

    def __init__(self, host=DEFAULT_HOST, port=DEFAULT_REDIS_PORT, **kwargs):
        """Initialize MockRedis.

        Args:
            host: Host this client pretends to be connected to
            port: Port this client pretends to be connected to
            **kwargs: Additional connection options (kept, otherwise ignored)
        """
        self.host = host or DEFAULT_HOST
        self.port = port or DEFAULT_REDIS_PORT
        self.connection_kwargs = kwargs
        self.store = {}
        self.expirations = {}
        self.lock = threading.Lock()

        self.connected = False
        self.closed = False
        self._listeners = {}

        # "host:port" that key commands get redirected to, if any
        self._moved_to = None

    # Events
    def on(self, event, listener):
        """Register a listener for an event."""
        self._listeners.setdefault(event, []).append(listener)
        return self

    def listeners(self, event):
        return list(self._listeners.get(event, ()))

    def emit(self, event, *args):
        """Call every listener of an event.

        Returns:
            True if the event had listeners, False otherwise
        """
        listeners = self.listeners(event)
        for listener in listeners:
            listener(*args)
        return bool(listeners)

    # Connection lifecycle
    def connect(self):
        """Mark the client as connected, emitting ``connect`` and ``ready``."""
        if self.connected or self.closed:
            return
        self.connected = True
        logger.debug("Mock client connected to %s:%s", self.host, self.port)
        self.emit("connect")
        self.emit("ready")

    def end(self, flush=False):
        """Close the client, emitting ``end`` and ``close``.

        Args:
            flush: Accepted for compatibility, nothing is ever queued
        """
        if self.closed:
            return
        self.closed = True
        self.connected = False
        logger.debug(
            "Mock client for %s:%s ended (flush=%s)", self.host, self.port, flush
        )
        self.emit("end")
        self.emit("close")

    def simulate_moved(self, host, port):
        """Make every key command fail with a MOVED redirect to host:port.

        Pass ``host=None`` to stop redirecting.
        """
        self._moved_to = None if host is None else f"{host}:{port}"

    def _slot(self, key):
        if isinstance(key, str):
            key = key.encode()
        return key_slot(key)

    def _expire_keys(self):
        now = time.time()
        for key in [k for k, exp in self.expirations.items() if exp <= now]:
            self.store.pop(key, None)
            self.expirations.pop(key, None)

    def _typed(self, name, kind):
        value = self.store.get(name)
        if value is not None and not isinstance(value, kind):
            raise redis.exceptions.ResponseError(WRONGTYPE_MESSAGE)
        return value

    def _string(self, name):
        value = self.store.get(name)
        if isinstance(value, (dict, list)):
            raise redis.exceptions.ResponseError(WRONGTYPE_MESSAGE)
        return value

    def _run(self, command, operation, callback=None, key=None):
        try:
            if self.closed:
                raise ClientClosedError(
                    f"{command.upper()} can't be processed. The connection is already closed."
                )
            self.connect()
            if key is not None and self._moved_to is not None:
                raise redis.exceptions.MovedError(f"{self._slot(key)} {self._moved_to}")
            with self.lock:
                self._expire_keys()
                result = operation()
        except redis.exceptions.RedisError as e:
            logger.debug("Mock %s command failed: %s", command, e)
            if callback is not None:
                callback(e, None)
                return None
            if self.emit("error", e):
                return None
            raise
        if callback is not None:
            callback(None, result)
        return result

    # String operations
    def get(self, key, callback=None):
        return self._run("get", lambda: self._string(key), callback, key)

    def set(self, key, value, callback=None, *, ex=None):
        def operation():
            self.store[key] = value
            if ex:
                self.expirations[key] = time.time() + ex
            else:
                self.expirations.pop(key, None)
            return "OK"

        return self._run("set", operation, callback, key)

    def delete(self, *keys, callback=None):
        def operation():
            deleted = 0
            for key in keys:
                if self.store.pop(key, None) is not None:
                    deleted += 1
                self.expirations.pop(key, None)
            return deleted

        return self._run("del", operation, callback, keys[0] if keys else None)

    def exists(self, *keys, callback=None):
        return self._run(
            "exists",
            lambda: sum(1 for key in keys if key in self.store),
            callback,
            keys[0] if keys else None,
        )

    def expire(self, key, seconds, callback=None):
        def operation():
            if key not in self.store:
                return 0
            self.expirations[key] = time.time() + seconds
            return 1

        return self._run("expire", operation, callback, key)

    # Hash operations
    def hset(self, name, field, value, callback=None):
        def operation():
            mapping = self._typed(name, dict)
            if mapping is None:
                mapping = self.store[name] = {}
            added = 0 if field in mapping else 1
            mapping[field] = value
            return added

        return self._run("hset", operation, callback, name)

    def hget(self, name, field, callback=None):
        def operation():
            return (self._typed(name, dict) or {}).get(field)

        return self._run("hget", operation, callback, name)

    def hgetall(self, name, callback=None):
        def operation():
            return dict(self._typed(name, dict) or {})

        return self._run("hgetall", operation, callback, name)

    def hdel(self, name, *fields, callback=None):
        def operation():
            mapping = self._typed(name, dict)
            if not mapping:
                return 0
            deleted = 0
            for field in fields:
                if mapping.pop(field, None) is not None:
                    deleted += 1
            if not mapping:
                del self.store[name]
            return deleted

        return self._run("hdel", operation, callback, name)

    # List operations
    def lpush(self, name, *values, callback=None):
        def operation():
            items = self._typed(name, list) or []
            self.store[name] = list(reversed(values)) + items
            return len(self.store[name])

        return self._run("lpush", operation, callback, name)

    def rpush(self, name, *values, callback=None):
        def operation():
            items = self.store[name] = self._typed(name, list) or []
            items.extend(values)
            return len(items)

        return self._run("rpush", operation, callback, name)

    def lpop(self, name, callback=None):
        return self._run("lpop", lambda: self._pop(name, 0), callback, name)

    def rpop(self, name, callback=None):
        return self._run("rpop", lambda: self._pop(name, -1), callback, name)

    def _pop(self, name, index):
        items = self._typed(name, list)
        if not items:
            return None
        value = items.pop(index)
        if not items:
            del self.store[name]
        return value

    # Server operations
    def flushall(self, callback=None):
        def operation():
            self.store.clear()
            self.expirations.clear()
            return "OK"

        return self._run("flushall", operation, callback)

    def ping(self, callback=None):
        return self._run("ping", lambda: "PONG", callback)


def create_client(options=None):
    """Create a MockRedis client from client options.

    Args:
        options: Connection options as a mapping or an attribute object,
            e.g. ``{"host": ..., "port": ...}``

    Returns:
        A new MockRedis instance
    """
    return MockRedis(**options_to_dict(options))
