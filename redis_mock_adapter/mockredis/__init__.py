"""Redis Mock Adapter MockRedis Module

This module provides the in-memory Redis client the adapter normalizes. It
simulates a callback and event driven Redis client without a Redis server.

Key components:

1. MockRedis: Stores strings, hashes and lists in memory. Every command takes
   an optional trailing ``callback(err, result)``, and lifecycle changes are
   announced through ``on(event, listener)`` events (connect, ready, error,
   end, close).

2. create_client: Builds a MockRedis from an options mapping.

Errors use the production client's exception types from ``redis.exceptions``,
so code written against a real client can handle them the same way.

Usage example:
```python
from redis_mock_adapter.mockredis import create_client

client = create_client({"host": "127.0.0.1", "port": 6379})
client.on("ready", lambda: print("ready"))

client.set("key", "value", lambda err, res: print(err, res))
client.get("key", lambda err, value: print(value))
client.end()
```
"""

from .core import MockRedis, create_client

__all__ = [
    "MockRedis",
    "create_client",
]
