"""Process-wide default connection settings shared by the adapter and the mock client."""

DEFAULT_HOST = "127.0.0.1"
DEFAULT_REDIS_PORT = 6379
