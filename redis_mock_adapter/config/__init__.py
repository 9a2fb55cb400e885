"""Redis Mock Adapter Configuration Module

This module holds the default connection settings shared by the adapter and
the mock client, plus the adapter's own configuration.

Key components:

1. DEFAULT_HOST / DEFAULT_REDIS_PORT: The host and port a client falls back to
   when its options leave them out.

2. AdapterConfig: Settings for client creation, such as whether client options
   are validated before use.

3. ClientOptionsModel / AdapterConfigModel: Pydantic models used to validate
   client options and adapter settings.

Usage example:
```python
from redis_mock_adapter.config import AdapterConfig, AdapterConfigModel

config = AdapterConfigModel(validate_options=True).to_config_object(AdapterConfig())
```
"""

from redis_mock_adapter.config.adapter_config import AdapterConfig
from redis_mock_adapter.config.defaults import DEFAULT_HOST, DEFAULT_REDIS_PORT
from redis_mock_adapter.config.models import AdapterConfigModel, ClientOptionsModel
from redis_mock_adapter.config.options import get_option, options_to_dict

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_REDIS_PORT",
    "AdapterConfig",
    "AdapterConfigModel",
    "ClientOptionsModel",
    "get_option",
    "options_to_dict",
]
