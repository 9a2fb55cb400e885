"""Configuration classes for the redis mock adapter."""


class AdapterConfig:
    """Configuration for client creation through the adapter."""

    def __init__(self, **kwargs):
        # Default configuration values
        self.validate_options = False
        self.logging_level = "INFO"

        # Update with any provided values
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
