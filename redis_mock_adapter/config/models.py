"""Pydantic models for configuration validation in the redis mock adapter."""

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from redis_mock_adapter.config.defaults import DEFAULT_HOST, DEFAULT_REDIS_PORT


class ClientOptionsModel(BaseModel):
    """Validation model for the options a client is created with.

    Only ``host`` and ``port`` are checked; any other option is kept as-is
    so that options meant for the underlying client pass through.
    """

    model_config = ConfigDict(extra="allow")

    host: str = Field(default=DEFAULT_HOST, description="Redis server hostname")
    port: int = Field(
        default=DEFAULT_REDIS_PORT, description="Redis server port", ge=1, le=65535
    )

    @field_validator("host")
    @classmethod
    def validate_host(cls, v):
        if not v:
            raise ValueError("Host cannot be empty")
        return v


class AdapterConfigModel(BaseModel):
    """Validation model for AdapterConfig."""

    validate_options: bool = Field(
        default=False, description="Validate client options before creating a client"
    )
    logging_level: str = Field(default="INFO", description="Package logging level")

    @field_validator("logging_level")
    @classmethod
    def validate_logging_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {v}")
        return level

    def to_config_object(self, config):
        """Apply validated model values to a config object.

        Args:
            config: The config object to update

        Returns:
            The updated config object
        """
        for key, value in self.model_dump().items():
            if hasattr(config, key):
                setattr(config, key, value)
        return config
