"""Integration tests for creating adapted clients on top of MockRedis.

These tests go through create_client, so the adapter drives a real MockRedis
instead of a recording stand-in.
"""

import logging
from types import SimpleNamespace

import pytest
import redis

import redis_mock_adapter
from redis_mock_adapter import (
    AdapterConfig,
    InvalidArgumentError,
    create_client,
    get_default_host,
    get_default_port,
)
from redis_mock_adapter.mockredis import MockRedis

HOST_1 = "127.0.0.1"
PORT_1 = 6379


def add_event_listeners(client, events):
    """Record every lifecycle event of a client into ``events``."""
    client.add_event_listeners(
        lambda: events.append("connect"),
        lambda: events.append("ready"),
        lambda: events.append("reconnecting"),
        lambda err: events.append(("error", err)),
        lambda err: events.append(("client_error", err)),
        lambda: events.append("end"),
        lambda: events.append("close"),
    )


class TestCreateClient:
    """Test cases for create_client."""

    def test_default_client(self):
        client = create_client()

        assert isinstance(client.client, MockRedis)
        assert not client.is_closing()
        assert client.resolve_host_and_port() == (get_default_host(), get_default_port())
        assert client.get_options() is None

    def test_client_with_default_options(self):
        client = create_client({"port": get_default_port(), "host": get_default_host()})
        assert client.resolve_host_and_port() == (get_default_host(), get_default_port())

    def test_client_with_options(self):
        options = {"host": HOST_1, "port": PORT_1, "string_number": True}
        client = create_client(options)

        assert client.get_options() is options
        assert client.resolve_host_and_port() == (HOST_1, PORT_1)
        assert client.client.connection_kwargs == {"string_number": True}

    def test_client_with_attribute_options(self):
        options = SimpleNamespace(host="10.0.0.1", port=6380)
        client = create_client(options)

        assert client.get_options() is options
        assert client.resolve_host_and_port() == ("10.0.0.1", 6380)
        assert (client.client.host, client.client.port) == ("10.0.0.1", 6380)

    def test_set_get_through_adapter(self):
        client = create_client({"host": HOST_1, "port": PORT_1})
        events = []
        add_event_listeners(client, events)
        results = []

        client.set("TEST_KEY", "TEST_VALUE", lambda err, res: results.append((err, res)))
        client.get("TEST_KEY", lambda err, value: results.append((err, value)))
        client.end(True)

        assert results == [(None, "OK"), (None, "TEST_VALUE")]
        assert events == ["connect", "ready", "end", "close"]
        assert client.is_closing()

    def test_ping_and_stand_in_commands(self):
        client = create_client()
        results = []

        assert client.ping(lambda err, res: results.append(res)) == "PONG"
        client.info(lambda err, res: results.append(("info", err, res)))
        client.exec(lambda err, res: results.append(("exec", err, res)))

        assert results == ["PONG", ("info", None, None), ("exec", None, None)]

    def test_commands_after_end_report_errors(self):
        client = create_client()
        events = []
        add_event_listeners(client, events)
        client.end()

        client.get("TEST_KEY")

        kind, err = events[-1]
        assert kind == "error"
        assert isinstance(err, redis.exceptions.ConnectionError)
        assert not client.get_adapter().is_redirect_error(err)

    def test_moved_error_round_trip(self):
        client = create_client()
        client.client.simulate_moved("10.0.0.7", 7005)
        errors = []

        client.set("TEST_KEY", "TEST_VALUE", lambda err, res: errors.append(err))

        adapter = client.get_adapter()
        assert adapter.is_redirect_error(errors[0])
        assert adapter.resolve_relocation_target(errors[0]) == ("10.0.0.7", "7005")

    def test_package_exports(self):
        assert redis_mock_adapter.DEFAULT_HOST == "127.0.0.1"
        assert redis_mock_adapter.DEFAULT_PORT == 6379


@pytest.mark.usefixtures("package_logger")
class TestCreateClientValidation:
    """Test cases for option validation during create_client."""

    def test_validation_disabled_by_default(self):
        client = create_client({"port": 0})
        assert client.get_options() == {"port": 0}

    def test_valid_options(self):
        config = AdapterConfig(validate_options=True)
        client = create_client({"host": "10.0.0.1", "port": 6380, "db": 2}, config)
        assert client.resolve_host_and_port() == ("10.0.0.1", 6380)

    @pytest.mark.parametrize(
        "options", [{"port": 0}, {"port": 70000}, {"port": "abc"}, {"host": ""}]
    )
    def test_invalid_options(self, options):
        config = AdapterConfig(validate_options=True)
        with pytest.raises(InvalidArgumentError):
            create_client(options, config)

    def test_attribute_options_are_validated(self):
        config = AdapterConfig(validate_options=True)
        with pytest.raises(InvalidArgumentError):
            create_client(SimpleNamespace(port=0), config)


class TestCreateClientLogging:
    """Test cases for the logging level applied by create_client."""

    def test_config_sets_package_logging_level(self, package_logger):
        create_client(config=AdapterConfig(logging_level="DEBUG"))
        assert package_logger.level == logging.DEBUG

    def test_lowercase_level(self, package_logger):
        create_client(config=AdapterConfig(logging_level="warning"))
        assert package_logger.level == logging.WARNING

    def test_without_config_level_untouched(self, package_logger):
        package_logger.setLevel(logging.ERROR)
        create_client()
        assert package_logger.level == logging.ERROR

    def test_creation_logged_with_lazy_arguments(self, package_logger, caplog):
        logging.disable(logging.NOTSET)
        with caplog.at_level(logging.INFO, logger="redis_mock_adapter.adapter"):
            create_client({"host": "10.0.0.1", "port": 6380})

        record = next(r for r in caplog.records if r.name == "redis_mock_adapter.adapter")
        assert record.args == ("10.0.0.1", 6380)
        assert record.getMessage() == "Created redis mock client (host=10.0.0.1, port=6380)"
