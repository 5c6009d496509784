"""Server Lifecycle — CalculatorServer wiring without binding a socket."""

from calculator_api.config import Settings
from calculator_api.server import CalculatorServer


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_server_uses_configured_host_and_port():
    server = CalculatorServer(_settings(host="127.0.0.1", port=4321))
    assert server.config.host == "127.0.0.1"
    assert server.config.port == 4321
    assert server.app.state.settings.port == 4321


def test_request_shutdown_sets_should_exit():
    server = CalculatorServer(_settings())
    assert server.should_exit is False
    server.request_shutdown()
    assert server.should_exit is True


def test_app_built_per_server():
    first = CalculatorServer(_settings())
    second = CalculatorServer(_settings())
    assert first.app is not second.app
