"""Unit tests for config module."""

import pytest
from pydantic import ValidationError

from stellar_explain.core.config import (
    AppConfig,
    AppEnvironment,
    CacheConfig,
    HorizonConfig,
    ObservabilityConfig,
    SecurityConfig,
    ServerConfig,
    Settings,
    StellarNetwork,
    reload_settings,
)


@pytest.fixture
def clean_network_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("HORIZON_NETWORK", "STELLAR_NETWORK", "HORIZON_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


def test_app_config_defaults():
    config = AppConfig()
    assert config.name == "stellar-explain"
    assert config.version == "0.1.0"


def test_app_config_env_parsing():
    config = AppConfig(env="prod")
    assert config.env == AppEnvironment.PROD


def test_app_config_log_level_case_insensitive():
    assert AppConfig(log_level="debug").log_level.value == "DEBUG"


def test_server_config_defaults():
    config = ServerConfig()
    assert config.host == "0.0.0.0"
    assert config.port == 4000


def test_security_config_parses_origins():
    config = SecurityConfig(cors_allowed_origins="http://a.test, http://b.test,")
    assert config.cors_allowed_origins == ["http://a.test", "http://b.test"]
    assert config.cors_allow_methods == ["GET", "OPTIONS"]


def test_horizon_config_defaults(clean_network_env):
    config = HorizonConfig()
    assert config.network is StellarNetwork.PUBLIC
    assert config.url == "https://horizon.stellar.org"
    assert config.retry_count == 3
    assert config.operations_limit == 200


def test_horizon_network_from_stellar_network_env(clean_network_env, monkeypatch):
    monkeypatch.setenv("STELLAR_NETWORK", "testnet")
    assert HorizonConfig().url == "https://horizon-testnet.stellar.org"


def test_horizon_network_from_horizon_network_env(clean_network_env, monkeypatch):
    monkeypatch.setenv("HORIZON_NETWORK", " TESTNET ")
    assert HorizonConfig().network is StellarNetwork.TESTNET


def test_horizon_base_url_override(clean_network_env):
    config = HorizonConfig(base_url="http://localhost:8000/")
    assert config.url == "http://localhost:8000"


def test_horizon_config_rejects_unknown_network(clean_network_env):
    with pytest.raises(ValidationError):
        HorizonConfig(network="mainnet-ish")


def test_horizon_operations_limit_bounded(clean_network_env):
    with pytest.raises(ValidationError):
        HorizonConfig(operations_limit=500)


def test_cache_config_defaults():
    config = CacheConfig()
    assert config.enabled is True
    assert config.ttl_seconds == 300.0


def test_observability_exporter_env_fallback(monkeypatch):
    monkeypatch.delenv("OTEL_OTLP_ENDPOINT", raising=False)
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://collector:4317")
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_INSECURE", "false")
    config = ObservabilityConfig()
    assert config.otlp_endpoint == "http://collector:4317"
    assert config.otlp_insecure is False


def test_prod_rejects_insecure_otlp():
    with pytest.raises(ValidationError):
        Settings(
            app=AppConfig(env="prod"),
            observability=ObservabilityConfig(otlp_insecure=True),
        )


def test_reload_settings_picks_up_env(monkeypatch):
    monkeypatch.setenv("METRICS_TOKEN", "rotated")
    try:
        assert reload_settings().metrics_token == "rotated"
    finally:
        monkeypatch.undo()
        reload_settings()
