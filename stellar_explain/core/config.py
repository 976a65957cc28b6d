"""Configuration management for the Stellar Explain service.

Configuration is loaded from environment variables, one settings class
per concern, aggregated into ``Settings``.
"""

from __future__ import annotations

import os
from enum import StrEnum
from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PUBLIC_HORIZON_URL = "https://horizon.stellar.org"
TESTNET_HORIZON_URL = "https://horizon-testnet.stellar.org"


class AppEnvironment(StrEnum):
    LOCAL = "local"
    TEST = "test"
    PROD = "prod"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class StellarNetwork(StrEnum):
    PUBLIC = "public"
    TESTNET = "testnet"

    @property
    def horizon_url(self) -> str:
        if self is StellarNetwork.TESTNET:
            return TESTNET_HORIZON_URL
        return PUBLIC_HORIZON_URL


class AppConfig(BaseSettings):
    name: str = Field(default="stellar-explain")
    env: AppEnvironment = Field(default=AppEnvironment.LOCAL)
    version: str = Field(default="0.1.0")
    debug: bool = Field(default=False)
    log_level: LogLevel = Field(default=LogLevel.INFO)

    model_config = SettingsConfigDict(env_prefix="APP_")

    @field_validator("env", mode="before")
    @classmethod
    def validate_env(cls, v: str | AppEnvironment) -> AppEnvironment:
        if isinstance(v, AppEnvironment):
            return v
        return AppEnvironment(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        if isinstance(v, LogLevel):
            return v
        return LogLevel(v.upper())


class ServerConfig(BaseSettings):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000)
    workers: int = Field(default=1)

    model_config = SettingsConfigDict(env_prefix="SERVER_")


class SecurityConfig(BaseSettings):
    cors_allowed_origins: str = Field(default="http://localhost:3000")
    cors_allow_methods: list[str] = Field(default=["GET", "OPTIONS"])
    cors_allow_headers: list[str] = Field(default=["Content-Type", "X-Request-ID"])
    sanitize_errors: bool = Field(default=False)

    model_config = SettingsConfigDict(env_prefix="SECURITY_")

    @field_validator("cors_allowed_origins", mode="after")
    @classmethod
    def validate_cors_allowed_origins(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class ObservabilityConfig(BaseSettings):
    service_name: str = Field(default="stellar-explain")
    otlp_endpoint: str | None = Field(
        default=None,
        validation_alias=AliasChoices("exporter_otlp_endpoint", "otlp_endpoint"),
    )
    otlp_insecure: bool = Field(
        default=True,
        validation_alias=AliasChoices("exporter_otlp_insecure", "otlp_insecure"),
    )
    log_record_format: str = Field(default="json")

    model_config = SettingsConfigDict(env_prefix="OTEL_")

    @model_validator(mode="after")
    def apply_exporter_env_fallbacks(self) -> ObservabilityConfig:
        """Support the standard OpenTelemetry exporter env names."""
        if not self.otlp_endpoint:
            endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
            if endpoint:
                self.otlp_endpoint = endpoint

        insecure = os.getenv("OTEL_EXPORTER_OTLP_INSECURE")
        if insecure is not None:
            self.otlp_insecure = insecure.strip().lower() in {"1", "true", "yes", "on"}

        return self


class HorizonConfig(BaseSettings):
    network: StellarNetwork = Field(
        default=StellarNetwork.PUBLIC,
        validation_alias=AliasChoices("horizon_network", "stellar_network"),
    )
    base_url: str | None = Field(default=None)
    timeout_seconds: float = Field(default=10.0)
    retry_count: int = Field(default=3)
    circuit_breaker_threshold: int = Field(default=5)
    circuit_breaker_timeout: float = Field(default=30.0)
    fee_stats_timeout_seconds: float = Field(default=3.0)
    operations_limit: int = Field(default=200, ge=1, le=200)

    model_config = SettingsConfigDict(env_prefix="HORIZON_", populate_by_name=True)

    @field_validator("network", mode="before")
    @classmethod
    def validate_network(cls, v: str | StellarNetwork) -> StellarNetwork:
        if isinstance(v, StellarNetwork):
            return v
        return StellarNetwork(v.strip().lower())

    @property
    def url(self) -> str:
        if self.base_url:
            return self.base_url.rstrip("/")
        return self.network.horizon_url


class CacheConfig(BaseSettings):
    enabled: bool = Field(default=True)
    ttl_seconds: float = Field(default=300.0)
    max_entries: int = Field(default=1024, ge=1)

    model_config = SettingsConfigDict(env_prefix="CACHE_")


class Settings(BaseSettings):
    app: AppConfig = Field(default_factory=AppConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    horizon: HorizonConfig = Field(default_factory=HorizonConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    metrics_token: str | None = Field(default=None)

    @model_validator(mode="after")
    def validate_security_settings(self) -> Settings:
        if self.app.env == AppEnvironment.PROD and self.observability.otlp_insecure:
            raise ValueError("OTLP insecure mode is not allowed in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()


def reload_settings() -> Settings:
    get_settings.cache_clear()
    return get_settings()
