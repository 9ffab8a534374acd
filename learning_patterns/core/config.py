"""Configuration management for the Learning Pattern Assessment service.

Configuration is loaded from environment variables, one settings group per
env prefix.
"""

from __future__ import annotations

import os
from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


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


class AppConfig(BaseSettings):
    name: str = Field(default="learning-pattern-assessment")
    env: AppEnvironment = Field(default=AppEnvironment.LOCAL)
    version: str = Field(default="2.0.0")
    debug: bool = Field(default=False)
    log_level: LogLevel = Field(default=LogLevel.INFO)
    api_prefix: str = Field(default="/api/v1")

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
        return LogLevel(str(v).upper())


class ServerConfig(BaseSettings):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)
    workers: int = Field(default=2)

    model_config = SettingsConfigDict(env_prefix="SERVER_")


class SecurityConfig(BaseSettings):
    cors_allowed_origins: str = Field(default="http://localhost:3000,http://localhost:3001")
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: list[str] = Field(default=["GET", "POST", "PUT"])
    cors_allow_headers: list[str] = Field(default=["Content-Type", "X-Request-ID"])
    max_request_size_bytes: int = Field(default=1_048_576)

    model_config = SettingsConfigDict(env_prefix="SECURITY_")

    @field_validator("cors_allowed_origins", mode="after")
    @classmethod
    def validate_cors_allowed_origins(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            origins = [origin.strip() for origin in v.split(",") if origin.strip()]
            return origins
        return v


class ObservabilityConfig(BaseSettings):
    service_name: str = Field(default="learning-pattern-assessment")
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
        """Support standard OpenTelemetry env names used in container orchestration."""
        if not self.otlp_endpoint:
            endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT") or os.getenv("OTEL_OTLP_ENDPOINT")
            if endpoint:
                self.otlp_endpoint = endpoint

        insecure = os.getenv("OTEL_EXPORTER_OTLP_INSECURE")
        if insecure is not None:
            self.otlp_insecure = insecure.strip().lower() in {"1", "true", "yes", "on"}

        return self


class StorageConfig(BaseSettings):
    """Flat-file storage layout.

    Learning-pattern assessments and user profiles share one directory, the
    cognitive variant keeps its own.
    """

    data_dir: Path = Field(default=Path("data"))
    profiles_subdir: str = Field(default="user-profiles")
    cognitive_subdir: str = Field(default="cognitive-assessments")
    questions_subdir: str = Field(default="assessment-questions")

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    @property
    def profiles_path(self) -> Path:
        return self.data_dir / self.profiles_subdir

    @property
    def cognitive_path(self) -> Path:
        return self.data_dir / self.cognitive_subdir

    @property
    def questions_path(self) -> Path:
        return self.data_dir / self.questions_subdir


class ScoringConfig(BaseSettings):
    """Tunable thresholds for the scoring engine."""

    default_algorithm: str = Field(default="weighted")
    secondary_threshold: int = Field(default=20, ge=0, le=100)
    recommendation_limit: int = Field(default=5, ge=1)
    cognitive_history_limit: int = Field(default=10, ge=1)

    model_config = SettingsConfigDict(env_prefix="SCORING_")


class Settings(BaseSettings):
    app: AppConfig = Field(default_factory=AppConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    metrics_token: str | None = Field(default=None)

    @model_validator(mode="after")
    def validate_security_settings(self) -> Settings:
        if self.app.env == AppEnvironment.PROD and self.observability.otlp_insecure:
            if self.observability.otlp_endpoint:
                raise ValueError("OTLP insecure mode is not allowed in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()


def reload_settings() -> Settings:
    get_settings.cache_clear()
    return get_settings()
