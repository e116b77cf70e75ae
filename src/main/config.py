"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.env import load_secret_file_variables  # noqa: F401


class ServerSettings(BaseSettings):
    """HTTP server and gateway metadata settings."""

    title: str = Field(default="ioBroker MCP Gateway", description="Gateway title")
    description: str = Field(
        default="Device-oriented query and control gateway for an ioBroker "
        "object store",
        description="Gateway description",
    )
    version: str = Field(default="1.0.0", description="Gateway version")
    bind_host: str = Field(default="0.0.0.0", description="Address to bind")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVER_", case_sensitive=False, extra="ignore"
    )


class IoBrokerSettings(BaseSettings):
    """Object store (ioBroker rest-api adapter) settings."""

    rest_url: str = Field(
        default="http://localhost:8093", description="Base URL of the rest-api adapter"
    )
    host: str = Field(
        default="iobroker",
        description="Controller host name, used for system.host.<host> and logs",
    )
    username: Optional[str] = Field(default=None, description="Basic-auth user")
    password: Optional[str] = Field(default=None, description="Basic-auth password")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout (s)")
    language: str = Field(default="en", description="Preferred name language")
    fallback_language: str = Field(
        default="de", description="Second fallback language for names"
    )

    model_config = SettingsConfigDict(
        env_prefix="IOBROKER_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    server: ServerSettings = Field(default_factory=ServerSettings)
    iobroker: IoBrokerSettings = Field(default_factory=IoBrokerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()


settings = get_settings()
