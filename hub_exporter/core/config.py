"""
Application configuration using pydantic-settings.

Settings are loaded, in priority order, from keyword arguments, environment
variables, a ``.env`` file, ``config/default.yaml`` in the working directory and
finally the ``default.yaml`` shipped inside the package::

    HUB_IP=192.168.100.1
    PORT=9090
    FETCH_TIMEOUT=10

設定錯誤（例如 HUB_IP 不是合法 IP）會在啟動時直接讓程序結束。
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, IPvAnyAddress, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_FILE = Path(__file__).resolve().parent.parent / "config" / "default.yaml"
LOCAL_CONFIG_FILE = Path("config") / "default.yaml"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables or config file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Later files win: a local config/default.yaml overrides the packaged one.
        yaml_file=[DEFAULT_CONFIG_FILE, LOCAL_CONFIG_FILE],
        case_sensitive=False,
        extra="ignore",
    )

    # Hub
    hub_ip: IPvAnyAddress = Field(
        default="192.168.100.1",
        description="Address of the hub serving the router status endpoint",
    )
    status_path: str = Field(
        default="/getRouterStatus",
        description="Path of the JSON router status endpoint on the hub",
    )
    fetch_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for one router status request",
    )

    # Exporter
    listen_host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=9090, ge=1, le=65535, description="Listen port")
    metrics_namespace: str = Field(
        default="virgin_media",
        description="Prefix applied to every exported metric name",
    )
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def hub_base_url(self) -> str:
        """Base URL of the hub; IPv6 literals are bracketed."""
        if self.hub_ip.version == 6:
            return f"http://[{self.hub_ip}]"
        return f"http://{self.hub_ip}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises:
        pydantic.ValidationError: if any configured value is malformed.
    """
    return Settings()
