"""Issuer settings loaded from environment variables."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_KEY_RESOURCE = "/privateKey.pem"

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class IssuerSettings(BaseSettings):
    """Resource location and logging settings for the token issuer."""

    model_config = SettingsConfigDict(env_prefix="DEVJWT_")

    resource_root: Path = Path(".")
    default_key_resource: str = DEFAULT_KEY_RESOURCE
    log_level: LogLevel = "info"
    log_json: bool = False
