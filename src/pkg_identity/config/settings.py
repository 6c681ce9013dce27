from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the PKG_IDENTITY_ prefix.
    For example:
        - PKG_IDENTITY_INVENTORY_PATH=/path/to/inventory.json
        - PKG_IDENTITY_LOG_LEVEL=DEBUG

    Alternatively, settings can be provided programmatically when creating the Container:
        container = Container()
        container.config.from_pydantic(AppConfig(inventory_path="inventory.json"))
    """

    model_config = SettingsConfigDict(
        env_prefix="PKG_IDENTITY_",
        case_sensitive=False,
        extra="forbid",
    )

    inventory_path: Optional[Path] = Field(
        default=None,
        description="JSON inventory produced by the extractors. Required unless given on the command line.",
    )

    log_level: Optional[str] = Field(
        default=None,
        description="Log level for the pkg_identity logger (DEBUG, INFO, WARNING, ERROR). None leaves logging unconfigured.",
    )
