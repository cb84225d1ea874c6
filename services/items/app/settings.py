"""Items service configuration.

All knobs live on one pydantic-settings `Settings` object, read from
environment variables prefixed with `ITEMS_` (or a local `.env` file):

    ITEMS_SERVICE_TYPE=mongodb
    ITEMS_DEFAULT_URI=mongodb://localhost:27017/items
    ITEMS_LOG_LEVEL=DEBUG

The platform's service binding descriptor (`SERVICE_BINDINGS`) is *not* a
setting: it is read at startup and handed to `common.bindings.resolve_endpoint`
as an explicit environment mapping. `bindings_env` only names the variable.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.bindings import SERVICE_BINDINGS_ENV


class Settings(BaseSettings):
    """Settings for the items service."""

    model_config = SettingsConfigDict(
        env_prefix="ITEMS_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # Service discovery
    service_type: str = Field(default="mongodb", description="Descriptor key of the bound document store")
    binding_name: Optional[str] = Field(default=None, description="Pick a binding by name when several are bound")
    bindings_env: str = Field(default=SERVICE_BINDINGS_ENV, description="Variable holding the binding descriptor")
    default_uri: str = Field(
        default="mongodb://localhost:27017/items",
        description="Used only when no binding descriptor is present (local dev)",
    )

    # Database
    database_name: str = Field(default="items", description="Database used when the URI names none")
    collection_name: str = Field(default="items")
    server_selection_timeout_ms: int = Field(default=5000, ge=1)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, validation_alias=AliasChoices("ITEMS_PORT", "PORT"))
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(default_factory=list)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings."""
    return Settings()
