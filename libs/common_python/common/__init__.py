"""Helpers shared across services and jobs in this repository."""

from .bindings import (
    SERVICE_BINDINGS_ENV,
    ConfigError,
    ConfigErrorKind,
    ServiceBinding,
    redact_uri,
    resolve_endpoint,
)

__all__ = [
    "SERVICE_BINDINGS_ENV",
    "ConfigError",
    "ConfigErrorKind",
    "ServiceBinding",
    "redact_uri",
    "resolve_endpoint",
]
