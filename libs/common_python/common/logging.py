"""Shared logging setup.

Every service and job calls `configure_logging` once from its entrypoint so
log lines carry the same format and the service name:

    2026-01-01 12:00:00,000 INFO [items] app.main: connected to mongodb://...

Modules just use `logging.getLogger(__name__)`.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [{service}] %(name)s: %(message)s"

_HANDLER_NAME = "common-stream"


def configure_logging(level: str = "INFO", service: str = "app") -> None:
    """Install the shared stream handler on the root logger.

    Safe to call more than once (e.g. app factory + tests): the handler is
    replaced, not duplicated.

    Args:
        level: Log level name, e.g. "INFO" or "debug".
        service: Service name embedded in every line.

    Raises:
        ValueError: If `level` is not a known level name.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT.format(service=service)))
    root.addHandler(handler)
    root.setLevel(numeric)
