from __future__ import annotations

"""Logging helpers that keep compilesoy logger names and output consistent.

This module provides:
    - JsonLogFormatter: one JSON object per record with a stable schema.
    - setup_base_logger: configures the 'compilesoy' logger once.
    - get_logger: namespaced logger factory ('compilesoy.*').
    - resolve_level: maps a level name or number to a logging level.

Logs always go to stderr so that rendered HTML on stdout stays clean.
"""

import logging
import os
from typing import Optional, TextIO, Union

BASE_LOGGER = "compilesoy"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'compilesoy.discovery').
        - msg: Formatted message string.
        - version: compilesoy.__version__.
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Imported lazily, the package imports this module at load time.
            from compilesoy import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv("COMPILESOY_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def resolve_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    """Translate 'debug', 'INFO', '10' or 10 into a logging level."""
    if level is None or level == "":
        return default
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    value = logging.getLevelName(text.upper())
    return value if isinstance(value, int) else default


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'compilesoy' logger and return it.

    Calling it again swaps the handler, so a run can switch between plain
    text and JSON output.
    """
    import sys as _sys

    base = logging.getLogger(BASE_LOGGER)
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'compilesoy'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")
