from __future__ import annotations

"""Logging options and the logger factory for compilesoy.

`--logFormat` / `--logLevel` and their environment overrides are resolved
here and nowhere else; `runtime.config` and the CLI both call into this
module.
"""

import logging
from typing import Mapping, Optional, TextIO

from compilesoy.constants import ENV_JSON_LOGS, ENV_LOG_LEVEL, OPT_LOG_FORMAT, OPT_LOG_LEVEL
from compilesoy.core.errors import ConfigurationError
from compilesoy.core.interfaces.logging import LoggerFactoryProtocol
from compilesoy.logging.helpers import get_logger, resolve_level, setup_base_logger


def resolve_log_format(mapping: Mapping[str, str], env: Mapping[str, str]) -> str:
    """`--logFormat` wins over COMPILESOY_JSON_LOGS; default is text."""
    raw = mapping.get(OPT_LOG_FORMAT)
    if raw is None:
        return 'json' if env.get(ENV_JSON_LOGS) == '1' else 'text'
    fmt = raw.strip().lower()
    if fmt not in ('text', 'json'):
        raise ConfigurationError(f'--{OPT_LOG_FORMAT} must be text or json, got {raw!r}')
    return fmt


def resolve_log_level(mapping: Mapping[str, str], env: Mapping[str, str]) -> str:
    return (mapping.get(OPT_LOG_LEVEL) or env.get(ENV_LOG_LEVEL) or 'INFO').strip().upper()


class DefaultLoggerFactory(LoggerFactoryProtocol):
    """Configure the base logger on first use and return scoped loggers."""

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> 'DefaultLoggerFactory':
        """Factory honoring only the environment, used before argv is parsed."""
        return cls(json_logs=env.get(ENV_JSON_LOGS) == '1', level=resolve_level(env.get(ENV_LOG_LEVEL)))

    @classmethod
    def from_options(cls, mapping: Mapping[str, str], env: Mapping[str, str]) -> 'DefaultLoggerFactory':
        """Factory for the control options of a run.

        Raises:
            ConfigurationError: `--logFormat` is neither text nor json.
        """
        fmt = resolve_log_format(mapping, env)
        level = resolve_level(resolve_log_level(mapping, env))
        return cls(json_logs=fmt == 'json', level=level)

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
