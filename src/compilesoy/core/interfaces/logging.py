from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface the runner and collaborators rely on."""

    def isEnabledFor(self, level: int) -> bool: ...

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Configure logging once and hand out `compilesoy.*` loggers."""

    def get_logger(self, name: str) -> logging.Logger:
        ...
