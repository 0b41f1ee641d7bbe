from __future__ import annotations

"""Exception taxonomy for compilesoy.

Argument errors and configuration errors are user-input problems and are
reported without a traceback. Template engine and filesystem failures are
not wrapped; they propagate unchanged to the CLI entry point.
"""


class ArgumentError(ValueError):
    """Base class for command-line token errors."""

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token


class InvalidArgument(ArgumentError):
    """Raised for a malformed token (missing '--' prefix or empty name)."""

    def __init__(self, token: str) -> None:
        super().__init__(token, f'{token} is not a valid argument.')


class MissingValue(ArgumentError):
    """Raised when a name-only token has no value token after it."""

    def __init__(self, token: str) -> None:
        super().__init__(token, f'You must provide a value for argument {token}')


class ConfigurationError(ValueError):
    """Raised when the control options cannot drive a run."""


class TemplateNotFoundError(LookupError):
    """Raised when a fully-qualified template name matches nothing."""

    def __init__(self, name: str) -> None:
        super().__init__(f'no template named {name!r}')
        self.name = name
