"""Shared models, errors and protocol types for compilesoy."""

from compilesoy.core.errors import (
    ArgumentError,
    ConfigurationError,
    InvalidArgument,
    MissingValue,
    TemplateNotFoundError,
)
from compilesoy.core.models import (
    Argument,
    CompilerConfig,
    JsSrcOptions,
    ParsedArgs,
)

__all__ = [
    'ArgumentError',
    'ConfigurationError',
    'InvalidArgument',
    'MissingValue',
    'TemplateNotFoundError',
    'Argument',
    'CompilerConfig',
    'JsSrcOptions',
    'ParsedArgs',
]
