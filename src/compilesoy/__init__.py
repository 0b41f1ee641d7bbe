from __future__ import annotations

from compilesoy.cli import CompileSoy, main
from compilesoy.core.errors import (
    ArgumentError,
    ConfigurationError,
    InvalidArgument,
    MissingValue,
    TemplateNotFoundError,
)
from compilesoy.core.models import CompilerConfig, JsSrcOptions, ParsedArgs
from compilesoy.discovery.file_discovery import TemplateFileFinder
from compilesoy.parsing.arguments import parse_args
from compilesoy.rendering.template_engine import JinjaTemplateCompiler
from compilesoy.runtime.runner import SoyCompilerRunner

__version__ = '1.0.0'

__all__ = [
    'CompileSoy',
    'main',
    'parse_args',
    'ArgumentError',
    'ConfigurationError',
    'InvalidArgument',
    'MissingValue',
    'TemplateNotFoundError',
    'CompilerConfig',
    'JsSrcOptions',
    'ParsedArgs',
    'TemplateFileFinder',
    'JinjaTemplateCompiler',
    'SoyCompilerRunner',
]
