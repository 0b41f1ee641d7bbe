from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, NoReturn, Optional, Sequence

from compilesoy.core.errors import ArgumentError, ConfigurationError
from compilesoy.core.interfaces.logging import LoggerFactoryProtocol
from compilesoy.core.models import CompilerConfig
from compilesoy.logging.factory import DefaultLoggerFactory
from compilesoy.logging.helpers import get_logger
from compilesoy.parsing.arguments import parse_args
from compilesoy.runtime.runner import SoyCompilerRunner

logger = get_logger('compilesoy')

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

USAGE = """\
usage: compilesoy --soyFiles DIR --outputType js|html
                  [--template NAME] [--soyJsOutputPath DIR]
                  [--shouldGenerateJsdoc true|false]
                  [--shouldProvideRequireJsFunctions true|false]
                  [--logFormat text|json] [--logLevel LEVEL]
                  [-- --name=value --name value --list[]=value ...]"""


def _configure_logging(factory: LoggerFactoryProtocol) -> logging.Logger:
    """Configure process-wide logging through *factory*."""
    global logger
    logger = factory.get_logger('compilesoy')
    return logger


def _configure_from_options(config: Mapping[str, str]) -> None:
    try:
        factory = DefaultLoggerFactory.from_options(config, os.environ)
    except ConfigurationError:
        _configure_logging(DefaultLoggerFactory())
        raise
    _configure_logging(factory)


class CompileSoy:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, runner: Optional[SoyCompilerRunner] = None) -> CompilerConfig:
        """Parse *argv* and render or compile accordingly.

        Raises:
            ArgumentError: malformed tokens; nothing has been done yet.
            ConfigurationError: unusable control options.
        """
        parsed = parse_args(argv)
        _configure_from_options(parsed.config)
        return (runner or SoyCompilerRunner()).run(parsed)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `compilesoy` console script and `python -m compilesoy`."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in ('-h', '--help'):
        print(USAGE, file=sys.stderr)
        raise SystemExit(EXIT_OK if args else EXIT_USAGE)
    _configure_logging(DefaultLoggerFactory.from_env(os.environ))
    try:
        CompileSoy.run(args)
        raise SystemExit(EXIT_OK)
    except ArgumentError as exc:
        logger.error('%s', exc)
        raise SystemExit(EXIT_USAGE)
    except ConfigurationError as exc:
        logger.error('%s', exc)
        raise SystemExit(EXIT_FAILURE)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(EXIT_INTERRUPTED)
    except BrokenPipeError:
        raise SystemExit(EXIT_OK)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('%s: %s', type(exc).__name__, exc)
        raise SystemExit(EXIT_FAILURE)


if __name__ == '__main__':
    main()
