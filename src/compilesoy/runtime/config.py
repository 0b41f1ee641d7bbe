from __future__ import annotations

"""Validation of control options into a CompilerConfig.

The control mapping is whatever appeared before the `--` separator. Only
the options listed in `compilesoy.constants.KNOWN_OPTIONS` are read; the
rest are logged at debug level and otherwise ignored.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from compilesoy.constants import (
    KNOWN_OPTIONS,
    OPT_GENERATE_JSDOC,
    OPT_JS_OUTPUT_PATH,
    OPT_OUTPUT_TYPE,
    OPT_PROVIDE_REQUIRE,
    OPT_SOY_FILES,
    OPT_TEMPLATE,
)
from compilesoy.core.errors import ConfigurationError
from compilesoy.core.models import CompilerConfig, JsSrcOptions
from compilesoy.logging.factory import resolve_log_format, resolve_log_level
from compilesoy.logging.helpers import get_logger

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}

logger = get_logger('config')


def parse_bool(option: str, raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f'--{option} expects true or false, got {raw!r}')


def _required(mapping: Mapping[str, str], option: str, context: str = '') -> str:
    value = mapping.get(option)
    if value is None or not value.strip():
        suffix = f' {context}' if context else ''
        raise ConfigurationError(f'--{option} is required{suffix}')
    return value


def load_config(
    mapping: Mapping[str, str], *, env: Optional[Mapping[str, str]] = None
) -> CompilerConfig:
    """Validate *mapping* and return an immutable CompilerConfig.

    Raises:
        ConfigurationError: a required option is missing, `outputType` is
            neither 'js' nor 'html', or a switch has a non-boolean value.
    """
    env = os.environ if env is None else env
    for name in mapping:
        if name not in KNOWN_OPTIONS:
            logger.debug('ignoring unknown option --%s', name)

    soy_files = Path(_required(mapping, OPT_SOY_FILES))

    output_type = mapping.get(OPT_OUTPUT_TYPE)
    if output_type not in ('js', 'html'):
        raise ConfigurationError(
            f'Invalid outputType specified: {output_type!r} (expected js or html)'
        )

    template: Optional[str] = None
    js_output_path: Optional[Path] = None
    if output_type == 'html':
        template = _required(mapping, OPT_TEMPLATE, 'for html output')
    else:
        js_output_path = Path(_required(mapping, OPT_JS_OUTPUT_PATH, 'for js output'))

    js_options = JsSrcOptions(
        generate_jsdoc=parse_bool(OPT_GENERATE_JSDOC, mapping.get(OPT_GENERATE_JSDOC), True),
        provide_require=parse_bool(OPT_PROVIDE_REQUIRE, mapping.get(OPT_PROVIDE_REQUIRE), True),
    )

    return CompilerConfig(
        soy_files=soy_files,
        output_type=output_type,
        template=template,
        js_output_path=js_output_path,
        js_options=js_options,
        log_format=resolve_log_format(mapping, env),
        log_level=resolve_log_level(mapping, env),
    )
