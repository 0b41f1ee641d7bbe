from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Command-line token conventions.
ARG_PREFIX: str = '--'
SEPARATOR: str = '--'
LIST_MARKER: str = '[]'

# Template discovery.
TEMPLATE_SUFFIX: str = '.soy'
MAX_DIR_TRAVERSAL_DEPTH: int = 6

# Generated script files are named '<template file name><JS_SUFFIX>'.
JS_SUFFIX: str = '.js'

# Control option names recognised before the separator.
OPT_SOY_FILES: str = 'soyFiles'
OPT_OUTPUT_TYPE: str = 'outputType'
OPT_TEMPLATE: str = 'template'
OPT_JS_OUTPUT_PATH: str = 'soyJsOutputPath'
OPT_GENERATE_JSDOC: str = 'shouldGenerateJsdoc'
OPT_PROVIDE_REQUIRE: str = 'shouldProvideRequireJsFunctions'
OPT_LOG_FORMAT: str = 'logFormat'
OPT_LOG_LEVEL: str = 'logLevel'

KNOWN_OPTIONS = frozenset({
    OPT_SOY_FILES,
    OPT_OUTPUT_TYPE,
    OPT_TEMPLATE,
    OPT_JS_OUTPUT_PATH,
    OPT_GENERATE_JSDOC,
    OPT_PROVIDE_REQUIRE,
    OPT_LOG_FORMAT,
    OPT_LOG_LEVEL,
})

# Environment overrides for logging.
ENV_JSON_LOGS: str = 'COMPILESOY_JSON_LOGS'
ENV_LOG_LEVEL: str = 'COMPILESOY_LOG_LEVEL'
