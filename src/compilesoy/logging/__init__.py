from compilesoy.logging.factory import DefaultLoggerFactory, resolve_log_format, resolve_log_level
from compilesoy.logging.helpers import JsonLogFormatter, get_logger, resolve_level, setup_base_logger

__all__ = [
    'DefaultLoggerFactory',
    'JsonLogFormatter',
    'get_logger',
    'resolve_level',
    'resolve_log_format',
    'resolve_log_level',
    'setup_base_logger',
]
