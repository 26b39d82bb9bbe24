"""
Utility modules for the creational pattern demos.
"""
from .logging_config import get_logger, LoggerFactory, LogContext
from .exceptions import *
from .error_handlers import handle_errors, ErrorContext

__all__ = [
    'get_logger',
    'LoggerFactory',
    'LogContext',
    'handle_errors',
    'ErrorContext',
    'CreationalPatternsError',
    'ConstructionError',
    'BuildError',
    'CapacityExceededError',
    'ConfigurationError',
]
