from .logger_interface import LoggerInterface, LogLevel
from .log_formatter import LogFormatter
from .structured_logger import StructuredLogger, configure_logging

__all__ = [
    'LoggerInterface',
    'LogLevel',
    'LogFormatter',
    'StructuredLogger',
    'configure_logging'
]
