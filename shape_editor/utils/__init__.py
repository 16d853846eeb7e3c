"""
Shape Editor - Utilities Package
================================
Logging helpers shared by the shape editor modules.
"""

from shape_editor.utils.logger import (
    JsonFormatter, setup_logger, get_logger,
    LogCapture, log_exception
)


__all__ = [
    'JsonFormatter', 'setup_logger', 'get_logger',
    'LogCapture', 'log_exception'
]
