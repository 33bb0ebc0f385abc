"""
Diagnostic Logging for Expression Evaluation

Evaluation never aborts on an undefined variable or a zero divisor. Instead the
condition is reported here, on stderr by default, and the caller receives a
sentinel value. This module owns the logger those reports go through.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


LOGGER_NAME = 'expression_ast'

UNDEFINED_VARIABLE = 'undefined_variable'
DIVISION_BY_ZERO = 'division_by_zero'


class LogLevel(Enum):
    """Enumeration of logging levels for expression evaluation"""
    SILENT = 0      # Nothing, not even evaluation diagnostics
    MINIMAL = 1     # Evaluation diagnostics only
    MODERATE = 2    # Diagnostics and informational messages
    DETAILED = 3    # Adds per-evaluation summaries
    VERBOSE = 4     # All information including debug details


class EvaluationLogger:
    """
    Logger for evaluation diagnostics with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None,
                 stream=None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(logging.DEBUG)
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()  # Remove any existing handlers

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Diagnostics belong on the error stream
        console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"expression_ast_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def undefined_variable(self, name: str):
        """Report an identifier evaluated without a binding"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.error(f"Error: Undefined variable '{name}'.",
                              extra={'condition': UNDEFINED_VARIABLE, 'variable': name})

    def division_by_zero(self):
        """Report a divide node whose divisor evaluated to zero"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.error("Error: Division by zero.",
                              extra={'condition': DIVISION_BY_ZERO})

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def evaluation_result(self, expression: str, result: float):
        """Log the outcome of evaluating a whole expression"""
        if not self._should_log(LogLevel.DETAILED):
            return
        self.logger.info(f"{expression} = {result!r}")

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[EvaluationLogger] = None


def get_logger() -> EvaluationLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = EvaluationLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = EvaluationLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None,
                      stream=None) -> EvaluationLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = EvaluationLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path,
        stream=stream
    )
    return _global_logger


def log_info(message: str, level: LogLevel = LogLevel.MODERATE):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
