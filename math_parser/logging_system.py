"""
Logging System for the Expression Parser

This module provides a centralized logging system with different verbosity levels
so that the parsing pipeline stays quiet by default while its intermediate
stages (tokens, postfix form, trees) can be traced on demand.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the parser"""
    SILENT = 0      # No output
    MINIMAL = 1     # Only warnings
    MODERATE = 2    # Key milestones
    DETAILED = 3    # Every calculated result
    VERBOSE = 4     # Token streams, postfix output and error reasons


class ParserLogger:
    """
    Centralized logger for the parsing pipeline with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('math_parser')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()  # Remove any existing handlers

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"math_parser_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def stage(self, name: str, tokens) -> None:
        """Dump one pipeline stage (token list) in verbose mode"""
        if not self._should_log(LogLevel.VERBOSE):
            return
        rendered = " ".join(str(token) for token in tokens)
        self.logger.debug(f"DEBUG: {name:<10} [{len(tokens)}] {rendered}")


# Global logger instance
_global_logger: Optional[ParserLogger] = None


def get_logger() -> ParserLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ParserLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ParserLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ParserLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = ParserLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)


def log_stage(name: str, tokens):
    """Log a token stream produced by one pipeline stage"""
    get_logger().stage(name, tokens)
