"""Logging utilities for consistent status messages."""

import logging
import sys
from typing import Optional


class StatusLogger:
    """Simple status logger with consistent formatting.

    Provides methods for success, error, info and debug messages
    with consistent prefixes for easy parsing and reading.
    """

    def __init__(self, name: str = "link_colors", verbose: bool = True,
                 debug: bool = False):
        """Initialize the status logger.

        Args:
            name: Logger name for Python logging integration
            verbose: If False, suppresses info messages
            debug: If True, debug messages are emitted
        """
        self.verbose = verbose
        self._logger = logging.getLogger(name)

        # Configure handler if not already configured
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter('%(message)s'))
            self._logger.addHandler(handler)
        self.set_debug(debug)

    def success(self, message: str, indent: int = 0) -> None:
        """Log a success message with [OK] prefix.

        Args:
            message: The message to log
            indent: Number of spaces to indent
        """
        prefix = " " * indent
        self._logger.info(f"{prefix}[OK] {message}")

    def error(self, message: str, indent: int = 0) -> None:
        """Log an error message with [ERROR] prefix."""
        prefix = " " * indent
        self._logger.error(f"{prefix}[ERROR] {message}")

    def warning(self, message: str, indent: int = 0) -> None:
        """Log a warning message with [WARNING] prefix."""
        prefix = " " * indent
        self._logger.warning(f"{prefix}[WARNING] {message}")

    def info(self, message: str, indent: int = 0) -> None:
        """Log an info message (respects verbose setting).

        Args:
            message: The message to log
            indent: Number of spaces to indent
        """
        if self.verbose:
            prefix = " " * indent
            self._logger.info(f"{prefix}{message}")

    def debug(self, message: str, indent: int = 0) -> None:
        """Log a debug message with [DEBUG] prefix (only when debug is on)."""
        prefix = " " * indent
        self._logger.debug(f"{prefix}[DEBUG] {message}")

    def header(self, title: str, width: int = 60) -> None:
        """Print a header section (respects verbose setting)."""
        if not self.verbose:
            return
        self._logger.info("=" * width)
        self._logger.info(title)
        self._logger.info("=" * width)

    def separator(self, width: int = 60, char: str = "-") -> None:
        """Print a separator line (respects verbose setting)."""
        if not self.verbose:
            return
        self._logger.info(char * width)

    def set_verbose(self, verbose: bool) -> None:
        """Set verbose mode.

        Args:
            verbose: If False, info messages are suppressed
        """
        self.verbose = verbose

    def set_debug(self, debug: bool) -> None:
        """Enable or disable debug output."""
        self._logger.setLevel(logging.DEBUG if debug else logging.INFO)

    @property
    def debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(logging.DEBUG)


# Global default logger instance
_default_logger: Optional[StatusLogger] = None


def get_logger(verbose: Optional[bool] = None) -> StatusLogger:
    """Get the default status logger instance.

    Args:
        verbose: If given, updates verbose mode (False suppresses info messages)

    Returns:
        StatusLogger instance
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = StatusLogger(verbose=True if verbose is None else verbose)
    elif verbose is not None:
        _default_logger.set_verbose(verbose)
    return _default_logger
