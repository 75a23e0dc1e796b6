"""
Logging utilities for texmesh.

Provides the package logger name and a timing context manager.
"""

import logging
import time
from typing import Optional

LOGGER_NAME = 'texmesh'


class Timer:
    """Context manager for timing operations with automatic logging."""

    def __init__(self, name: str, logger: Optional[logging.Logger] = None,
                 level: int = logging.DEBUG):
        """
        Initialize timer.

        Args:
            name: Name of the operation being timed
            logger: Logger to use (defaults to the texmesh logger)
            level: Level the start/finish messages are logged at
        """
        self.name = name
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.level = level
        self.start_time = None
        self.elapsed = None

    def __enter__(self):
        """Start timing."""
        self.start_time = time.perf_counter()
        self.logger.log(self.level, "[TIMER] %s started...", self.name)
        return self

    def __exit__(self, exc_type, exc, tb):
        """Stop timing and log result."""
        self.elapsed = time.perf_counter() - self.start_time
        if exc_type is None:
            self.logger.log(self.level, "[OK] %s complete in %.3fs", self.name, self.elapsed)
        else:
            self.logger.log(self.level, "[FAIL] %s aborted after %.3fs", self.name, self.elapsed)
        return False
