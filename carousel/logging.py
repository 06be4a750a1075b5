"""Logging utilities with timing and frame tracking."""

from __future__ import annotations
import sys
import time
from typing import Optional, TextIO


class Logger:
    """Application logger with timestamps and frame counts.

    Info lines go to stdout, errors to stderr so they stay visible to the
    user even when stdout is silenced or redirected.
    """

    def __init__(self):
        self._start_time: float = time.perf_counter()
        self._frame: int = 0
        self.quiet: bool = False

    @property
    def frame(self) -> int:
        """Current frame number."""
        return self._frame

    def increment_frame(self) -> None:
        """Increment frame counter."""
        self._frame += 1

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def format(self, msg: str) -> str:
        return f"[{self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n"

    def _write(self, stream: TextIO, line: str) -> None:
        try:
            stream.write(line)
            stream.flush()
        except (OSError, ValueError):
            # Closed or broken stream; nowhere left to report to
            pass

    def log(self, msg: str) -> None:
        """Log a message with timestamp and frame number."""
        if self.quiet:
            return
        self._write(sys.stdout, self.format(msg))

    def error(self, msg: str) -> None:
        """Log a message to the error channel, regardless of quiet mode."""
        self._write(sys.stderr, self.format(msg))


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    """Log a message using the global logger."""
    get_logger().log(msg)


def log_error(msg: str) -> None:
    """Log an error using the global logger."""
    get_logger().error(msg)


def set_quiet(quiet: bool) -> None:
    """Silence (or restore) info messages."""
    get_logger().quiet = quiet


def get_frame() -> int:
    """Get current frame count."""
    return get_logger().frame


def increment_frame() -> None:
    """Increment frame counter."""
    get_logger().increment_frame()
