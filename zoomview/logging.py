"""Logging utilities with timing, frame tracking and per-tag muting.

Messages start with a subsystem tag such as ``[CTRL]`` or ``[INPUT]``.
Gesture streams log on every wheel notch and drag step, so noisy tags can
be muted; error-level messages (``[TAG][ERR]`` and friends) always pass.
"""

from __future__ import annotations
import re
import sys
import time
from typing import Iterable, Optional, Set

from .config import LOG_MUTED_TAGS

_TAG_RE = re.compile(r"^\[([A-Z]+)\](\[([A-Z]+)\])?")
_ALWAYS_SHOWN_LEVELS = frozenset({"ERR", "CRITICAL"})


class Logger:
    """Application logger with timestamps and frame counts."""

    def __init__(self, muted_tags: Iterable[str] = LOG_MUTED_TAGS):
        self._start_time: float = time.perf_counter()
        self._frame: int = 0
        self.enabled: bool = True
        self.muted_tags: Set[str] = {t.upper() for t in muted_tags}

    @property
    def frame(self) -> int:
        """Current frame number."""
        return self._frame

    @frame.setter
    def frame(self, value: int) -> None:
        self._frame = value

    def increment_frame(self) -> None:
        self._frame += 1

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def mute(self, tag: str) -> None:
        self.muted_tags.add(tag.upper())

    def unmute(self, tag: str) -> None:
        self.muted_tags.discard(tag.upper())

    def is_muted(self, msg: str) -> bool:
        """True when the message's tag is muted and it is not an error."""
        m = _TAG_RE.match(msg)
        if not m or m.group(1) not in self.muted_tags:
            return False
        return m.group(3) not in _ALWAYS_SHOWN_LEVELS

    def log(self, msg: str) -> None:
        """Log a message with timestamp and frame number."""
        if not self.enabled or self.is_muted(msg):
            return
        line = f"[{self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n"
        try:
            sys.stdout.write(line)
            sys.stdout.flush()
        except (OSError, ValueError):
            # stdout closed or detached (pythonw, piped and gone)
            try:
                sys.stderr.write(line)
                sys.stderr.flush()
            except (OSError, ValueError):
                pass


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


def get_frame() -> int:
    return get_logger().frame


def increment_frame() -> None:
    get_logger().increment_frame()


def now() -> float:
    """Get current time in seconds (high precision)."""
    return time.perf_counter()
