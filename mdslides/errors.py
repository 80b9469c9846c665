"""
Errors raised by mdslides.
"""

from pathlib import Path
from typing import Optional


class MdSlidesError(Exception):
    """Base class for all mdslides errors."""


class ReadError(MdSlidesError):
    """The markdown source could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read '{path}': {reason}")


class TerminalError(MdSlidesError):
    """A terminal primitive failed while the slideshow was running."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message if cause is None else f"{message}: {cause}")
