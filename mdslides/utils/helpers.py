"""
Utility helper functions for mdslides.
"""

import logging
import unicodedata
from pathlib import Path
from typing import List

from ..errors import ReadError

logger = logging.getLogger(__name__)


def read_document(file_path: Path) -> str:
    """Read a UTF-8 markdown document, raising ReadError on failure."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError:
        raise ReadError(file_path, "no such file")
    except IsADirectoryError:
        raise ReadError(file_path, "is a directory")
    except UnicodeDecodeError as e:
        raise ReadError(file_path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise ReadError(file_path, e.strerror or str(e)) from e

    logger.debug("Read %d characters from %s", len(text), file_path)
    return text


def split_lines(text: str) -> List[str]:
    """
    Split text into lines on '\\n'.

    A trailing '\\r' is dropped from each line and a final line break
    does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def char_width(char: str) -> int:
    """Number of terminal cells a character occupies (0, 1 or 2)."""
    if unicodedata.combining(char) or unicodedata.category(char) in ("Mn", "Me", "Cf"):
        return 0
    return 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1


def cell_width(text: str) -> int:
    """Number of terminal cells text occupies."""
    return sum(char_width(char) for char in text)


def truncate(text: str, width: int) -> str:
    """Cut text to at most width terminal cells."""
    used = 0
    for i, char in enumerate(text):
        used += char_width(char)
        if used > width:
            return text[:i]
    return text


def pad_right(text: str, width: int) -> str:
    """Left-align text in width cells (text must already fit)."""
    return text + " " * max(0, width - cell_width(text))


def pad_left(text: str, width: int) -> str:
    """Right-align text in width cells (text must already fit)."""
    return " " * max(0, width - cell_width(text)) + text
