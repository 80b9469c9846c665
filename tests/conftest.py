"""
Pytest configuration and shared fixtures.
"""

import curses
import sys
import unicodedata
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from mdslides.core.slide_parser import Presentation, SlideParser  # noqa: E402


SAMPLE_DOCUMENT = "% Title\n% Author\n% 2024\n# Slide One\nHello\n# Slide Two\n* item"


def cells(char: str) -> int:
    """Terminal cells taken by one character, as wcwidth reports it."""
    if unicodedata.combining(char) or unicodedata.category(char) in ("Mn", "Me", "Cf"):
        return 0
    return 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1


class FakeWindow:
    """Stand-in for a curses window that records what is drawn.

    Columns are terminal cells: a wide character fills two cells (the
    second holds an empty placeholder) and a combining character joins
    the cell before it.
    """

    def __init__(self, height: int = 24, width: int = 80, keys: Iterable[int] = ()):
        self.height = height
        self.width = width
        self.keys: List[int] = list(keys)
        self.timeout_ms = None
        self.frames: List[List[str]] = []
        self.erase()

    def getmaxyx(self) -> Tuple[int, int]:
        return self.height, self.width

    def erase(self):
        self.rows = [[" "] * self.width for _ in range(self.height)]
        self.attrs: Dict[Tuple[int, int], int] = {}

    def _write(self, y: int, x: int, text: str, attr: int):
        used = sum(cells(char) for char in text)
        assert 0 <= y < self.height, f"row {y} outside window"
        assert 0 <= x and x + used <= self.width, f"'{text}' at column {x} overflows"
        col = x
        for char in text:
            width = cells(char)
            if width == 0:
                if col > 0:
                    self.rows[y][col - 1] += char
                continue
            self.rows[y][col] = char
            self.attrs[(y, col)] = attr
            if width == 2:
                self.rows[y][col + 1] = ""
                self.attrs[(y, col + 1)] = attr
            col += width

    def addstr(self, y: int, x: int, text: str, attr: int = 0):
        if y == self.height - 1 and x + sum(cells(char) for char in text) >= self.width:
            raise curses.error("addwstr() returned ERR")
        self._write(y, x, text, attr)

    def insstr(self, y: int, x: int, text: str, attr: int = 0):
        self._write(y, x, text, attr)

    def timeout(self, ms: int):
        self.timeout_ms = ms

    def getch(self) -> int:
        return self.keys.pop(0) if self.keys else ord("q")

    def refresh(self):
        self.frames.append(self.lines())

    def lines(self) -> List[str]:
        return ["".join(row) for row in self.rows]

    def row(self, y: int) -> str:
        return "".join(self.rows[y])


@pytest.fixture
def sample_presentation() -> Presentation:
    return SlideParser().parse(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "deck.md"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def fake_window():
    def make(keys: Iterable[int] = (), height: int = 24, width: int = 80) -> FakeWindow:
        return FakeWindow(height=height, width=width, keys=keys)
    return make
