"""
Slide Formatter - Classifies slide body lines and turns them into styled display lines.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..utils.helpers import split_lines


BULLET_MARKER = "* "
FENCE = "```"

_LEADING_NEWLINES = re.compile(r"^\n*")
_TRAILING_NEWLINES = re.compile(r"\n*$")
_BLANK_RUNS = re.compile(r"\n\n+")


class StyleTag(Enum):
    """Display style of a span of slide text."""
    PLAIN = "plain"
    HEADING = "heading"
    BULLET_MARKER = "bullet_marker"
    BULLET_TEXT = "bullet_text"
    CODE_LINE = "code_line"


@dataclass(frozen=True)
class Span:
    """A piece of text drawn in a single style."""
    text: str
    style: StyleTag = StyleTag.PLAIN


@dataclass(frozen=True)
class StyledLine:
    """One display line, made of one or more spans."""
    spans: Tuple[Span, ...]

    @classmethod
    def single(cls, text: str, style: StyleTag = StyleTag.PLAIN) -> 'StyledLine':
        return cls(spans=(Span(text, style),))

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)

    @property
    def style(self) -> StyleTag:
        return self.spans[0].style if self.spans else StyleTag.PLAIN


def classify_line(line: str, in_code: bool) -> Tuple[Optional[StyledLine], bool]:
    """
    Classify a single slide line.

    Args:
        line: Raw line of slide content
        in_code: Whether the line sits inside a fenced code block

    Returns:
        The styled line (None for fence delimiters) and the updated
        fenced code block flag
    """
    if line.lstrip().startswith("##"):
        return StyledLine.single(line, StyleTag.HEADING), in_code

    stripped = line.strip()
    if stripped.startswith(BULLET_MARKER):
        # Every occurrence of the marker goes, not only the leading one.
        text = stripped.replace(BULLET_MARKER, "")
        return StyledLine(spans=(
            Span(BULLET_MARKER, StyleTag.BULLET_MARKER),
            Span(text, StyleTag.BULLET_TEXT),
        )), in_code

    if line.rstrip().startswith(FENCE):
        return None, not in_code

    if in_code:
        return StyledLine.single(f" {line} ", StyleTag.CODE_LINE), in_code

    return StyledLine.single(line, StyleTag.PLAIN), in_code


def normalize_content(lines: Sequence[str]) -> str:
    """Join slide lines, drop outer blank lines and cap blank runs at one line."""
    text = "\n".join(lines)
    text = _LEADING_NEWLINES.sub("", text, count=1)
    text = _TRAILING_NEWLINES.sub("", text, count=1)
    text = _BLANK_RUNS.sub("\n\n", text)
    return text.strip()


def format_content(lines: Sequence[str]) -> List[StyledLine]:
    """
    Format raw slide content for display.

    Args:
        lines: Raw content lines of a slide, in source order

    Returns:
        Styled lines in input order, fence delimiters omitted
    """
    result = []
    in_code = False
    for line in split_lines(normalize_content(lines)):
        styled, in_code = classify_line(line, in_code)
        if styled is not None:
            result.append(styled)
    return result
