"""
Slide Parser - Builds a presentation from a markdown document.
The document may start with a three line '%' header (title, author, date);
every line starting with '# ' opens a new slide.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from .formatter import StyledLine, format_content
from ..utils.helpers import read_document, split_lines

logger = logging.getLogger(__name__)

METADATA_PREFIX = "%"
METADATA_MARKER = "% "
SLIDE_MARKER = "# "


@dataclass(frozen=True)
class Slide:
    """Represents a single slide with its content."""
    title: str
    content: Tuple[str, ...] = ()

    def formatted_content(self) -> List[StyledLine]:
        """Styled display lines for the slide body."""
        return format_content(self.content)


@dataclass(frozen=True)
class Presentation:
    """A parsed slide deck: title block plus content slides."""
    title: str = ""
    author: str = ""
    date: str = ""
    slides: Tuple[Slide, ...] = field(default_factory=tuple)

    @property
    def slide_count(self) -> int:
        return len(self.slides)


class SlideParser:
    """Parse markdown documents into presentations."""

    # Line positions of title, author and date
    METADATA_FIELDS = ("title", "author", "date")

    def parse(self, text: str) -> Presentation:
        """
        Parse a markdown document.

        Args:
            text: Full document text

        Returns:
            Presentation with at least one slide
        """
        metadata = {name: "" for name in self.METADATA_FIELDS}
        slides = []
        slide_title = ""
        slide_content = []

        for line_number, line in enumerate(split_lines(text)):
            if line_number < len(self.METADATA_FIELDS) and line.startswith(METADATA_PREFIX):
                metadata[self.METADATA_FIELDS[line_number]] = line.replace(METADATA_MARKER, "", 1)
            elif line.startswith(SLIDE_MARKER):
                if slide_title:
                    slides.append(Slide(title=slide_title, content=tuple(slide_content)))
                    slide_content = []
                slide_title = line
            else:
                slide_content.append(line)

        slides.append(Slide(title=slide_title, content=tuple(slide_content)))

        logger.debug("Parsed presentation '%s' with %d slides", metadata["title"], len(slides))
        return Presentation(slides=tuple(slides), **metadata)

    def parse_file(self, file_path: Path) -> Presentation:
        """Read and parse a markdown file. Raises ReadError if it cannot be read."""
        return self.parse(read_document(file_path))


def read_presentation(file_path: Path) -> Presentation:
    """Read a presentation from a markdown file."""
    return SlideParser().parse_file(Path(file_path))
