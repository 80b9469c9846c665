"""
mdslides - Terminal UI
Full-screen curses slideshow with keyboard navigation.
"""

import curses
import logging
from enum import Enum
from typing import Dict, List, Optional, Union

from pyfiglet import Figlet, FontNotFound

from ..core.formatter import StyledLine, StyleTag
from ..core.interaction_handler import InteractionHandler
from ..core.navigation import Navigator
from ..core.slide_parser import Presentation, Slide
from ..errors import TerminalError
from ..utils.config import Config
from ..utils.helpers import cell_width, pad_left, pad_right, truncate
from .layout import Constraint, Rect, split_horizontal, split_vertical

logger = logging.getLogger(__name__)

TITLE_MARGIN = 3
SLIDE_MARGIN = 2
ESC_DELAY_MS = 25
# The banner is not wrapped; it is clipped to the screen like any other text
BANNER_WIDTH = 1000


class ChromeStyle(Enum):
    """Styles of the parts of the screen that are not slide text."""
    TITLE = "title"
    META = "meta"
    HEADER = "header"
    FOOTER = "footer"
    COUNTER = "counter"


StyleKey = Union[StyleTag, ChromeStyle]


def plain_styles() -> Dict[StyleKey, int]:
    """Attribute map without colors (every style drawn as normal text)."""
    return {key: curses.A_NORMAL for key in list(StyleTag) + list(ChromeStyle)}


def init_styles() -> Dict[StyleKey, int]:
    """Set up color pairs and return the attribute for every style.

    Must be called inside an active curses session. Falls back to
    plain_styles() on terminals without color.
    """
    if not curses.has_colors():
        return plain_styles()

    curses.use_default_colors()
    bright = getattr(curses, "COLORS", 0) >= 16
    light_yellow = 11 if bright else curses.COLOR_YELLOW
    light_cyan = 14 if bright else curses.COLOR_CYAN

    curses.init_pair(1, curses.COLOR_YELLOW, -1)                    # Heading, bullet marker
    curses.init_pair(2, light_cyan, curses.COLOR_BLACK)             # Code
    curses.init_pair(3, light_yellow, -1)                           # Title, header bar
    curses.init_pair(4, curses.COLOR_WHITE, curses.COLOR_BLUE)      # Footer

    styles = plain_styles()
    styles.update({
        StyleTag.HEADING: curses.color_pair(1),
        StyleTag.BULLET_MARKER: curses.color_pair(1),
        StyleTag.CODE_LINE: curses.color_pair(2),
        ChromeStyle.TITLE: curses.color_pair(3) | curses.A_BOLD,
        ChromeStyle.META: curses.A_BOLD,
        ChromeStyle.HEADER: curses.color_pair(3) | curses.A_BOLD,
        ChromeStyle.FOOTER: curses.color_pair(4) | curses.A_BOLD,
        ChromeStyle.COUNTER: curses.color_pair(4),
    })
    return styles


def footer_text(presentation: Presentation, index: int) -> str:
    """Left footer label: deck title, plus the slide title past the title view."""
    if index == 0:
        return presentation.title
    slide = presentation.slides[index - 1]
    return f"{presentation.title} -- {slide.title.replace('# ', '')}"


class SlideshowApp:
    """Interactive terminal slideshow for one presentation."""

    def __init__(
        self,
        presentation: Presentation,
        poll_interval_ms: Optional[int] = None,
        title_font: Optional[str] = None
    ):
        """
        Initialize the slideshow.

        Args:
            presentation: Parsed presentation to show
            poll_interval_ms: Key poll wait per frame (defaults to Config.POLL_INTERVAL_MS)
            title_font: FIGlet font for the title view (defaults to Config.TITLE_FONT)
        """
        self.presentation = presentation
        self.poll_interval_ms = Config.POLL_INTERVAL_MS if poll_interval_ms is None else poll_interval_ms
        self.title_font = Config.TITLE_FONT if title_font is None else title_font
        if self.poll_interval_ms < 0:
            raise ValueError(f"poll_interval_ms must not be negative, got {self.poll_interval_ms}")

        self.navigator = Navigator(presentation.slide_count)
        self.handler = InteractionHandler(self.navigator)

        # Fail on a bad font before the terminal is touched
        try:
            self.figlet = Figlet(font=self.title_font, width=BANNER_WIDTH)
        except FontNotFound as e:
            raise TerminalError(f"Cannot load FIGlet font '{self.title_font}'", e) from e

        self.screen = None
        self.styles: Dict[StyleKey, int] = plain_styles()

    def run(self):
        """Run the slideshow until the user quits. The terminal is restored on every exit path."""
        logger.info("Starting slideshow '%s' (%d slides)",
                    self.presentation.title, self.presentation.slide_count)
        try:
            curses.wrapper(self._session)
        except curses.error as e:
            raise TerminalError("Terminal operation failed", e) from e
        logger.info("Slideshow closed at index %d", self.navigator.current_index)

    def _session(self, stdscr):
        """Body of the curses session; curses.wrapper owns setup and teardown."""
        curses.raw()
        curses.set_escdelay(ESC_DELAY_MS)
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        self.loop(stdscr, init_styles())

    def loop(self, screen, styles: Optional[Dict[StyleKey, int]] = None):
        """
        Draw and poll until the navigator reports the session has exited.

        Args:
            screen: curses window (or an object with the same interface)
            styles: Attribute for every style key
        """
        self.screen = screen
        if styles is not None:
            self.styles = styles
        screen.timeout(self.poll_interval_ms)

        while not self.navigator.exited:
            self.draw()
            # -1 when no key arrived within the poll interval
            key = screen.getch()
            self.handler.handle_key(key)

    def draw(self):
        """Draw one frame for the current navigation state."""
        screen = self.screen
        screen.erase()
        height, width = screen.getmaxyx()
        body, footer = split_vertical(
            Rect(0, 0, height, width),
            [Constraint.min(5), Constraint.max(1)]
        )

        index = self.navigator.current_index
        if index == 0:
            self.show_title_view(body)
        else:
            self.show_slide_view(self.presentation.slides[index - 1], body)

        self.show_footer(footer)
        screen.refresh()

    def show_title_view(self, area: Rect):
        """Show title, author and date."""
        inner = area.inner(TITLE_MARGIN, TITLE_MARGIN)
        banner = self.figlet.renderText(self.presentation.title).rstrip("\n").split("\n")

        title_area, author_area, date_area = split_vertical(inner, [
            Constraint.min(len(banner) + 1),
            Constraint.min(2),
            Constraint.min(2),
        ])

        # Center the banner as a block so the glyphs stay aligned
        banner_width = max(cell_width(line) for line in banner)
        offset = max(0, (title_area.width - banner_width) // 2)
        for row, line in enumerate(banner[:title_area.height]):
            self._put(title_area.y + row, title_area.x + offset, line,
                      self.styles[ChromeStyle.TITLE], title_area.right)

        self._put_centered(author_area, self.presentation.author, self.styles[ChromeStyle.META])
        self._put_centered(date_area, self.presentation.date, self.styles[ChromeStyle.META])

    def show_slide_view(self, slide: Slide, area: Rect):
        """Show a slide's header bar and formatted content."""
        inner = area.inner(SLIDE_MARGIN, SLIDE_MARGIN)
        header_area, content_area = split_vertical(inner, [Constraint.max(2), Constraint.min(5)])

        if header_area.height:
            self._put(header_area.y, header_area.x, slide.title,
                      self.styles[ChromeStyle.HEADER], header_area.right)

        lines: List[StyledLine] = slide.formatted_content()
        for row, line in enumerate(lines[:content_area.height]):
            x = content_area.x
            for span in line.spans:
                self._put(content_area.y + row, x, span.text,
                          self.styles[span.style], content_area.right)
                x += cell_width(span.text)

    def show_footer(self, area: Rect):
        """Show the footer bar with the current title and position counter."""
        if not area.height:
            return
        label_area, counter_area = split_horizontal(
            area, [Constraint.percentage(50), Constraint.percentage(50)]
        )

        label = truncate(footer_text(self.presentation, self.navigator.current_index), label_area.width)
        self._put(label_area.y, label_area.x, pad_right(label, label_area.width),
                  self.styles[ChromeStyle.FOOTER], label_area.right)

        counter = truncate(self.navigator.get_progress(), counter_area.width)
        self._put(counter_area.y, counter_area.x, pad_left(counter, counter_area.width),
                  self.styles[ChromeStyle.COUNTER], counter_area.right)

    def _put_centered(self, area: Rect, text: str, attr: int):
        if not area.height or not text:
            return
        text = truncate(text, area.width)
        self._put(area.y, area.x + (area.width - cell_width(text)) // 2, text, attr, area.right)

    def _put(self, y: int, x: int, text: str, attr: int, right: int):
        """Draw text clipped to the window and to column `right` (in terminal cells)."""
        height, width = self.screen.getmaxyx()
        if y < 0 or y >= height or x < 0 or x >= width:
            return
        text = truncate(text, min(right, width) - x)
        if not text:
            return
        try:
            if y == height - 1 and x + cell_width(text) >= width:
                # addstr fails when the cursor would move past the bottom-right cell
                self.screen.insstr(y, x, text, attr)
            else:
                self.screen.addstr(y, x, text, attr)
        except curses.error:
            # Text reaching the window edge is clipped, not fatal
            logger.debug("Clipped text at row %d, column %d", y, x)
