"""
Navigation - Tracks which view of the presentation is on screen.
Index 0 is the title view, 1..slide_count are the content slides.
"""

import logging
from dataclasses import dataclass

from .interaction_handler import InteractionEvent, InteractionType

logger = logging.getLogger(__name__)


@dataclass
class PresentationState:
    """Current state of the presentation."""
    current_index: int = 0
    exited: bool = False


class Navigator:
    """Move between the title view and the content slides."""

    def __init__(self, slide_count: int):
        """
        Initialize navigator.

        Args:
            slide_count: Number of content slides in the presentation
        """
        if slide_count < 0:
            raise ValueError(f"slide_count must not be negative, got {slide_count}")
        self.slide_count = slide_count
        self.state = PresentationState()

    @property
    def current_index(self) -> int:
        return self.state.current_index

    @property
    def exited(self) -> bool:
        return self.state.exited

    def step_back(self):
        """Go back one view, stopping at the title view."""
        self._move_to(max(0, self.state.current_index - 1))

    def step_forward(self):
        """Advance one view, stopping at the last slide."""
        self._move_to(min(self.slide_count, self.state.current_index + 1))

    def quit(self):
        """End the session."""
        logger.debug("Quit requested at index %d", self.state.current_index)
        self.state.exited = True

    def apply(self, event: InteractionEvent):
        """
        Apply an interaction event.

        Args:
            event: The event to apply; unknown events are ignored
        """
        if event.interaction_type == InteractionType.STEP_BACK:
            self.step_back()
        elif event.interaction_type == InteractionType.STEP_FORWARD:
            self.step_forward()
        elif event.interaction_type == InteractionType.QUIT:
            self.quit()

    def get_progress(self) -> str:
        """Position counter as shown in the footer, e.g. '[2/5]'."""
        return f"[{self.state.current_index + 1}/{self.slide_count + 1}]"

    def _move_to(self, index: int):
        if index == self.state.current_index:
            return
        logger.debug("Slide %d -> %d", self.state.current_index, index)
        self.state.current_index = index
