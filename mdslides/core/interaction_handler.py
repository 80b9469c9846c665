"""
Interaction Handler - Turns key presses into interaction events and routes them to navigation.
"""

from __future__ import annotations

import curses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from .navigation import Navigator

logger = logging.getLogger(__name__)

KEY_ESCAPE = 27


class InteractionType(Enum):
    """Types of user interactions."""
    STEP_BACK = "back"
    STEP_FORWARD = "forward"
    QUIT = "quit"


@dataclass(frozen=True)
class InteractionEvent:
    """Represents a user interaction event."""
    interaction_type: InteractionType
    key: Optional[int] = None


KEY_BINDINGS: Dict[int, InteractionType] = {
    KEY_ESCAPE: InteractionType.QUIT,
    ord("q"): InteractionType.QUIT,
    curses.KEY_LEFT: InteractionType.STEP_BACK,
    curses.KEY_RIGHT: InteractionType.STEP_FORWARD,
}


def event_for_key(key: int) -> Optional[InteractionEvent]:
    """
    Map a curses key code to an interaction event.

    Args:
        key: Value returned by window.getch(); -1 means no key arrived

    Returns:
        The bound event, or None for unbound keys
    """
    interaction_type = KEY_BINDINGS.get(key)
    if interaction_type is None:
        return None
    return InteractionEvent(interaction_type, key=key)


class InteractionHandler:
    """Central handler for all user interactions."""

    def __init__(self, navigator: Navigator):
        """
        Initialize interaction handler.

        Args:
            navigator: Navigation state machine receiving the events
        """
        self.navigator = navigator

    def handle_key(self, key: int) -> Optional[InteractionEvent]:
        """Handle a raw key code. Returns the event it produced, if any."""
        event = event_for_key(key)
        if event is not None:
            self.handle_interaction(event)
        return event

    def handle_interaction(self, event: InteractionEvent):
        """
        Handle a user interaction event.

        Args:
            event: The interaction event to handle
        """
        logger.debug("Handling %s", event.interaction_type.name)
        self.navigator.apply(event)
