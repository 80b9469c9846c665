# Core module initialization
from .formatter import Span, StyledLine, StyleTag, classify_line, format_content
from .slide_parser import Presentation, Slide, SlideParser, read_presentation
from .interaction_handler import InteractionEvent, InteractionHandler, InteractionType, event_for_key
from .navigation import Navigator, PresentationState

__all__ = [
    "Span",
    "StyledLine",
    "StyleTag",
    "classify_line",
    "format_content",
    "Presentation",
    "Slide",
    "SlideParser",
    "read_presentation",
    "InteractionEvent",
    "InteractionHandler",
    "InteractionType",
    "event_for_key",
    "Navigator",
    "PresentationState",
]
