# UI module initialization
from .app import SlideshowApp, footer_text
from .layout import Constraint, Rect, split_horizontal, split_vertical

__all__ = [
    "SlideshowApp",
    "footer_text",
    "Constraint",
    "Rect",
    "split_horizontal",
    "split_vertical",
]
