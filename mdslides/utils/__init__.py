# Utils module initialization
from .config import Config
from .helpers import (
    cell_width,
    char_width,
    pad_left,
    pad_right,
    read_document,
    split_lines,
    truncate,
)

__all__ = [
    "Config",
    "cell_width",
    "char_width",
    "pad_left",
    "pad_right",
    "read_document",
    "split_lines",
    "truncate",
]
