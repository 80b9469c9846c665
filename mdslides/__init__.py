"""
mdslides - Present markdown documents as slideshows in the terminal.
"""

import logging

__version__ = "0.1.0"

# The terminal belongs to curses while a slideshow runs
logging.getLogger(__name__).addHandler(logging.NullHandler())
