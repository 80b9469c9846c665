"""
Command line entry point for mdslides.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .core.slide_parser import read_presentation
from .errors import MdSlidesError
from .ui.app import SlideshowApp
from .utils.config import Config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdslides",
        description="Present a markdown file as a slideshow in the terminal.",
        epilog="Keys: left/right arrow to navigate, q or Esc to quit.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("file", type=Path, help="Markdown file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug messages (see --log-file)")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file (default: $MDSLIDES_LOG_FILE)")
    return parser


def setup_logging(log_file: Optional[str], verbose: bool = False):
    """Send log records to a file; without one they are discarded."""
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else Config.log_level(),
        format=LOG_FORMAT,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the mdslides CLI."""
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        parser.print_help()
        return 2

    args = parser.parse_args(argv)

    try:
        Config.validate()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_file or Config.LOG_FILE, args.verbose)

    try:
        presentation = read_presentation(args.file)
        SlideshowApp(presentation).run()
    except MdSlidesError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
