"""Command line front end for txtchapters."""

import argparse
import json
import logging
import sys

from .config import init_config
from .errors import ConfigurationError, TxtChaptersError, format_error_for_user
from .logger import level_for, setup_logging
from .segmenter import DetectionMethod
from .text_loader import load_chapters

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="txtchapters",
        description="Split a plain-text novel into chapters and review or edit the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the chapters found in a book
  txtchapters mybook.txt

  # Force a detection method
  txtchapters mybook.txt --detect end-marker

  # Print chapter 3
  txtchapters mybook.txt --show 3

  # Machine-readable listing
  txtchapters mybook.txt --json

  # Edit chapters interactively (split, merge, delete, undo)
  txtchapters mybook.txt --tui

Detection Methods:
  auto        - Try dash separators, end markers, then headings (default)
  dash        - Blocks separated by '---' lines with 'Chapter IV' headings
  end-marker  - Blocks separated by '---CHAPTER END---'
  headings    - Line-by-line heading cascade (第1章, 第一章, Chapter 1, ...)
        """,
    )
    parser.add_argument(
        "sourcefile",
        type=str,
        help="Text file to split into chapters",
    )
    parser.add_argument(
        "--detect",
        type=str,
        choices=[m.value for m in DetectionMethod],
        default=None,
        help="Chapter detection method (default: from config, normally auto)",
    )
    parser.add_argument(
        "--show",
        type=int,
        metavar="N",
        help="Print the title and text of chapter N (1-indexed)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the chapters as JSON"
    )
    parser.add_argument(
        "--legacy-titles",
        action="store_true",
        help="Cut split chapter titles at 30 characters instead of 50 (TUI only)",
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        default=None,
        help="Directory holding config.json (default: $TXTCHAPTERS_HOME or platform default)",
    )
    parser.add_argument("--tui", action="store_true", help="Launch the interactive Terminal UI")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Quiet mode (only warnings and errors)"
    )
    parser.add_argument(
        "--log-file", type=str, default=None, help="Also append log messages to this file"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=level_for(args.verbose, args.quiet), log_file=args.log_file)

    try:
        config = init_config(args.config_dir)
        logger.debug("Using configuration from %s", config.base_dir)

        if args.tui:
            from .tui import main as tui_main

            tui_main(args.sourcefile, legacy_titles=args.legacy_titles, detect=args.detect)
            return 0

        chapters = load_chapters(
            args.sourcefile,
            segmenter=config.build_segmenter(args.detect),
            encodings=config.encodings,
        )

        if args.show is not None:
            if not 1 <= args.show <= len(chapters):
                raise ConfigurationError(
                    f"Chapter {args.show} does not exist (found {len(chapters)})",
                    parameter="--show",
                )
            chapter = chapters[args.show - 1]
            # Use print for user-facing output that shouldn't go to logs
            print(chapter.title)
            print()
            print(chapter.content)
            return 0

        if args.json:
            print(json.dumps([c.to_dict() for c in chapters], ensure_ascii=False, indent=2))
            return 0

        for i, chapter in enumerate(chapters, start=1):
            print(f"{i:>4}  {chapter.title}  ({chapter.char_count:,} chars)")
        return 0

    except (TxtChaptersError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(format_error_for_user(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
