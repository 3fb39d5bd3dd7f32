"""
Command-line honeycomb solver.

Usage:
    honeycomb-solver <honeycomb_file> <dictionary_file> [-v] [--show-grid]

Prints every dictionary word traceable in the honeycomb, one per line in
ascending order, or "No words found." when there are none.
"""
import argparse
import logging
import sys

from honeycomb.errors import HoneycombError
from honeycomb.finder import solve
from honeycomb.grid import load_honeycomb
from honeycomb.metrics import StageTimer
from honeycomb.settings import settings
from honeycomb.trie import load_trie

logger = logging.getLogger("honeycomb")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="honeycomb-solver",
        description="Find dictionary words traceable through adjacent cells of a honeycomb",
    )
    parser.add_argument("honeycomb", help="Path to the honeycomb file (layer count followed by letters)")
    parser.add_argument("dictionary", help="Path to the dictionary file (one uppercase word per line)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log stage timings and counts")
    parser.add_argument("--show-grid", action="store_true", help="Print the column layout to stderr")
    return parser


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.INFO if args.verbose or settings.DEBUG else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logger.setLevel(level)

    timer = StageTimer()

    try:
        with timer.stage("parse"):
            grid = load_honeycomb(args.honeycomb)
    except OSError as e:
        return _fail(f"honeycomb file missing: {args.honeycomb} ({e.strerror})")
    except (HoneycombError, UnicodeDecodeError) as e:
        return _fail(str(e))

    if args.show_grid:
        print(grid.format_columns(), file=sys.stderr)

    try:
        with timer.stage("dictionary"):
            trie = load_trie(args.dictionary, settings.MIN_WORD_LENGTH, settings.STRICT_DICTIONARY)
    except OSError as e:
        return _fail(f"dictionary file missing: {args.dictionary} ({e.strerror})")
    except (HoneycombError, UnicodeDecodeError) as e:
        return _fail(str(e))

    with timer.stage("search"):
        words, _ = solve(grid, trie, settings.MAX_RESULTS)

    logger.info("Found %d words (%s)", len(words), timer)

    if not words:
        print("No words found.")
    else:
        for word in words:
            print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
