"""Command-line entry point: nearest neighbors of a word list."""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

from .config import DEFAULT_SOURCE, DEFAULT_TOP, QueryConfig, StoreConfig, parse_capacity
from .context import EmbeddingContext
from .display import (
    print_analogy,
    print_error,
    print_input_summary,
    print_load_report,
    print_output_written,
    print_run_header,
    print_usage,
    print_word_usage,
)
from .errors import UsageError, VecprobeError
from .output import next_output_path, read_input_words, write_results
from .query.engine import DEFAULT_ANALOGIES
from .store.cache import cache_enabled

logger = logging.getLogger(__name__)

__all__ = ["build_parser", "run", "main"]


class _ArgumentParser(argparse.ArgumentParser):
    # Report bad arguments like any other error instead of exiting with status 2.
    def error(self, message):
        raise UsageError(message)


def build_parser():
    parser = _ArgumentParser(
        prog="vecprobe",
        description="Nearest neighbors of a set of words in a pretrained word-vector file.",
    )
    parser.add_argument("input", nargs="?", help="File with one input word per line (no headline)")
    parser.add_argument(
        "words_count",
        nargs="?",
        help="Number of vectors read from the top of the vector file (0 = all). "
             "Non-numeric values are ignored.",
    )
    parser.add_argument("--source", default=DEFAULT_SOURCE, help="Text vector file (.vec)")
    parser.add_argument("--cache-dir", default=".", help="Directory for serialized_<n>.bin caches")
    parser.add_argument("--output-dir", default=".", help="Directory for output_<n>.csv files")
    parser.add_argument("--top", type=int, default=DEFAULT_TOP, help="Number of neighbors written")
    parser.add_argument("--average", action="store_true",
                        help="Combine input vectors with their mean instead of their sum")
    parser.add_argument("--analogy", nargs=3, action="append", default=[],
                        metavar=("FROM", "TO", "FROM2"),
                        help="Print the neighbors of FROM2 + (TO - FROM); repeatable")
    parser.add_argument("--examples", action="store_true", help="Print the built-in analogy examples")
    parser.add_argument("--no-progress", action="store_true", help="Hide the parsing progress bar")
    parser.add_argument("--wait", action="store_true", help="Wait for Enter before exiting")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log loading details (-vv for debug)")
    return parser


def configure_logging(verbosity=0):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def run(args):
    """
    Execute one query run from parsed arguments.

    Args:
        args (argparse.Namespace): Result of ``build_parser().parse_args()``.

    Raises:
        VecprobeError: On any missing input, malformed file or failed query.
    """
    triples = [tuple(t) for t in args.analogy]
    if args.examples:
        triples.extend(DEFAULT_ANALOGIES)
    if args.input is None and not triples:
        raise UsageError("Missing argument: inputFile")
    if args.top < 0:
        raise UsageError(f"--top must be >= 0, got {args.top}")

    store_config = StoreConfig(
        source_path=args.source,
        cache_dir=args.cache_dir,
        capacity=parse_capacity(args.words_count),
        show_progress=not args.no_progress,
    )
    query_config = QueryConfig(top=args.top, average=args.average, output_dir=args.output_dir)

    words = None
    if args.input is not None:
        words = read_input_words(args.input)
        print_input_summary(len(words), args.input)

    print_run_header(
        datetime.now(),
        store_config.source_path,
        store_config.cache_dir,
        store_config.capacity,
        cache_enabled(store_config.capacity, store_config.cache_ceiling),
    )

    context = EmbeddingContext.build(store_config)
    print_load_report(context.load_report)

    for triple, ranking in context.engine.analogies(triples):
        print_analogy(triple, ranking.head(query_config.top))

    if words is None:
        return None

    ranking, unused = context.engine.nearest_neighbors_for_set(words, average=query_config.average)
    print_word_usage(len(words) - len(unused), len(words), unused)

    results = ranking.head(query_config.top)
    path = next_output_path(query_config.output_dir)
    write_results(results, path)
    print_output_written(path, results)
    return path


def main(argv=None):
    """
    Console entry point.

    Errors are printed with the usage text; the exit status is 0 either way.
    """
    parser = build_parser()
    args = None
    try:
        args = parser.parse_args(argv)
        configure_logging(args.verbose)
        run(args)
    except VecprobeError as e:
        logger.debug("Run failed", exc_info=True)
        print_error(e)
        print_usage(parser.prog)
    except Exception as e:
        logger.debug("Run failed", exc_info=True)
        print_error(f"{type(e).__name__}: {e}")
        print_usage(parser.prog)

    if args is not None and args.wait:
        input()
    return 0


if __name__ == "__main__":
    sys.exit(main())
