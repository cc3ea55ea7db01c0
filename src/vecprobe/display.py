"""Display formatting for the command-line query tool."""
from __future__ import annotations

from pathlib import Path

from .config import DEFAULT_CAPACITY, DEFAULT_SOURCE, DEFAULT_TOP

__all__ = [
    "truncate_path_to_fit",
    "print_run_header",
    "print_load_report",
    "print_input_summary",
    "print_word_usage",
    "print_output_written",
    "print_analogy",
    "print_error",
    "print_usage",
    "LINE_WIDTH",
]

LINE_WIDTH = 100


def truncate_path_to_fit(path, prefix, width=LINE_WIDTH):
    """
    Shorten a path from the left so ``prefix + path`` fits in ``width``.

    Example:
        >>> truncate_path_to_fit("/a/very/long/path/file.vec", "Source: ", 20)
        '.../file.vec'
    """
    text = str(path)
    room = width - len(prefix)
    if len(text) <= room:
        return text
    if room <= 3:
        return text[-room:] if room > 0 else ""
    return "..." + text[-(room - 3):]


def print_run_header(start_time, source_path, cache_dir, capacity, cache_mode):
    """
    Print run configuration header.

    Args:
        start_time (datetime): Start time of the run.
        source_path (Path): Text vector file.
        cache_dir (Path): Cache directory.
        capacity (int): Number of vectors requested (0 = all).
        cache_mode (bool): Whether the cache is used for this capacity.
    """
    source_str = truncate_path_to_fit(source_path, "Vector source:        ")
    cache_str = truncate_path_to_fit(Path(cache_dir).resolve(), "Cache directory:      ")

    lines = [
        "WORD VECTOR NEAREST NEIGHBORS",
        "━" * LINE_WIDTH,
        f"Start Time: {start_time:%Y-%m-%d %H:%M:%S}",
        "",
        "Configuration",
        "═" * LINE_WIDTH,
        f"Vector source:        {source_str}",
        f"Cache directory:      {cache_str}",
        f"Vectors used:         {capacity if capacity else 'all'}",
        f"Cache:                {'enabled' if cache_mode else 'bypassed'}",
        "",
    ]
    print("\n".join(lines), flush=True)


def print_load_report(reports):
    """Print one line per loading phase (deserialized/loaded/serialized)."""
    for report in reports:
        direction = "into" if report.phase == "serialized" else "from"
        print(
            f'{report.phase.capitalize()} {report.count} words {direction} "{report.path}" '
            f"in {report.seconds:.3f} seconds.",
            flush=True,
        )


def print_input_summary(count, input_path):
    print(f"Read {count} words from '{input_path}'.", flush=True)


def print_word_usage(used_count, total, unused_words):
    print(f"{used_count} out of {total} input words found in the vector table.", flush=True)
    if unused_words:
        print(f"Words not found: {', '.join(unused_words)}", flush=True)


def print_output_written(path, results):
    """Print the output path and the ranked words written to it."""
    lines = [
        f'Written {len(results)} output words to "{path}".',
        "",
        f"Words: {', '.join(word for word, _ in results)}",
    ]
    print("\n".join(lines), flush=True)


def print_analogy(triple, results):
    from1, to1, from2 = triple
    lines = [
        f"{from1} to {to1} is like {from2} to:",
        ", ".join(f"{word} ({distance:.2f})" for word, distance in results),
        "",
    ]
    print("\n".join(lines), flush=True)


def print_error(message):
    print(f"\nERROR: {message}\n", flush=True)


def print_usage(prog="vecprobe", default_capacity=DEFAULT_CAPACITY, top=DEFAULT_TOP):
    lines = [
        "Usage:",
        f"  {prog} input [wordsCount] [options]",
        "  input:",
        "    file with one input word per line (with no headline)",
        "  wordsCount (optional):",
        "    number of word-vectors from the beginning of the vector file used. "
        f"Default {default_capacity}, for all the words use 0",
        "  options:",
        f"    --source PATH         vector file (default {DEFAULT_SOURCE})",
        "    --cache-dir DIR       directory for serialized_<wordsCount>.bin caches",
        "    --output-dir DIR      directory for output_<n>.csv files",
        f"    --top N               number of neighbours written (default {top})",
        "    --average             use the mean of the input vectors instead of their sum",
        "    --analogy A B C       print neighbours of C + (B - A); repeatable",
        "    --examples            print the built-in analogy examples",
        "Examples:",
        f"    {prog} inputFile.txt 100000",
        f"    {prog} inputFile.txt",
        f"The first {top} nearest neighbours of input words (with their distances) "
        "will be written to output_{n}.csv",
    ]
    print("\n".join(lines), flush=True)
