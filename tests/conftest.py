"""
Pytest configuration for the vecprobe test suite.

Provides small ``.vec`` files and the cat/dog/fish table used across tests.
"""
import sys
from pathlib import Path

_src = Path(__file__).parent.parent / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

import pytest

from vecprobe.query import QueryEngine
from vecprobe.table import VectorTable

PETS_VEC = "3 2\ncat 1.0 0.0\ndog 0.0 1.0\nfish 1.0 1.0\n"


def write_vec(path, words, dimension=None, header_count=None, trailing_space=True):
    """Write a ``.vec`` file from a ``{word: [floats]}`` dict."""
    if dimension is None:
        dimension = len(next(iter(words.values())))
    count = len(words) if header_count is None else header_count
    lines = [f"{count} {dimension}"]
    for word, vector in words.items():
        line = " ".join([word] + [repr(float(x)) for x in vector])
        lines.append(line + (" " if trailing_space else ""))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def pets_vec(tmp_path):
    """The three-word, two-dimensional source file."""
    path = tmp_path / "pets.vec"
    path.write_text(PETS_VEC, encoding="utf-8")
    return path


@pytest.fixture
def pets_table():
    return VectorTable.from_dict({
        "cat": [1.0, 0.0],
        "dog": [0.0, 1.0],
        "fish": [1.0, 1.0],
    })


@pytest.fixture
def engine(pets_table):
    return QueryEngine(pets_table)
