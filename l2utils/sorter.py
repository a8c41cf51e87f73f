"""Sorting the lines of a text file, in the manner of ``sort``."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from functools import cmp_to_key
from pathlib import Path

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _as_integer(text: str) -> int | None:
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if _INT64_MIN <= value <= _INT64_MAX:
        return value
    return None


def _column(line: str, key: int) -> str:
    words = line.split(" ")
    if key > len(words):
        raise ValueError(f"line {line!r} has no column {key}")
    return words[key - 1]


def sort_lines(
    lines: Iterable[str],
    key: int = 0,
    numeric: bool = False,
    reverse: bool = False,
    unique: bool = False,
) -> list[str]:
    """Return the lines sorted by the space-separated column ``key``.

    Columns are counted from 1; a key below 1 means the first column.
    With ``numeric``, two columns that both read as integers compare by value;
    otherwise columns compare as text. ``unique`` drops repeated lines and
    ``reverse`` reverses the sorted result. A line lacking the column raises
    ``ValueError``.
    """
    items = list(dict.fromkeys(lines)) if unique else list(lines)
    key = max(key, 1)
    columns = {line: _column(line, key) for line in items}

    def less(first: str, second: str) -> bool:
        if numeric:
            a, b = _as_integer(first), _as_integer(second)
            if a is not None and b is not None:
                return a < b
        return first < second

    def compare(first: str, second: str) -> int:
        a, b = columns[first], columns[second]
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    items.sort(key=cmp_to_key(compare))
    if reverse:
        items.reverse()
    return items


def read_lines(path: str | Path) -> list[str]:
    """Return the file's text split at each newline."""
    return Path(path).read_text(encoding="utf-8").split("\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sort", description="The sort utility sorts text file by lines."
    )
    parser.add_argument("file", nargs="+")
    parser.add_argument("-k", "--key", type=int, default=0, help="указание колонки для сортировки")
    parser.add_argument(
        "-n", "--numeric-sort", action="store_true", help="сортировать по числовому значению"
    )
    parser.add_argument("-r", "--reverse", action="store_true", help="сортировать в обратном порядке")
    parser.add_argument("-u", "--unique", action="store_true", help="не выводить повторяющиеся строки")
    args = parser.parse_args(argv)
    try:
        lines = read_lines(args.file[0])
        result = sort_lines(lines, args.key, args.numeric_sort, args.reverse, args.unique)
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    print("\n".join(result))
    return 0