"""Picking one field out of each input line, in the manner of ``cut``."""

from __future__ import annotations

import argparse
import sys


def cut(text: str, delimiter: str = "\t", field: int = 0, separated: bool = False) -> str:
    """Return the field at index ``field`` (from 0), or an empty string.

    With a space delimiter, runs of whitespace count as one delimiter. With
    ``separated``, a line without the delimiter gives an empty string.
    """
    if field < 0:
        raise ValueError("field must not be negative")
    if delimiter == " ":
        text = " ".join(text.split())
    if separated and delimiter not in text:
        return ""
    parts = text.split(delimiter) if delimiter else list(text)
    if len(parts) > field:
        return parts[field]
    return ""


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid non-negative value: {text!r}")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cut",
        description="принимает строки через STDIN, разбивает по разделителю (TAB) на колонки и выводит запрошенные",
    )
    parser.add_argument("-f", "--fields", type=_non_negative, default=0, help="выбрать поля (колонки). 0 по умолчанию")
    parser.add_argument("-d", "--delimiter", default="\t", help="использовать другой разделитель")
    parser.add_argument("-s", "--separated", action="store_true", help="только строки c разделителем")
    args = parser.parse_args(argv)
    for line in sys.stdin:
        # A last line without a newline is not read.
        if not line.endswith("\n"):
            break
        print(cut(line[:-1], args.delimiter, args.fields, args.separated))
    return 0