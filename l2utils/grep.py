"""Filtering lines that contain a pattern, in the manner of ``grep``."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass
class GrepOptions:
    """What to print around and instead of the matching lines."""

    after: int = 0
    before: int = 0
    context: int = 0
    count: bool = False
    ignore_case: bool = False
    invert: bool = False
    fixed: bool = False
    line_num: bool = False

    def __post_init__(self) -> None:
        for name in ("after", "before", "context"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")


def _marked(matches: Sequence[bool], before: int, after: int) -> list[bool]:
    shown = [False] * len(matches)
    last = len(matches) - 1
    for i, matched in enumerate(matches):
        if matched:
            for j in range(max(i - before, 0), min(i + after, last) + 1):
                shown[j] = True
    return shown


def grep(lines: Sequence[str], pattern: str, options: GrepOptions | None = None) -> str:
    """Return the selected lines concatenated as they are, newlines included.

    A line matches when it contains ``pattern``. With ``fixed`` a line must
    also equal the pattern exactly. With ``count`` only the number of
    selected lines is returned, followed by a newline.
    """
    options = options or GrepOptions()
    if options.ignore_case:
        pattern = pattern.lower()
        matches = [pattern in line.lower() for line in lines]
    else:
        matches = [pattern in line for line in lines]

    if options.fixed:
        matches = [matched and line == pattern for matched, line in zip(matches, lines)]
    if options.invert:
        matches = [not matched for matched in matches]
    if options.count:
        return f"{sum(matches)}\n"

    before, after = options.before, options.after
    if options.context > 0:
        before = after = options.context

    return "".join(
        f"{number}:{line}" if options.line_num else line
        for number, (line, shown) in enumerate(zip(lines, _marked(matches, before, after)), 1)
        if shown
    )


def _complete_lines(stream: Iterable[str]) -> list[str]:
    # A last line that has no newline is not read, as the line reader stops at end of input.
    return [line for line in stream if line.endswith("\n")]


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid non-negative value: {text!r}")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gogrep", description="gogrep - печатает строки, подходящие по шаблону"
    )
    parser.add_argument("pattern")
    parser.add_argument("files", nargs="*")
    parser.add_argument("-A", "--after", type=_non_negative, default=0, help="печатать +N строк после совпадения")
    parser.add_argument("-B", "--before", type=_non_negative, default=0, help="печатать +N строк до совпадения")
    parser.add_argument("-C", "--context", type=_non_negative, default=0, help="(A+B) печатать ±N строк вокруг совпадения")
    parser.add_argument("-c", "--count", action="store_true", help="количество строк")
    parser.add_argument("-i", "--ignore-case", action="store_true", help="игнорировать регистр")
    parser.add_argument("-v", "--invert", action="store_true", help="вместо совпадения, исключать")
    parser.add_argument("-F", "--fixed", action="store_true", help="точное совпадение со строкой, не паттерн")
    parser.add_argument("-n", "--line-num", action="store_true", help="печатать номер строки")
    args = parser.parse_args(argv)

    lines: list[str] = []
    if args.files:
        try:
            for name in args.files:
                with open(name, encoding="utf-8", newline="") as handle:
                    lines.extend(_complete_lines(handle))
        except OSError as error:
            print(error, file=sys.stderr)
            return 1
    else:
        lines = _complete_lines(sys.stdin)

    options = GrepOptions(
        after=args.after,
        before=args.before,
        context=args.context,
        count=args.count,
        ignore_case=args.ignore_case,
        invert=args.invert,
        fixed=args.fixed,
        line_num=args.line_num,
    )
    print(grep(lines, args.pattern, options), end="")
    return 0