"""Primitive run-length unpacking of strings."""

from __future__ import annotations

import re
import unicodedata

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_SLASH = "\\"


class UnpackError(ValueError):
    """Raised for a string that cannot be unpacked."""


def _is_integer(s: str) -> bool:
    return bool(_INTEGER.fullmatch(s)) and _INT64_MIN <= int(s) <= _INT64_MAX


def unpack(s: str) -> str:
    """Expand ``a4`` into ``aaaa``; a backslash makes the next character literal.

    A string that is a whole number is rejected, as is a count of zero.
    """
    if _is_integer(s):
        raise UnpackError("некорректная строка")
    parts: list[str] = []
    last = "\0"  # a digit with nothing before it repeats this
    escaped = False
    for char in s:
        if unicodedata.category(char) == "Nd" and not escaped:
            count = ord(char) - ord("0")
            if count < 1:
                raise UnpackError("некорректная строка")
            parts.append(last * (count - 1))
        else:
            escaped = char == _SLASH and last != _SLASH
            if not escaped:
                parts.append(char)
            last = char
    return "".join(parts)