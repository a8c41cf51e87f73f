"""Grouping dictionary words into sets of anagrams."""

from __future__ import annotations

from collections.abc import Iterable


def find_anagrams(words: Iterable[str]) -> dict[str, list[str]]:
    """Map the first word of each anagram set to the set's words, sorted.

    Words are lower-cased and kept once; sets of a single word are dropped.
    """
    groups: dict[str, dict[str, None]] = {}
    for word in words:
        lowered = word.lower()
        signature = "".join(sorted(lowered))
        groups.setdefault(signature, {})[lowered] = None
    return {
        next(iter(members)): sorted(members)
        for members in groups.values()
        if len(members) > 1
    }