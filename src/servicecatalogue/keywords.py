"""Keyword index derived from a resource list.

Words compare case-insensitively by ordinal comparison of their per-character
upper case, so a word never changes length when folded. The index keeps the
first casing seen in list order, drops blank words, and is sorted by the same
case-insensitive key. Nothing here is cached; callers derive the index from
whatever list the resource cache currently holds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from servicecatalogue.models.resource import ServiceResource


def _upper_char(char: str) -> str:
    upper = char.upper()
    # Characters whose upper case is longer than one (e.g. "ß" -> "SS") keep their own form
    return upper if len(upper) == 1 else char


def fold(word: str) -> str:
    """Case-insensitive comparison key, upper-casing one character at a time."""
    return "".join(_upper_char(char) for char in word)


def build_keyword_index(resources: Iterable[ServiceResource]) -> list[str]:
    seen: set[str] = set()
    words: list[str] = []

    for resource in resources:
        for keyword in resource.keywords or ():
            word = keyword.word
            if word is None or not word.strip():
                continue
            key = fold(word)
            if key in seen:
                continue
            seen.add(key)
            words.append(word)

    words.sort(key=fold)
    return words


def has_keyword(resource: ServiceResource, keyword: str) -> bool:
    """True if any of the resource's words equals ``keyword`` ignoring case."""
    key = fold(keyword)
    return any(
        kw.word is not None and fold(kw.word) == key for kw in resource.keywords or ()
    )
