"""Helpers for the ``Common Name (Scientific name)`` species label format."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wingdex.domain.model import SpeciesRecord

_WORD_SEPARATORS = re.compile(r"[\s\-()]+")
_CODE_WORD_SEPARATORS = re.compile(r"[\s\-]+")


def display_name(label: str) -> str:
    """Extract the common name from ``Northern Cardinal (Cardinalis cardinalis)``."""

    return label.partition("(")[0].strip()


def scientific_name(label: str) -> str | None:
    """Extract the parenthesised scientific name, if any.

    A missing closing parenthesis is tolerated: AI output is sometimes truncated.
    """

    _, separator, tail = label.partition("(")
    if not separator:
        return None
    inner = tail.partition(")")[0].strip()
    return inner or None


def format_species_label(record: SpeciesRecord) -> str:
    return record.label


def tokenize(text: str) -> tuple[str, ...]:
    """Lower-cased words of ``text``, split on whitespace, hyphens and parentheses."""

    return tuple(word for word in _WORD_SEPARATORS.split(text.lower()) if word)


def derive_reference_code(common_name: str) -> str:
    """Build a banding-style species code from a common name.

    1 word: first six letters. 2 words: 3 + 3. 3 words: 2 + 1 + 3. Longer names take the
    initials of the leading words and the start of the last word, six or seven letters in total.
    """

    words = [word for word in _CODE_WORD_SEPARATORS.split(common_name.replace("'", "")) if word]
    count = len(words)
    if count == 0:
        return ""
    if count == 1:
        code = words[0][:6]
    elif count == 2:
        code = words[0][:3] + words[1][:3]
    elif count == 3:
        code = words[0][:2] + words[1][:1] + words[2][:3]
    else:
        chars_from_last = max(1, 7 - count)
        prefix_chars = 6 - chars_from_last
        initials = "".join(word[0] for word in words[:-1])
        code = initials[:prefix_chars] + words[-1][:chars_from_last]
    return code.lower()


__all__ = [
    "derive_reference_code",
    "display_name",
    "format_species_label",
    "scientific_name",
    "tokenize",
]
