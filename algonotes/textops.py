"""Basic string operations: reversal, word-order reversal, length, copy and concat."""

from __future__ import annotations

import re
from typing import MutableSequence, TypeVar

T = TypeVar("T")

_WHITESPACE = " \t\n\r"
_WORDS_AND_GAPS = re.compile(
    rf"[{re.escape(_WHITESPACE)}]+|[^{re.escape(_WHITESPACE)}]+"
)


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def reverse_chars(chars: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse ``chars`` in place by swapping from both ends; return the same sequence."""
    left, right = 0, len(chars) - 1
    while left < right:
        chars[left], chars[right] = chars[right], chars[left]
        left += 1
        right -= 1
    return chars


def reverse_words(text: str) -> str:
    """Reverse the order of words in ``text``.

    Words are runs of characters other than space, tab, newline and carriage
    return. The whitespace runs between them are mirrored along with the words,
    exactly as reversing every word and then the whole string would do.
    """
    return "".join(reversed(_WORDS_AND_GAPS.findall(text)))


def string_length(text: str) -> int:
    """Return the length of ``text`` up to, not including, the first NUL character."""
    end = text.find("\0")
    return len(text) if end < 0 else end


def _require_text(dest: str | None, src: str | None) -> tuple[str, str]:
    if dest is None or src is None:
        raise ValueError("source and destination strings are required")
    return dest, src


def copy_string(dest: str, src: str) -> str:
    """Write ``src`` over the start of ``dest`` and return the result.

    No terminator is written, so whatever of ``dest`` lies beyond the copied
    characters is kept.
    """
    dest, src = _require_text(dest, src)
    src = src[: string_length(src)]
    return src + dest[len(src):]


def concat(dest: str, src: str) -> str:
    """Append ``src`` to the terminated content of ``dest`` and return the result."""
    dest, src = _require_text(dest, src)
    return dest[: string_length(dest)] + src[: string_length(src)]