"""Classic string puzzles: FizzBuzz, longest palindrome, longest unique-character run."""

from __future__ import annotations

_START = object()
_END = object()
_SEP = object()


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz sequence for 1..n."""
    if n < 0:
        raise ValueError("n must not be negative")
    result = []
    for i in range(1, n + 1):
        if i % 15 == 0:
            result.append("FizzBuzz")
        elif i % 3 == 0:
            result.append("Fizz")
        elif i % 5 == 0:
            result.append("Buzz")
        else:
            result.append(str(i))
    return result


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s`` (leftmost on ties).

    Uses Manacher's algorithm on ``s`` with separators between characters.
    """
    padded: list[object] = [_START, _SEP]
    for ch in s:
        padded.extend((ch, _SEP))
    padded.append(_END)

    radii = [0] * len(padded)
    center = right = 0
    for i in range(1, len(padded) - 1):
        radius = min(right - i, radii[2 * center - i]) if right > i else 0
        while padded[i + 1 + radius] == padded[i - 1 - radius]:
            radius += 1
        radii[i] = radius
        if i + radius > right:
            center, right = i, i + radius

    max_len = max(radii)
    center_index = radii.index(max_len)
    start = (center_index - max_len) // 2
    return s[start:start + max_len]


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring of ``s`` without repeated characters."""
    last_seen: dict[str, int] = {}
    best = 0
    left = 0
    for right, ch in enumerate(s):
        previous = last_seen.get(ch, -1)
        if previous >= left:
            left = previous + 1
        last_seen[ch] = right
        best = max(best, right - left + 1)
    return best