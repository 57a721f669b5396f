"""Restore every valid dotted IPv4 address that can be formed from a digit string."""

from __future__ import annotations

_SEGMENTS = 4
_MAX_SEGMENT_LEN = 3
_MAX_SEGMENT_VALUE = 255


def is_valid_segment(segment: str) -> bool:
    """Return whether ``segment`` is a valid IPv4 octet.

    A multi-digit segment may not start with ``0`` and the value may not
    exceed 255. Raises ``ValueError`` if the segment is not a number.
    """
    if len(segment) > 1 and segment[0] == "0":
        return False
    if not segment.isdigit():
        raise ValueError(f"not a numeric segment: {segment!r}")
    return int(segment) <= _MAX_SEGMENT_VALUE


def restore_ip_addresses(s: str) -> list[str]:
    """Return all valid IPv4 addresses whose digits, in order, spell ``s``."""
    if not _SEGMENTS <= len(s) <= _SEGMENTS * _MAX_SEGMENT_LEN:
        return []

    results: list[str] = []
    current: list[str] = []

    def backtrack(start: int) -> None:
        if len(current) == _SEGMENTS:
            if start == len(s):
                results.append(".".join(current))
            return
        for length in range(1, _MAX_SEGMENT_LEN + 1):
            if start + length > len(s):
                break
            segment = s[start:start + length]
            if is_valid_segment(segment):
                current.append(segment)
                backtrack(start + length)
                current.pop()

    backtrack(0)
    return results