"""Locate the first occurrence of a byte string inside another."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

_SHORT_NEEDLE = 4


def _as_bytes(value: BytesLike, name: str) -> bytes:
    if isinstance(value, str):
        raise TypeError(f"{name} must be bytes-like, not str")
    try:
        return bytes(memoryview(value))
    except TypeError:
        raise TypeError(f"{name} must be bytes-like, not {type(value).__name__}") from None


def _maximal_suffix(needle: bytes, reverse: bool) -> tuple[int, int]:
    """Return (end index of the left part, period) for the critical factorisation."""
    length = len(needle)
    ip, jp, k, p = -1, 0, 1, 1
    while jp + k < length:
        a, b = needle[ip + k], needle[jp + k]
        if a == b:
            if k == p:
                jp += p
                k = 1
            else:
                k += 1
        elif (a < b) if reverse else (a > b):
            jp += k
            k = 1
            p = jp - ip
        else:
            ip = jp
            jp += 1
            k = p = 1
    return ip, p


def _two_way(haystack: bytes, start: int, needle: bytes) -> Optional[int]:
    length = len(needle)
    end = len(haystack)
    byteset = set(needle)
    shift = {byte: i + 1 for i, byte in enumerate(needle)}

    ms, p0 = _maximal_suffix(needle, reverse=False)
    ip, p = _maximal_suffix(needle, reverse=True)
    if ip > ms:
        ms = ip
    else:
        p = p0

    if needle[: ms + 1] != needle[p : p + ms + 1]:
        mem0 = 0
        p = max(ms, length - ms - 1) + 1
    else:
        mem0 = length - p
    mem = 0

    pos = start
    while end - pos >= length:
        last = haystack[pos + length - 1]
        if last in byteset:
            k = length - shift[last]
            if k:
                if mem0 and mem and k < p:
                    k = length - p
                pos += k
                mem = 0
                continue
        else:
            pos += length
            mem = 0
            continue

        k = max(ms + 1, mem)
        while k < length and needle[k] == haystack[pos + k]:
            k += 1
        if k < length:
            pos += k - ms
            mem = 0
            continue

        k = ms + 1
        while k > mem and needle[k - 1] == haystack[pos + k - 1]:
            k -= 1
        if k <= mem:
            return pos
        pos += p
        mem = mem0
    return None


def memmem(haystack: BytesLike, needle: BytesLike) -> Optional[int]:
    """Return the offset of the first occurrence of needle in haystack, or None.

    An empty needle matches at offset 0.
    """
    hay = _as_bytes(haystack, "haystack")
    pattern = _as_bytes(needle, "needle")

    if not pattern:
        return 0
    if len(hay) < len(pattern):
        return None

    first = hay.find(pattern[0])
    if first < 0:
        return None
    if len(pattern) == 1:
        return first
    if len(pattern) <= _SHORT_NEEDLE:
        found = hay.find(pattern, first)
        return found if found >= 0 else None
    return _two_way(hay, first, pattern)