"""String and byte helpers with bounded, C-library-like semantics."""

from __future__ import annotations

from collections.abc import Callable


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def trim(text: str, charset: str) -> str:
    """Remove every leading and trailing character of *text* found in *charset*."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* starting at *start*.

    A start at or past the end of the text, or a zero length, gives "".
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start >= len(text) or length == 0:
        return ""
    return text[start:start + length]


def find_bounded(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* wholly inside the first *length* characters of *haystack*.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def compare_bounded(s1: bytes | str, s2: bytes | str, n: int) -> int:
    """Compare at most *n* bytes of two strings, stopping at the first NUL.

    Text is compared as UTF-8. The result is the difference of the first
    differing bytes, the end of a string counting as a zero byte.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    a, b = _as_bytes(s1), _as_bytes(s2)
    for i in range(n):
        c1 = a[i] if i < len(a) else 0
        c2 = b[i] if i < len(b) else 0
        if c1 != c2 or c1 == 0:
            return c1 - c2
    return 0


def compare_bytes(a: bytes, b: bytes, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*, NUL bytes included.

    Raises ValueError if either buffer is shorter than *n*.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if n > len(a) or n > len(b):
        raise ValueError(f"cannot compare {n} bytes of shorter buffers")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* slots, one kept for the terminator.

    Returns the copied text and the full length of *src*.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* slots.

    Returns the resulting text and the length the full result would have
    had, with *dst* counted as at most *size*.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    dst_len = len(dst)
    result = dst
    if size > 0 and dst_len < size - 1:
        result = dst + src[:size - 1 - dst_len]
    return result, min(dst_len, size) + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for each character of *text*."""
    return "".join(func(index, char) for index, char in enumerate(text))