"""Human-readable renderings of binary values."""

from __future__ import annotations

_FIRST_PRINTABLE = 32


def _limit(size: int | None) -> int | None:
    """Number of characters that fit in an output of ``size`` including a terminator."""
    if size is None:
        return None
    return max(size - 1, 0)


def printable(data: bytes | None, size: int | None = None) -> str:
    """Render ``data`` as text, replacing control bytes with dots.

    ``size`` bounds the output as a buffer would: at most ``size - 1``
    characters are produced. ``None`` means no bound.
    """
    if not data:
        return ""
    limit = _limit(size)
    chunk = bytes(data) if limit is None else bytes(data[:limit])
    return "".join(chr(b) if b >= _FIRST_PRINTABLE else "." for b in chunk)


def hex_string(data: bytes | None, size: int | None = None) -> str:
    """Render ``data`` as lower-case hex, two characters per byte.

    ``size`` bounds the output as a buffer would: only whole bytes that fit
    in ``size - 1`` characters are rendered. ``None`` means no bound.
    """
    if not data:
        return ""
    limit = _limit(size)
    chunk = bytes(data) if limit is None else bytes(data[: limit // 2])
    return chunk.hex()