"""Bounded text output used to render responses and settings."""

from __future__ import annotations

from datetime import datetime, timezone

from .binary import hex_string, printable


class PrintState:
    """Accumulates text up to a fixed size, as a terminated buffer would.

    With ``maxlen`` set, at most ``maxlen - 1`` characters are kept; text
    beyond that is silently dropped. ``None`` means no bound.
    """

    def __init__(self, maxlen: int | None = None) -> None:
        if maxlen is not None and maxlen < 0:
            raise ValueError(f"maxlen must not be negative, got {maxlen}")
        self.total = maxlen
        self.wrote = 0
        self._parts: list[str] = []

    @property
    def text(self) -> str:
        """Everything written so far."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.text

    def write(self, text: str) -> int:
        """Append ``text`` as far as it fits; return the number of characters kept."""
        room = self.remaining()
        if room is not None:
            text = text[:room]
        if text:
            self._parts.append(text)
            self.wrote += len(text)
        return len(text)

    def remaining(self) -> int | None:
        """Characters that can still be written, or ``None`` when unbounded."""
        if self.total is None:
            return None
        return max(self.total - 1 - self.wrote, 0)

    def label_int(self, name: str, value: int) -> int:
        """Write ``name: value`` for an integer."""
        return self.write(f"{name}: {int(value)}\n")

    def label_float(self, name: str, value: float) -> int:
        """Write ``name: value`` for a floating-point number."""
        return self.write(f"{name}: {float(value):f}\n")

    def label_bool(self, name: str, value: bool) -> int:
        """Write ``name: True`` or ``name: False``."""
        return self.write(f"{name}: {bool(value)}\n")

    def label_binary(self, name: str, value: bytes | None) -> int:
        """Write a binary value with control bytes shown as dots."""
        return self.write(f"{name}: ") + self.binary(value) + self.write("\n")

    def binary(self, data: bytes | None) -> int:
        """Write a binary value with control bytes shown as dots."""
        return self.write(printable(data))

    def label_binary_hex(self, name: str, value: bytes | None) -> int:
        """Write a binary value as lower-case hex."""
        return self.write(f"{name}: ") + self.binary_hex(value) + self.write("\n")

    def binary_hex(self, data: bytes | None) -> int:
        """Write a binary value as lower-case hex."""
        return self.write(hex_string(data))

    def raw_hex(self, value: bytes) -> int:
        """Write raw bytes as lower-case hex."""
        return self.write(bytes(value).hex())

    def label_time(self, name: str, value: int) -> int:
        """Write a Unix timestamp as a UTC date and time."""
        moment = datetime.fromtimestamp(int(value), tz=timezone.utc)
        return self.write(f"{name}: {moment.strftime('%Y-%m-%d %H:%M:%S')}\n")

    def label_string(self, name: str, value: str | None) -> int:
        """Write ``name: value`` for a string."""
        return self.write(f"{name}: {value if value is not None else ''}\n")