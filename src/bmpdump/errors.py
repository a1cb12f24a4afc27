# src/bmpdump/errors.py
from __future__ import annotations

__all__ = [
    "BmpHeaderError",
    "OutOfBoundsError",
    "TruncatedHeaderError",
    "UnderflowError",
    "BmpIOError",
]


class BmpHeaderError(ValueError):
    """Base class for every failure raised while decoding BMP headers."""


class OutOfBoundsError(BmpHeaderError):
    """A cursor read asked for more bytes than the buffer still holds."""


class TruncatedHeaderError(OutOfBoundsError):
    """A header section is shorter than the decode step requires.

    `section` names the header ("BMP header" or "DIB header"), `needed` and
    `got` are byte counts.
    """

    def __init__(self, section: str, needed: int, got: int, reason: str | None = None) -> None:
        self.section = section
        self.needed = int(needed)
        self.got = int(got)
        super().__init__(reason or f"{section} truncated: need {self.needed} bytes, got {self.got}")


class UnderflowError(BmpHeaderError):
    """Declared DIB header size is smaller than its own 4-byte size field."""

    def __init__(self, size: int) -> None:
        self.size = int(size)
        super().__init__(f"DIB header size {self.size} is smaller than 4")


class BmpIOError(BmpHeaderError):
    """The byte source could not be opened or read (chained from the OSError)."""
