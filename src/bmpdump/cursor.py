# src/bmpdump/cursor.py
from __future__ import annotations
import struct

from .errors import OutOfBoundsError

__all__ = ["ByteCursor"]

_LE = "<"  # little-endian


class ByteCursor:
    """Forward-only little-endian reader over a fixed buffer.

    Every read advances the position by the width of the field. A read that
    would run past the end raises `OutOfBoundsError` and leaves the position
    where it was.
    """

    __slots__ = ("buf", "pos")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(data)
        self.pos = 0

    def __len__(self) -> int:
        return len(self.buf)

    def tell(self) -> int: return self.pos
    def remaining(self) -> int: return len(self.buf) - self.pos

    def _need(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"negative read size: {n}")
        if self.pos + n > len(self.buf):
            raise OutOfBoundsError(f"need {n} bytes at offset {self.pos}, {self.remaining()} left")

    def take(self, n: int) -> bytes:
        self._need(n)
        out = self.buf[self.pos:self.pos + n].tobytes()
        self.pos += n
        return out

    def _unpack(self, fmt: str) -> int:
        n = struct.calcsize(fmt)
        self._need(n)
        (v,) = struct.unpack_from(_LE + fmt, self.buf, self.pos)
        self.pos += n
        return int(v)

    def u8(self) -> int:  return self._unpack("B")
    def u16(self) -> int: return self._unpack("H")
    def u32(self) -> int: return self._unpack("I")
    def i32(self) -> int: return self._unpack("i")
