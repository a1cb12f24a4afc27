# src/bmpdump/header.py
"""
BMP file header (14 bytes, little-endian) followed by the DIB size field.

    offset  size  field
    0       2     magic              "BM", "BA", "CI", "CP", "IC", "PT"
    2       4     file_size          u32
    6       4     reserved           u32 (two reserved u16 read as one)
    10      4     pixel_data_offset  u32
    14      4     dib_header_size    u32, counts its own 4 bytes

The first 18 bytes are decoded together: the DIB size tells the reader how
many more bytes it has to pull from the source.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .cursor import ByteCursor
from .errors import TruncatedHeaderError
from .tables import MAGIC_FAMILIES, magic_family

__all__ = ["FILE_HEADER_SIZE", "DIB_SIZE_FIELD", "PREFIX_SIZE", "FileHeader", "decode_file_header"]

FILE_HEADER_SIZE = 14
DIB_SIZE_FIELD = 4
PREFIX_SIZE = FILE_HEADER_SIZE + DIB_SIZE_FIELD  # = 18 bytes


@dataclass(frozen=True)
class FileHeader:
    magic: bytes
    family: str
    file_size: int
    reserved: int
    pixel_data_offset: int

    @property
    def recognized(self) -> bool:
        return self.magic in MAGIC_FAMILIES


def decode_file_header(buf: bytes) -> Tuple[FileHeader, int]:
    """Decode the 14-byte file header and the DIB size that follows it.

    Returns `(FileHeader, dib_header_size)`. Only the first 18 bytes of `buf`
    are looked at. Raises `TruncatedHeaderError` when fewer are available; an
    unknown magic is not an error.
    """
    if len(buf) < PREFIX_SIZE:
        raise TruncatedHeaderError("BMP header", PREFIX_SIZE, len(buf))
    cur = ByteCursor(buf)
    magic = cur.take(2)
    file_size = cur.u32()
    reserved = cur.u32()
    pixel_data_offset = cur.u32()
    dib_header_size = cur.u32()
    h = FileHeader(
        magic=magic,
        family=magic_family(magic),
        file_size=file_size,
        reserved=reserved,
        pixel_data_offset=pixel_data_offset,
    )
    return h, dib_header_size
