# src/bmpdump/dib.py
"""
DIB header decoding.

The DIB block is size-prefixed: its first u32 (read with the file header)
gives the total block length, itself included. The decoder receives the
`size - 4` body bytes and consumes exactly that many.

Supported layouts, chosen from the declared size
-------------------------------------------------
- 4   : empty body, every field stays at zero
- 12  : BITMAPCOREHEADER (OS/2 1.x) -> width u16, height u16, planes u16, bpp u16
- >=40: BITMAPINFOHEADER and its extensions (V2/V3 52/56, OS/2 v2 64, V4 108,
        V5 124). The 36-byte core below is decoded; anything after it is kept
        as opaque `extra` bytes (masks, color space, ICC info are not parsed).

Core layout (body offsets)
    0   width                   i32 (negative height => top-down rows)
    4   height                  i32
    8   color_planes            u16
    10  bits_per_pixel          u16
    12  compression             u32
    16  image_size              u32
    20  horizontal_resolution   u32
    24  vertical_resolution     u32
    28  palette_color_count     u32
    32  important_color_count   u32

Any other declared size leaves fewer than 36 body bytes and is rejected.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .cursor import ByteCursor
from .errors import TruncatedHeaderError, UnderflowError
from .tables import compression_name

__all__ = [
    "CORE_HEADER_SIZE", "INFO_HEADER_SIZE", "INFO_BODY_SIZE",
    "DibHeader", "decode_dib_header",
]

SIZE_FIELD = 4
CORE_HEADER_SIZE = 12
INFO_HEADER_SIZE = 40
INFO_BODY_SIZE = INFO_HEADER_SIZE - SIZE_FIELD  # = 36 bytes


@dataclass(frozen=True)
class DibHeader:
    header_size: int
    width: int = 0
    height: int = 0
    color_planes: int = 0
    bits_per_pixel: int = 0
    compression: int = 0
    image_size: int = 0
    horizontal_resolution: int = 0
    vertical_resolution: int = 0
    palette_color_count: int = 0
    important_color_count: int = 0
    extra: bytes = field(default=b"", repr=False)

    @property
    def compression_name(self) -> str:
        return compression_name(self.compression)

    @property
    def top_down(self) -> bool:
        # hauteur négative => lignes stockées de haut en bas
        return self.height < 0


def decode_dib_header(size: int, body: bytes) -> DibHeader:
    """Decode the DIB body (`size - 4` bytes) declared by `size`.

    Raises `UnderflowError` when `size < 4` and `TruncatedHeaderError` when
    `body` does not hold exactly `size - 4` bytes or when the declared size is
    too small for the core layout.
    """
    size = int(size)
    if size < SIZE_FIELD:
        raise UnderflowError(size)
    remaining = size - SIZE_FIELD
    if len(body) != remaining:
        raise TruncatedHeaderError("DIB header", remaining, len(body))

    if remaining == 0:
        return DibHeader(header_size=size)

    cur = ByteCursor(body)
    if size == CORE_HEADER_SIZE:
        return DibHeader(
            header_size=size,
            width=cur.u16(),
            height=cur.u16(),
            color_planes=cur.u16(),
            bits_per_pixel=cur.u16(),
        )

    if remaining < INFO_BODY_SIZE:
        raise TruncatedHeaderError(
            "DIB header", INFO_BODY_SIZE, remaining,
            reason=f"unsupported DIB header size {size}: layouts are 4, 12 or >= {INFO_HEADER_SIZE} bytes",
        )

    h = DibHeader(
        header_size=size,
        width=cur.i32(),
        height=cur.i32(),
        color_planes=cur.u16(),
        bits_per_pixel=cur.u16(),
        compression=cur.u32(),
        image_size=cur.u32(),
        horizontal_resolution=cur.u32(),
        vertical_resolution=cur.u32(),
        palette_color_count=cur.u32(),
        important_color_count=cur.u32(),
        extra=cur.take(cur.remaining()),
    )
    return h
