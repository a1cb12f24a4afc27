from __future__ import annotations
import struct

import pytest


def _bmp_bytes(magic=b"BM", file_size=0x36, reserved=0, offset=0x36, dib_size=40,
               width=2, height=2, planes=1, bpp=24, compression=0, image_size=0,
               xres=0, yres=0, colors=0, important=0, extra=b"") -> bytes:
    """En-tête BMP synthétique (14 + 40 octets par défaut)."""
    head = magic + struct.pack("<III", file_size, reserved, offset) + struct.pack("<I", dib_size)
    body = struct.pack("<iiHHIIIIII", width, height, planes, bpp, compression,
                       image_size, xres, yres, colors, important)
    return head + body + extra


@pytest.fixture
def bmp_bytes():
    return _bmp_bytes
