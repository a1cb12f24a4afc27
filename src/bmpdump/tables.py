# src/bmpdump/tables.py
from __future__ import annotations

__all__ = [
    "MAGIC_FAMILIES", "UNRECOGNIZED_TYPE", "magic_family",
    "COMPRESSION_METHODS", "UNRECOGNIZED_COMPRESSION", "compression_name",
]

# Familles connues (2 premiers octets du fichier)
MAGIC_FAMILIES: dict[bytes, str] = {
    b"BM": "Bitmap Windows 3.1x/95/NT",
    b"BA": "OS/2 bitmap array",
    b"CI": "OS/2 color icon",
    b"CP": "OS/2 const color pointer",
    b"IC": "OS/2 icon",
    b"PT": "OS/2 pointer",
}
UNRECOGNIZED_TYPE = "Unrecognized type"

# biCompression, codes 0..9
COMPRESSION_METHODS: dict[int, str] = {
    0: "BI_RGB",
    1: "BI_RLE8",
    2: "BI_RLE4",
    3: "BI_BITFIELDS",
    4: "BI_JPEG",
    5: "BI_PNG",
    6: "BI_ALPHABITFIELDS",
    7: "BI_CMYK",
    8: "BI_CMYKRLE8",
    9: "BI_CMYKRLE4",
}
UNRECOGNIZED_COMPRESSION = "Unrecognized compression method"


def magic_family(tag: bytes) -> str:
    """Family name for a 2-byte magic tag; total, never raises."""
    return MAGIC_FAMILIES.get(bytes(tag), UNRECOGNIZED_TYPE)


def compression_name(code: int) -> str:
    """Symbolic name for a compression code; total, never raises."""
    return COMPRESSION_METHODS.get(int(code), UNRECOGNIZED_COMPRESSION)
