# src/bmpdump/report.py
from __future__ import annotations
from typing import Any, Dict, List

from .reader import BmpHeaders

__all__ = ["render_report", "headers_to_dict"]


def render_report(h: BmpHeaders) -> str:
    """Two-section text report, one field per line.

    Integers are decimal except the pixel data offset, printed as `0x..` hex.
    """
    fh, dib = h.file_header, h.dib_header
    lines: List[str] = [
        "",
        "|\tBMP header\t|",
        f"Image type: {fh.family}",
        f"Image size: {fh.file_size}",
        f"Reserved bytes: {fh.reserved}",
        f"Image offset: 0x{fh.pixel_data_offset:X}",
        "",
        "|\tDIB header\t|",
        f"DIB header size: {h.dib_header_size}",
        f"Image width: {dib.width}",
        f"Image height: {dib.height}",
        f"Color planes count: {dib.color_planes}",
        f"Color depth: {dib.bits_per_pixel}",
        f"Compression method: {dib.compression_name}",
        f"Image size: {dib.image_size}",
        f"Horizontal resolution: {dib.horizontal_resolution}",
        f"Vertical resolution: {dib.vertical_resolution}",
        f"Color count: {dib.palette_color_count}",
        f"Important color count: {dib.important_color_count}",
        "",
    ]
    return "\n".join(lines) + "\n"


def headers_to_dict(h: BmpHeaders) -> Dict[str, Any]:
    fh, dib = h.file_header, h.dib_header
    return {
        "bmp_header": {
            "magic": fh.magic.decode("latin-1"),
            "type": fh.family,
            "file_size": int(fh.file_size),
            "reserved": int(fh.reserved),
            "pixel_data_offset": int(fh.pixel_data_offset),
        },
        "dib_header": {
            "size": int(h.dib_header_size),
            "width": int(dib.width),
            "height": int(dib.height),
            "top_down": dib.top_down,
            "color_planes": int(dib.color_planes),
            "bits_per_pixel": int(dib.bits_per_pixel),
            "compression": int(dib.compression),
            "compression_method": dib.compression_name,
            "image_size": int(dib.image_size),
            "horizontal_resolution": int(dib.horizontal_resolution),
            "vertical_resolution": int(dib.vertical_resolution),
            "color_count": int(dib.palette_color_count),
            "important_color_count": int(dib.important_color_count),
            "extra_bytes": len(dib.extra),
        },
    }
