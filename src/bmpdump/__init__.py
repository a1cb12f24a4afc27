"""bmpdump - BMP file header / DIB header decoder.

    from bmpdump import read_headers, render_report
    print(render_report(read_headers("image.bmp")))

Command line:

    bmpdump -f image.bmp [--json]
"""
from __future__ import annotations

__version__ = "0.1.0"

from .config import DumpConfig
from .cursor import ByteCursor
from .dib import DibHeader, decode_dib_header
from .errors import (
    BmpHeaderError, BmpIOError, OutOfBoundsError, TruncatedHeaderError, UnderflowError,
)
from .header import FileHeader, decode_file_header
from .reader import BmpHeaders, decode_headers, read_headers
from .report import headers_to_dict, render_report
from .tables import compression_name, magic_family

__all__ = [
    "__version__",
    "DumpConfig",
    "ByteCursor",
    "FileHeader", "decode_file_header",
    "DibHeader", "decode_dib_header",
    "BmpHeaders", "decode_headers", "read_headers",
    "render_report", "headers_to_dict",
    "magic_family", "compression_name",
    "BmpHeaderError", "BmpIOError", "OutOfBoundsError", "TruncatedHeaderError", "UnderflowError",
]
