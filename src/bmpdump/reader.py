# src/bmpdump/reader.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

from .dib import DibHeader, decode_dib_header
from .errors import BmpIOError, TruncatedHeaderError, UnderflowError
from .header import PREFIX_SIZE, FileHeader, decode_file_header

__all__ = ["BmpHeaders", "decode_headers", "read_headers"]

log = logging.getLogger(__name__)

_CHUNK = 1 << 16  # taille max d'un read(), la taille déclarée n'est pas fiable

Source = Union[str, Path, BinaryIO]


@dataclass(frozen=True)
class BmpHeaders:
    file_header: FileHeader
    dib_header_size: int
    dib_header: DibHeader


def _dib_body_len(size: int) -> int:
    if size < 4:
        raise UnderflowError(size)
    return size - 4


def decode_headers(buf: bytes) -> BmpHeaders:
    """Decode both headers from an in-memory buffer.

    Bytes past the end of the declared DIB block (palette, pixels) are ignored.
    """
    fh, size = decode_file_header(buf)
    n = _dib_body_len(size)
    body = bytes(buf[PREFIX_SIZE:PREFIX_SIZE + n])
    if len(body) != n:
        raise TruncatedHeaderError("DIB header", n, len(body))
    return BmpHeaders(fh, size, decode_dib_header(size, body))


def _read_exact(f: BinaryIO, n: int) -> bytes:
    # read() peut rendre moins que demandé sur un flux non-fichier
    chunks = []
    got = 0
    while got < n:
        b = f.read(min(n - got, _CHUNK))
        if not b:
            break
        chunks.append(b)
        got += len(b)
    return b"".join(chunks)


def _read_stream(f: BinaryIO) -> BmpHeaders:
    prefix = _read_exact(f, PREFIX_SIZE)
    fh, size = decode_file_header(prefix)
    n = _dib_body_len(size)
    body = _read_exact(f, n)
    if len(body) != n:
        raise TruncatedHeaderError("DIB header", n, len(body))
    log.debug("read %d + %d header bytes (magic=%r, dib size=%d)", PREFIX_SIZE, n, fh.magic, size)
    return BmpHeaders(fh, size, decode_dib_header(size, body))


def read_headers(source: Source) -> BmpHeaders:
    """Read and decode the file header and DIB header from `source`.

    `source` is a path or an open binary stream positioned at the start of the
    file. Exactly `18 + (dib_size - 4)` bytes are consumed. A path is opened
    and closed here; a stream is left open for the caller.
    """
    if hasattr(source, "read"):
        try:
            return _read_stream(source)  # type: ignore[arg-type]
        except OSError as e:
            raise BmpIOError(f"cannot read stream: {e}") from e

    p = Path(source)  # type: ignore[arg-type]
    log.debug("open %s", p)
    try:
        with open(p, "rb") as f:
            return _read_stream(f)
    except OSError as e:
        raise BmpIOError(f"cannot read {p}: {e}") from e
