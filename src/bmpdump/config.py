# src/bmpdump/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path

__all__ = ["DEFAULT_FILE", "DumpConfig"]

DEFAULT_FILE = "image.bmp"


@dataclass(frozen=True, slots=True)
class DumpConfig:
    """
    Run configuration for one header dump, passed explicitly to `bmpdump.cli.dump.run`.

    Fields
    ------
    file : str, default="image.bmp"
        BMP file to decode. Must be non-empty.
    as_json : bool, default=False
        Print the headers as JSON instead of the text report.
    verbose : bool, default=False
        DEBUG logging.
    log_file : Path | None, default=None
        Optional log file, written in addition to stderr.

    ENV keys
    --------
    BMPDUMP_FILE      -> default for `file`
    BMPDUMP_LOG_FILE  -> default for `log_file`
    """

    file: str = DEFAULT_FILE
    as_json: bool = False
    verbose: bool = False
    log_file: Path | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.file, str) or not self.file:
            raise ValueError("DumpConfig.file must be a non-empty string")

    @staticmethod
    def from_env() -> "DumpConfig":
        log_file = os.getenv("BMPDUMP_LOG_FILE")
        return DumpConfig(
            file=os.getenv("BMPDUMP_FILE") or DEFAULT_FILE,
            log_file=Path(log_file) if log_file else None,
        )
