# src/bmpdump/cli/__init__.py
from __future__ import annotations

from .dump import main, parse_args, run

__all__ = ["main", "parse_args", "run"]
