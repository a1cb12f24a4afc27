from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path

from .common import setup_logging
from ..config import DumpConfig
from ..errors import BmpHeaderError
from ..reader import read_headers
from ..report import headers_to_dict, render_report

def parse_args(argv=None):
    env = DumpConfig.from_env()
    p = argparse.ArgumentParser(prog="bmpdump", description="Dump BMP file headers")
    p.add_argument("-f", "--file", default=env.file, help=f"BMP file name (default: {env.file})")
    p.add_argument("--json", action="store_true", help="JSON output instead of the text report")
    p.add_argument("--log-file", default=str(env.log_file) if env.log_file else None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def run(cfg: DumpConfig) -> int:
    """Decode `cfg.file` and print its headers; returns the exit status."""
    try:
        headers = read_headers(cfg.file)
    except BmpHeaderError as e:
        logging.error("%s: %s", cfg.file, e)
        return 1
    logging.debug("decoded %s (%s)", cfg.file, headers.file_header.family)
    if cfg.as_json:
        sys.stdout.write(json.dumps(headers_to_dict(headers), indent=2) + "\n")
    else:
        sys.stdout.write(render_report(headers))
    return 0

def main(argv=None) -> int:
    args = parse_args(argv)
    log_file = Path(args.log_file) if args.log_file else None
    setup_logging(log_file, verbose=args.verbose)
    try:
        cfg = DumpConfig(file=args.file, as_json=args.json, verbose=args.verbose, log_file=log_file)
    except ValueError as e:
        logging.error("invalid arguments: %s", e)
        return 1
    return run(cfg)

if __name__ == "__main__":
    sys.exit(main())
