from __future__ import annotations
import json

import pytest

from bmpdump.cli.dump import main, parse_args, run
from bmpdump.config import DEFAULT_FILE, DumpConfig


def test_parse_args_default_file(monkeypatch):
    monkeypatch.delenv("BMPDUMP_FILE", raising=False)
    args = parse_args([])
    assert args.file == DEFAULT_FILE == "image.bmp"
    assert not args.json


def test_parse_args_env_default(monkeypatch):
    monkeypatch.setenv("BMPDUMP_FILE", "other.bmp")
    assert parse_args([]).file == "other.bmp"
    assert parse_args(["--file", "x.bmp"]).file == "x.bmp"


def test_main_prints_report(tmp_path, bmp_bytes, capsys):
    p = tmp_path / "a.bmp"
    p.write_bytes(bmp_bytes())
    rc = main(["-f", str(p)])
    out = capsys.readouterr().out
    assert rc == 0
    assert "|\tBMP header\t|" in out and "|\tDIB header\t|" in out
    assert "Image offset: 0x36" in out


def test_main_json(tmp_path, bmp_bytes, capsys):
    p = tmp_path / "a.bmp"
    p.write_bytes(bmp_bytes(width=9))
    assert main(["--file", str(p), "--json"]) == 0
    d = json.loads(capsys.readouterr().out)
    assert d["dib_header"]["width"] == 9


def test_main_missing_file(tmp_path, capsys):
    rc = main(["-f", str(tmp_path / "missing.bmp")])
    cap = capsys.readouterr()
    assert rc == 1
    assert cap.out == ""
    assert "missing.bmp" in cap.err


def test_main_truncated_file_prints_no_partial_report(tmp_path, bmp_bytes, capsys):
    p = tmp_path / "short.bmp"
    p.write_bytes(bmp_bytes()[:30])
    rc = main(["-f", str(p)])
    cap = capsys.readouterr()
    assert rc == 1
    assert cap.out == ""
    assert "DIB header truncated" in cap.err


def test_main_log_file(tmp_path, bmp_bytes):
    p = tmp_path / "a.bmp"
    p.write_bytes(bmp_bytes())
    log = tmp_path / "logs" / "run.log"
    assert main(["-f", str(p), "--log-file", str(log), "--verbose"]) == 0
    assert "decoded" in log.read_text(encoding="utf-8")


def test_run_with_config(tmp_path, bmp_bytes, capsys):
    p = tmp_path / "a.bmp"
    p.write_bytes(bmp_bytes(dib_size=3))
    assert run(DumpConfig(file=str(p))) == 1
    assert capsys.readouterr().out == ""


def test_config_validation_and_env(monkeypatch, tmp_path):
    with pytest.raises(ValueError):
        DumpConfig(file="")
    monkeypatch.setenv("BMPDUMP_FILE", "z.bmp")
    monkeypatch.setenv("BMPDUMP_LOG_FILE", str(tmp_path / "l.log"))
    cfg = DumpConfig.from_env()
    assert cfg.file == "z.bmp"
    assert cfg.log_file == tmp_path / "l.log"
    monkeypatch.delenv("BMPDUMP_FILE")
    monkeypatch.delenv("BMPDUMP_LOG_FILE")
    assert DumpConfig.from_env() == DumpConfig()


def test_main_huge_dib_size_exits_1(tmp_path, bmp_bytes, capsys):
    p = tmp_path / "huge.bmp"
    p.write_bytes(bmp_bytes(dib_size=0xFFFFFFFF)[:18])
    rc = main(["-f", str(p)])
    cap = capsys.readouterr()
    assert rc == 1
    assert cap.out == ""
    assert "DIB header truncated" in cap.err


def test_main_empty_file_name_exits_1(capsys):
    rc = main(["-f", ""])
    cap = capsys.readouterr()
    assert rc == 1
    assert cap.out == ""
    assert "non-empty" in cap.err
