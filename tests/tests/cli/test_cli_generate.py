#!/usr/bin/env python3
import json
from pathlib import Path

import pytest

import pcgen.core.config as cfg
from pcgen.cli.__main__ import main


# --- Helpers --- #

def _write_capi(path: Path, **header) -> Path:
    payload = {
        "header": {"name": "foo", **header},
        "pkg_config": {"name": "foo", "description": "Foo library", "version": "0.1"},
        "library": {"name": "foo", "version": "0.1.0"},
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "no-global.json", raising=False)
    monkeypatch.chdir(tmp_path)
    for name in ("PCGEN_PREFIX", "PCGEN_OUTPUT_DIR", "PCGEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# --- generate --- #

def test_generate_writes_pc_file(tmp_path: Path, capsys):
    capi = _write_capi(tmp_path / "capi.json")
    out_dir = tmp_path / "out"

    rc = main(["generate", str(capi), "--prefix", "/opt/foo", "--output-dir", str(out_dir)])

    assert rc == 0
    text = (out_dir / "foo.pc").read_text(encoding="utf-8")
    assert text.startswith("prefix=/opt/foo\nexec_prefix=${prefix}\nlibdir=${exec_prefix}/lib\n")
    assert "Cflags: -I${includedir}/foo\n" in text
    assert "Generated capi.json" in capsys.readouterr().out


def test_generate_stdout_with_flags(tmp_path: Path, capsys):
    capi = _write_capi(tmp_path / "capi.json", subdirectory=False)

    rc = main([
        "generate", str(capi), "--stdout",
        "--libdir", "lib64",
        "--description", "Overridden",
        "--lib=-lbar", "--cflag=-DFOO", "--lib-private=-lm",
        "--requires", "zlib", "--requires", "libpng",
        "--requires-private", "libffi",
        "--conflicts", "foo-legacy",
    ])

    assert rc == 0
    assert capsys.readouterr().out == (
        "prefix=/usr/local\n"
        "exec_prefix=${prefix}\n"
        "libdir=/usr/local/lib64\n"
        "includedir=${prefix}/include\n"
        "\n"
        "Name: foo\n"
        "Description: Overridden\n"
        "Version: 0.1\n"
        "Libs: -L${libdir} -lfoo -lbar\n"
        "Cflags: -I${includedir} -DFOO\n"
        "Libs.private: -lm\n"
        "Requires: zlib, libpng\n"
        "Requires.private: libffi\n"
        "Conflicts: foo-legacy\n"
    )
    assert not (tmp_path / "foo.pc").exists()


def test_generate_uses_project_config_defaults(tmp_path: Path):
    (tmp_path / "pcgen.json").write_text(
        json.dumps({"prefix": "/from/config", "output_dir": "pkgconfig"}), encoding="utf-8"
    )
    capi = _write_capi(tmp_path / "capi.json")

    assert main(["generate", str(capi)]) == 0
    text = (tmp_path / "pkgconfig" / "foo.pc").read_text(encoding="utf-8")
    assert text.startswith("prefix=/from/config\n")


def test_generate_name_option_selects_header_subdirectory(tmp_path: Path, capsys):
    capi = _write_capi(tmp_path / "capi.json")
    assert main(["generate", str(capi), "--stdout", "--name", "foo-2"]) == 0
    assert "Cflags: -I${includedir}/foo-2\n" in capsys.readouterr().out


def test_generate_invalid_capi_reports_field_errors(tmp_path: Path, capsys):
    p = tmp_path / "capi.json"
    p.write_text(json.dumps({"header": {"name": "foo"}, "pkg_config": {"name": "foo", "version": "1"}}),
                 encoding="utf-8")

    assert main(["generate", str(p), "--stdout"]) == 1
    out = capsys.readouterr().out
    assert "Invalid C-API config capi.json:" in out
    assert "  - library: Field required" in out


def test_generate_missing_file_returns_error(tmp_path: Path, capsys):
    assert main(["generate", str(tmp_path / "nope.yaml")]) == 1
    assert "does not exist" in capsys.readouterr().out


# --- config / top-level --- #

def test_config_show_prints_effective_config(capsys):
    assert main(["config", "show"]) == 0
    shown = json.loads(capsys.readouterr().out)
    assert shown["prefix"] == "/usr/local"
    assert shown["logging"]["level"] == "INFO"


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: pcgen" in capsys.readouterr().out


def test_invalid_log_level_in_config_fails(monkeypatch: pytest.MonkeyPatch, capsys):
    monkeypatch.setenv("PCGEN_LOG_LEVEL", "chatty")
    assert main(["config", "show"]) == 1
    assert "Invalid log level" in capsys.readouterr().out
