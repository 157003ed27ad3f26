"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from portbin import Record, encode_record
from portbin.cli.layout import analyze_file
from portbin.cli.main import main


def run_cli(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "portbin.cli.main", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "portbin: Portable Binary Records" in result.stdout
    assert "demo" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert "portbin 0.1.0" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = run_cli()
    assert result.returncode == 0
    assert "portbin: Portable Binary Records" in result.stdout


def test_cli_demo(tmp_path: Path) -> None:
    """Test the demo writes data.bin and prints the record read back."""
    result = run_cli("demo", cwd=tmp_path)

    assert result.returncode == 0
    assert result.stdout.strip() == "Read id: 123, value: 456.789001"
    assert (tmp_path / "data.bin").read_bytes() == bytes.fromhex("0000007b43e464fe")


def test_cli_demo_custom_values(tmp_path: Path) -> None:
    """Test demo options."""
    path = tmp_path / "custom.bin"
    result = run_cli("demo", "--path", str(path), "--id", "-7", "--value", "-1.5")

    assert result.returncode == 0
    assert result.stdout.strip() == "Read id: -7, value: -1.500000"
    assert path.read_bytes() == b"\xff\xff\xff\xf9\xbf\xc0\x00\x00"


def test_cli_demo_logging(tmp_path: Path) -> None:
    """Test diagnostics go to stderr, not stdout."""
    result = run_cli("--log-level", "info", "demo", cwd=tmp_path)

    assert result.returncode == 0
    assert "Writing record id=123" in result.stderr
    assert "Writing" not in result.stdout


def test_demo_id_out_of_range(tmp_path: Path, capsys) -> None:
    """Test invalid demo ids fail cleanly."""
    code = main(["demo", "--path", str(tmp_path / "x.bin"), "--id", str(1 << 31)])

    assert code == 1
    assert "record_id" in capsys.readouterr().err


def test_dump(tmp_path: Path, capsys) -> None:
    """Test dumping a file of records."""
    path = tmp_path / "records.bin"
    path.write_bytes(
        encode_record(Record(id=1, value=1.0)) + encode_record(Record(id=2, value=-2.5))
    )

    assert main(["dump", str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert "000000013f800000" in lines[0]
    assert "id=1" in lines[0]
    assert "00000002c0200000" in lines[1]


def test_dump_truncated(tmp_path: Path, capsys) -> None:
    """Test a truncated file is reported, not zero-filled."""
    path = tmp_path / "short.bin"
    path.write_bytes(b"\x00\x00\x00\x7b\x43")

    assert main(["dump", str(path)]) == 1
    assert "Truncated input" in capsys.readouterr().err


def test_dump_missing_file(tmp_path: Path, capsys) -> None:
    """Test I/O errors are reported."""
    assert main(["dump", str(tmp_path / "missing.bin")]) == 1
    assert "Error" in capsys.readouterr().err


def test_layout(capsys) -> None:
    """Test the sample record layout."""
    assert main(["layout"]) == 0

    out = capsys.readouterr().out
    assert "Record" in out
    assert "Size: 8 bytes" in out
    assert "int32" in out and "float32" in out


def test_layout_file(tmp_path: Path, capsys) -> None:
    """Test layouts of records defined in a user file."""
    source = tmp_path / "records.py"
    source.write_text(
        "from portbin import BaseRecord, Float32, Int32\n"
        "\n"
        "class Position(BaseRecord):\n"
        "    node: Int32\n"
        "    lat: Float32\n"
        "    lon: Float32\n",
        encoding="utf-8",
    )

    classes = analyze_file(source)

    assert [cls.__name__ for cls in classes] == ["Position"]
    out = capsys.readouterr().out
    assert "1 record loaded." in out
    assert "Size: 12 bytes" in out


def test_layout_missing_file(tmp_path: Path, capsys) -> None:
    """Test layout with a missing file."""
    assert main(["layout", str(tmp_path / "nonexistent.py")]) == 1
    assert "not found" in capsys.readouterr().err
