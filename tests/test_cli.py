from pathlib import Path

import pytest

from nitme.__main__ import EXIT_CLEAN, EXIT_DIAGNOSTICS, EXIT_UNREADABLE, main
from tests._shared_cases import in_function


def _write(directory: Path, name: str, text: str) -> Path:
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_reports_diagnostics_with_positions(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "a.go", in_function("incorrect := []int{}"))

    exit_code = main([str(path)])

    assert exit_code == EXIT_DIAGNOSTICS
    assert capsys.readouterr().out == f"{path}:4:2: incorrect empty slice declaration\n"
    assert path.read_text(encoding="utf-8") == in_function("incorrect := []int{}")


def test_cli_fix_rewrites_files_in_place(tmp_path: Path) -> None:
    path = _write(tmp_path, "pkg/a.go", in_function("incorrect := []int{}"))

    exit_code = main(["--fix", str(tmp_path)])

    assert exit_code == EXIT_DIAGNOSTICS
    assert path.read_text(encoding="utf-8") == in_function("var incorrect []int")


def test_cli_clean_directory_exits_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write(tmp_path, "a.go", in_function("var correct []int"))
    _write(tmp_path, "notes.txt", "x := []int{}\n")

    exit_code = main([str(tmp_path)])

    assert exit_code == EXIT_CLEAN
    assert capsys.readouterr().out == ""


def test_cli_reports_unreadable_paths(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main([str(tmp_path / "missing.go")])

    assert exit_code == EXIT_UNREADABLE
    assert "cannot read" in capsys.readouterr().err


def test_cli_fix_keeps_crlf_line_endings(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    original = b"package p\r\n\r\nfunc f() {\r\n\tincorrect := []int{}\r\n}\r\n"
    path = tmp_path / "crlf.go"
    path.write_bytes(original)

    exit_code = main(["--fix", str(path)])

    assert exit_code == EXIT_DIAGNOSTICS
    assert path.read_bytes() == original.replace(b"incorrect := []int{}", b"var incorrect []int")
    assert capsys.readouterr().out == f"{path}:4:2: incorrect empty slice declaration\n"
