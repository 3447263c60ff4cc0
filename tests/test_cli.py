"""initool CLI: output, exit codes and usage errors."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pyinitool.cli import app, main


def test_get_prints_value(sample_ini: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["get", str(sample_ini), "DB", "name"]) == 0
    assert capsys.readouterr().out == "my db\n"


@pytest.mark.parametrize("cmd", ["-g", "--get"])
def test_get_aliases(sample_ini: Path, capsys: pytest.CaptureFixture[str], cmd: str) -> None:
    assert main([cmd, str(sample_ini), "db", "host"]) == 0
    assert capsys.readouterr().out == "localhost\n"


def test_set_updates_file(sample_ini: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["set", str(sample_ini), "db", "host", "example.com"]) == 0
    assert capsys.readouterr().out == "Updated [db] host = example.com\n"
    assert "Host = example.com\n" in sample_ini.read_text(encoding="utf-8")


def test_set_accepts_dash_values(sample_ini: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-s", str(sample_ini), "db", "port", "-1"]) == 0
    capsys.readouterr()
    assert main(["get", str(sample_ini), "db", "port"]) == 0
    assert capsys.readouterr().out == "-1\n"


@pytest.mark.parametrize("cmd", ["delete", "del", "-d", "--del"])
def test_delete(sample_ini: Path, capsys: pytest.CaptureFixture[str], cmd: str) -> None:
    assert main([cmd, str(sample_ini), "web", "url"]) == 0
    assert capsys.readouterr().out == "Deleted [web] url\n"
    assert "url" not in sample_ini.read_text(encoding="utf-8")


def test_missing_key(sample_ini: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["get", str(sample_ini), "db", "user"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: key not found" in captured.err


def test_missing_section_on_delete(sample_ini: Path, capsys: pytest.CaptureFixture[str]) -> None:
    before = sample_ini.read_bytes()
    assert main(["delete", str(sample_ini), "cache", "ttl"]) == 1
    assert "Error: section not found" in capsys.readouterr().err
    assert sample_ini.read_bytes() == before


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["get", str(tmp_path / "x.ini"), "a", "b"]) == 1
    assert "Error: cannot open file" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [
    [],
    ["frobnicate", "x.ini", "a", "b"],
    ["get", "x.ini", "a"],
    ["get", "x.ini", "a", "b", "c"],
    ["set", "x.ini", "a", "b"],
])
def test_usage_errors(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Usage:" in captured.err


def test_typer_app(sample_ini: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["get", str(sample_ini), "web", "url"])
    assert result.exit_code == 0
    assert result.output == "http://example.org/?a=b\n"


def test_unknown_encoding_setting(
    sample_ini: Path, capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("INITOOL_ENCODING", "no-such-codec")
    assert main(["get", str(sample_ini), "db", "host"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: unknown encoding 'no-such-codec'" in captured.err


def test_output_is_printed_verbatim(sample_ini: Path, capsys: pytest.CaptureFixture[str]) -> None:
    value = "[bold]x[/bold]\t:smile:"
    assert main(["set", str(sample_ini), "web", "tag", value]) == 0
    assert capsys.readouterr().out == f"Updated [web] tag = {value}\n"
    assert main(["get", str(sample_ini), "web", "tag"]) == 0
    assert capsys.readouterr().out == f"{value}\n"
