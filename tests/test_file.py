"""IniFile: every mutation is flushed to disk right away."""

from pathlib import Path

import pytest

from pyinitool import FileAccessError, IniFile, NotFoundError


def test_get_for_every_key_in_source(sample_ini: Path) -> None:
    ini = IniFile(sample_ini, "utf-8")
    assert ini.get("db", "host") == "localhost"
    assert ini.get("db", "port") == "5432"
    assert ini.get("db", "name") == "my db"
    assert ini.get("web", "url") == "http://example.org/?a=b"


def test_set_is_written_immediately(sample_ini: Path) -> None:
    IniFile(sample_ini, "utf-8").set("DB", "Host", "db.internal")
    assert IniFile(sample_ini, "utf-8").get("db", "host") == "db.internal"
    assert "Host = db.internal\n" in sample_ini.read_text(encoding="utf-8")


def test_set_new_section_appends_to_file(sample_ini: Path, sample_text: str) -> None:
    IniFile(sample_ini, "utf-8").set("new", "k", "has space")
    assert sample_ini.read_text(encoding="utf-8") == (
        sample_text + '\n[new]\nk = "has space"\n')
    assert IniFile(sample_ini, "utf-8").get("NEW", "K") == "has space"


def test_delete_is_written_immediately(sample_ini: Path) -> None:
    IniFile(sample_ini, "utf-8").delete("db", "port")
    text = sample_ini.read_text(encoding="utf-8")
    assert "port" not in text
    assert "[DB]\nHost = localhost\nname" in text


def test_failed_delete_does_not_touch_file(sample_ini: Path) -> None:
    before = sample_ini.read_bytes()
    ini = IniFile(sample_ini, "utf-8")
    with pytest.raises(NotFoundError, match="section not found"):
        ini.delete("nope", "host")
    with pytest.raises(NotFoundError, match="key not found"):
        ini.delete("db", "nope")
    assert sample_ini.read_bytes() == before


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError):
        IniFile(tmp_path / "missing.ini")


def test_path_and_document(sample_ini: Path) -> None:
    ini = IniFile(sample_ini)
    assert ini.path == str(sample_ini)
    assert "db" in ini.document
