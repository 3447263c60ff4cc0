from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE = """\
; global comment
orphan = 1

[DB]
Host = localhost
port=5432
name = "my db"
junk line

[web]
url = "http://example.org/?a=b"
"""


@pytest.fixture()
def sample_text() -> str:
    return SAMPLE


@pytest.fixture()
def sample_ini(tmp_path: Path) -> Path:
    p = tmp_path / "sample.ini"
    p.write_text(SAMPLE, encoding="utf-8")
    return p
