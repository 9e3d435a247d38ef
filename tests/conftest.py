"""Shared pytest fixtures."""

from pathlib import Path

import pytest

MONTHS_TGF = """\
1 January
2 March
3 April
4 May
5 December
6 June
7 September
#
1 2
3 2
4 3
5 1 Happy New Year!
5 3 April Fools Day
6 3
6 1
7 5
7 6
7 1"""


@pytest.fixture
def months_tgf() -> str:
    """Seven months linked by holidays, as TGF text."""
    return MONTHS_TGF


@pytest.fixture
def months_file(tmp_path: Path) -> Path:
    """MONTHS_TGF written to a file."""
    path = tmp_path / "months.tgf"
    path.write_text(MONTHS_TGF + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer TGFGRAPH_* variables out of the tests."""
    import os

    for name in list(os.environ):
        if name.startswith("TGFGRAPH_"):
            monkeypatch.delenv(name, raising=False)
