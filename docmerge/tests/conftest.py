import datetime
from pathlib import Path

import pytest

from docmerge.core import clock

FIXED_NOW = datetime.datetime(2024, 3, 5, 12, 0, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    d = tmp_path / "docs"
    d.mkdir()
    return d


@pytest.fixture
def write_doc(docs_dir: Path):
    def _write(name: str, content: str) -> Path:
        p = docs_dir / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(content.encode("utf-8"))
        return p

    return _write


@pytest.fixture
def fixed_clock():
    with clock.pinned(FIXED_NOW):
        yield FIXED_NOW
