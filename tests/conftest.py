from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT / "src", ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from tests.source_helpers import FIXTURE_ROOT, write_source


@pytest.fixture
def write_module(tmp_path: Path):
    def _write(relative: str, content: str) -> Path:
        return write_source(tmp_path, relative, content)

    return _write


@pytest.fixture
def multiple_exports_dir() -> Path:
    return FIXTURE_ROOT / "multiple_exports"


@pytest.fixture
def default_export_dir() -> Path:
    return FIXTURE_ROOT / "default_export"
