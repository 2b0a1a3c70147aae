from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def guest_file(tmp_path: Path) -> Path:
    path = tmp_path / "guests.json"
    path.write_text("[]", encoding="utf-8")
    return path
