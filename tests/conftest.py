from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

NOON_UTC = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("TZCLOCK_CONFIG_FILENAME", "TZCLOCK_LOCAL_ZONE", "TZCLOCK_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_config(tmp_path: Path):
    def _write(text: str, name: str = "test.conf") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write
