import json
import sqlite3
from pathlib import Path

import pytest

from fps_unlock.core.file_handler import FileHandler
from fps_unlock.core.app_config import AppConfig

QUALITY = {
    "KeyQualityLevel": 3,
    "KeyCustomFrameRate": 60,
    "KeyPcVsync": 0,
    "KeyAntiAliasing": 1,
    "KeyShadowQuality": 2,
}


def create_local_storage(path: Path, quality=None, raw_value=None, with_row=True) -> Path:
    """Build a LocalStorage.db shaped like the game client's."""
    conn = sqlite3.connect(str(path))
    try:
        conn.execute("CREATE TABLE LocalStorage (key TEXT PRIMARY KEY, value TEXT)")
        conn.execute("INSERT INTO LocalStorage (key, value) VALUES (?, ?)", ("PlayerName", "Rover"))
        conn.execute("INSERT INTO LocalStorage (key, value) VALUES (?, ?)", ("MasterVolume", "80"))
        if with_row:
            value = raw_value if raw_value is not None else json.dumps(quality if quality is not None else QUALITY)
            conn.execute("INSERT INTO LocalStorage (key, value) VALUES (?, ?)", ("GameQualitySetting", value))
        conn.commit()
    finally:
        conn.close()
    return path


def dump_rows(path: Path) -> dict:
    conn = sqlite3.connect(str(path))
    try:
        return dict(conn.execute("SELECT key, value FROM LocalStorage").fetchall())
    finally:
        conn.close()


@pytest.fixture
def local_storage(tmp_path: Path) -> Path:
    game_dir = tmp_path / "Saved" / "LocalStorage"
    game_dir.mkdir(parents=True)
    return create_local_storage(game_dir / "LocalStorage.db")


@pytest.fixture
def file_handler(tmp_path: Path) -> FileHandler:
    return FileHandler(root=str(tmp_path / "tool"))


@pytest.fixture
def app_config(file_handler: FileHandler) -> AppConfig:
    return AppConfig(file_handler=file_handler)
