import json
from pathlib import Path

import pytest

from conftest import QUALITY, create_local_storage, dump_rows
from fps_unlock.core.errors import (
    DatabaseNotFoundError, DatabaseError, SettingMissingError, SettingFormatError
)
from fps_unlock.core.local_storage import LocalStorageDB, UnlockResult, frame_rate_of


def test_read_frame_rate(local_storage: Path):
    assert LocalStorageDB(str(local_storage)).read_frame_rate() == 60


def test_unlock_sets_target_and_keeps_everything_else(local_storage: Path):
    before = dump_rows(local_storage)

    result = LocalStorageDB(str(local_storage)).unlock(120)

    assert result.changed is True
    assert result.previous == 60
    assert result.message == "FPS successfully unlocked to 120!"

    after = dump_rows(local_storage)
    assert set(after) == set(before)
    assert after["PlayerName"] == before["PlayerName"]
    assert after["MasterVolume"] == before["MasterVolume"]

    quality = json.loads(after["GameQualitySetting"])
    assert quality["KeyCustomFrameRate"] == 120
    expected = dict(QUALITY, KeyCustomFrameRate=120)
    assert quality == expected
    # member order survives the rewrite
    assert list(quality) == list(QUALITY)


def test_unlock_is_noop_when_already_at_target(local_storage: Path):
    db = LocalStorageDB(str(local_storage))
    db.unlock(165)
    mtime = local_storage.stat().st_mtime_ns
    before = dump_rows(local_storage)

    calls = []
    db.backup_handler = lambda path: calls.append(path)
    result = db.unlock(165)

    assert result.changed is False
    assert result.message == "FPS is already set to 165. No need to patch."
    assert dump_rows(local_storage) == before
    assert local_storage.stat().st_mtime_ns == mtime
    assert calls == []


def test_unlock_runs_backup_before_write(local_storage: Path, tmp_path: Path):
    seen = []

    def backup(path):
        # the file must still hold the old value when the backup is taken
        seen.append(LocalStorageDB(path).read_frame_rate())
        return str(tmp_path / "copy.db")

    result = LocalStorageDB(str(local_storage), backup_handler=backup).unlock(120)
    assert seen == [60]
    assert result.backup_path == str(tmp_path / "copy.db")


def test_failed_backup_leaves_database_untouched(local_storage: Path):
    def backup(path):
        raise PermissionError("locked")

    before = dump_rows(local_storage)
    with pytest.raises(DatabaseError):
        LocalStorageDB(str(local_storage), backup_handler=backup).unlock(120)
    assert dump_rows(local_storage) == before


def test_missing_file_is_not_created(tmp_path: Path):
    missing = tmp_path / "nowhere" / "LocalStorage.db"
    with pytest.raises(DatabaseNotFoundError) as exc:
        LocalStorageDB(str(missing)).unlock(120)
    assert str(missing) in str(exc.value)
    assert not missing.exists()


def test_empty_path_reports_no_selection():
    with pytest.raises(DatabaseNotFoundError) as exc:
        LocalStorageDB("").read_frame_rate()
    assert "No configuration file selected" in str(exc.value)


def test_not_a_database(tmp_path: Path):
    bogus = tmp_path / "LocalStorage.db"
    bogus.write_bytes(b"this is definitely not sqlite" * 200)
    with pytest.raises(DatabaseError):
        LocalStorageDB(str(bogus)).unlock(120)
    assert bogus.read_bytes() == b"this is definitely not sqlite" * 200


def test_database_without_table(tmp_path: Path):
    import sqlite3
    path = tmp_path / "other.db"
    conn = sqlite3.connect(str(path))
    conn.execute("CREATE TABLE unrelated (id INTEGER)")
    conn.commit()
    conn.close()
    with pytest.raises(DatabaseError):
        LocalStorageDB(str(path)).read_frame_rate()


def test_missing_quality_row(tmp_path: Path):
    path = create_local_storage(tmp_path / "LocalStorage.db", with_row=False)
    with pytest.raises(SettingMissingError) as exc:
        LocalStorageDB(str(path)).unlock(120)
    assert "GameQualitySetting" in str(exc.value)


def test_missing_frame_rate_member_aborts_without_write(tmp_path: Path):
    quality = {k: v for k, v in QUALITY.items() if k != "KeyCustomFrameRate"}
    path = create_local_storage(tmp_path / "LocalStorage.db", quality=quality)
    before = dump_rows(path)
    with pytest.raises(SettingMissingError):
        LocalStorageDB(str(path)).unlock(120)
    assert dump_rows(path) == before


@pytest.mark.parametrize("raw", ["{not json", "[60, 120]", '"60"'])
def test_malformed_quality_value(tmp_path: Path, raw):
    path = create_local_storage(tmp_path / "LocalStorage.db", raw_value=raw)
    with pytest.raises(SettingFormatError):
        LocalStorageDB(str(path)).read_frame_rate()


@pytest.mark.parametrize("value", ["120", 120.5, True, None])
def test_frame_rate_must_be_integer(value):
    with pytest.raises(SettingFormatError):
        frame_rate_of({"KeyCustomFrameRate": value})


def test_unlock_result_repr_mentions_target():
    assert "target=120" in repr(UnlockResult(120, 60, True))


def test_blob_with_invalid_utf8_is_left_alone(tmp_path: Path):
    raw = b'{"KeyCustomFrameRate":60,"Name":"\xff\xfe"}'
    path = create_local_storage(tmp_path / "LocalStorage.db", raw_value=raw)
    with pytest.raises(SettingFormatError):
        LocalStorageDB(str(path)).unlock(120)
    assert dump_rows(path)["GameQualitySetting"] == raw


def test_utf8_blob_is_patched(tmp_path: Path):
    raw = '{"KeyCustomFrameRate":60,"Name":"漂泊者"}'.encode("utf-8")
    path = create_local_storage(tmp_path / "LocalStorage.db", raw_value=raw)
    assert LocalStorageDB(str(path)).unlock(120).changed is True
    stored = json.loads(dump_rows(path)["GameQualitySetting"])
    assert stored == {"KeyCustomFrameRate": 120, "Name": "漂泊者"}
