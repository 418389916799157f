import json
from pathlib import Path

import pytest

from conftest import dump_rows
from fps_unlock.core.app_config import AppConfig
from fps_unlock.core.errors import RegistryError, DatabaseNotFoundError
from fps_unlock.core.unlocker import UnlockSession


def _fps_in(path: Path) -> int:
    return json.loads(dump_rows(path)["GameQualitySetting"])["KeyCustomFrameRate"]


def test_choose_reads_current_value(app_config: AppConfig, local_storage: Path):
    session = UnlockSession(app_config)
    assert session.choose(str(local_storage)) is True
    assert session.current_fps == 60
    assert session.status == ""
    assert session.notices() == []
    assert app_config.last_db_path == str(local_storage)


def test_apply_unlocks_and_backs_up(app_config: AppConfig, local_storage: Path):
    session = UnlockSession(app_config)
    session.choose(str(local_storage))

    assert session.apply(120) is True
    assert session.status == "FPS successfully unlocked to 120!"
    assert session.status_error is False
    assert session.current_fps == 120
    assert _fps_in(local_storage) == 120
    assert session.notices() == ["FPS is already set to 120. No need to patch."]

    backup = Path(session.last_result.backup_path)
    assert backup.is_file()
    assert backup.parent == Path(app_config.file_handler.backup_dir)
    assert _fps_in(backup) == 60


def test_apply_twice_is_noop(app_config: AppConfig, local_storage: Path):
    session = UnlockSession(app_config)
    session.choose(str(local_storage))
    session.apply(165)
    assert session.apply(165) is True
    assert session.status == "FPS is already set to 165. No need to patch."
    assert session.last_result.changed is False
    assert session.last_result.backup_path is None


def test_no_backup_when_disabled(file_handler, local_storage: Path):
    Path(file_handler.config_dir).mkdir(parents=True)
    Path(file_handler.config_path("settings.json")).write_text(
        json.dumps({"backup_before_write": False}), encoding="utf-8"
    )
    session = UnlockSession(AppConfig(file_handler=file_handler))
    session.choose(str(local_storage))
    session.apply(120)
    assert session.last_result.backup_path is None
    assert not Path(file_handler.backup_dir).exists()


def test_apply_without_selection_reports_error(app_config: AppConfig):
    session = UnlockSession(app_config)
    assert session.apply(120) is False
    assert session.status == "Error: No configuration file selected."
    assert session.status_error is True


def test_choose_invalid_file(app_config: AppConfig, tmp_path: Path):
    bogus = tmp_path / "notes.txt"
    bogus.write_text("hello\n" * 100, encoding="utf-8")

    session = UnlockSession(app_config)
    assert session.choose(str(bogus)) is False
    assert session.current_fps is None
    assert session.status.startswith("Error reading FPS setting: Database error:")
    assert bogus.read_text(encoding="utf-8") == "hello\n" * 100
    assert app_config.last_db_path == ""


def test_locate_uses_configured_registry_key(app_config: AppConfig, local_storage: Path):
    calls = []

    def locator(key, value):
        calls.append((key, value))
        return str(local_storage)

    session = UnlockSession(app_config, locator=locator)
    assert session.locate() is True
    assert calls == [(app_config.registry_key, app_config.registry_value)]
    assert session.db_path == str(local_storage)
    assert session.current_fps == 60


def test_locate_failure(app_config: AppConfig):
    def locator(key, value):
        raise RegistryError()

    session = UnlockSession(app_config, locator=locator)
    assert session.locate() is False
    assert session.status == "Error locating game: Registry error: Could not access the registry key or value."
    assert session.db_path == ""


def test_restore_last_skips_missing_file(app_config: AppConfig, tmp_path: Path):
    app_config.remember_db_path(str(tmp_path / "gone.db"))
    session = UnlockSession(app_config)
    assert session.restore_last() is False
    assert session.status == ""


def test_restore_last_reopens_previous_database(app_config: AppConfig, local_storage: Path):
    app_config.remember_db_path(str(local_storage))
    session = UnlockSession(app_config)
    assert session.restore_last() is True
    assert session.current_fps == 60


@pytest.mark.parametrize("target", [120, 165])
def test_presets_flow(app_config: AppConfig, local_storage: Path, target):
    session = UnlockSession(app_config)
    session.choose(str(local_storage))
    session.apply(target)
    assert session.refresh() is True
    assert session.current_fps == target


def test_locate_missing_database_replaces_previous_selection(app_config: AppConfig, local_storage: Path, tmp_path: Path):
    derived = str(tmp_path / "Wuthering Waves Game" / "LocalStorage.db")

    def locator(key, value):
        raise DatabaseNotFoundError(derived)

    session = UnlockSession(app_config, locator=locator)
    session.choose(str(local_storage))
    session.apply(120)

    assert session.locate() is False
    assert session.db_path == derived
    assert session.current_fps is None
    assert session.last_result is None
    assert session.notices() == []
    assert session.status == f"Error locating game: File not found or inaccessible: {derived}"
    assert session.status_error is True


def test_locate_registry_error_keeps_browsed_file(app_config: AppConfig, local_storage: Path):
    def locator(key, value):
        raise RegistryError()

    session = UnlockSession(app_config, locator=locator)
    session.choose(str(local_storage))
    assert session.locate() is False
    assert session.db_path == str(local_storage)
    assert session.current_fps == 60
