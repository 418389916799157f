"""
Client for the game's LocalStorage.db.

The schema belongs to the game client:

    LocalStorage(key TEXT, value TEXT)

The row keyed 'GameQualitySetting' holds a JSON object whose
'KeyCustomFrameRate' member is the FPS limit. Only that member of that row
is ever rewritten.
"""
import os
import json
import sqlite3
import logging
from contextlib import contextmanager
from pathlib import Path

from fps_unlock.core.errors import (
    DatabaseNotFoundError, DatabaseError, SettingMissingError, SettingFormatError
)

TABLE_NAME = "LocalStorage"
QUALITY_SETTING_KEY = "GameQualitySetting"
FRAME_RATE_FIELD = "KeyCustomFrameRate"


class UnlockResult:
    """Outcome of one unlock attempt."""

    def __init__(self, target: int, previous: int, changed: bool, backup_path: str = None):
        self.target = target
        self.previous = previous
        self.changed = changed
        self.backup_path = backup_path

    @property
    def message(self) -> str:
        if self.changed:
            return f"FPS successfully unlocked to {self.target}!"
        return f"FPS is already set to {self.target}. No need to patch."

    def __repr__(self):
        return (f"UnlockResult(target={self.target}, previous={self.previous}, "
                f"changed={self.changed}, backup_path={self.backup_path!r})")


def frame_rate_of(setting: dict) -> int:
    """Extract KeyCustomFrameRate from a decoded GameQualitySetting object."""
    if FRAME_RATE_FIELD not in setting:
        raise SettingMissingError(FRAME_RATE_FIELD)
    value = setting[FRAME_RATE_FIELD]
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingFormatError(f"{FRAME_RATE_FIELD} is not an integer: {value!r}")
    return value


class LocalStorageDB:
    """Reads and patches the FPS limit in one LocalStorage.db file."""

    def __init__(self, db_path: str, backup_handler=None):
        """
        Args:
            db_path: Path to LocalStorage.db.
            backup_handler: Optional callable(path) -> backup path, invoked
                right before the database is modified.
        """
        self.db_path = db_path
        self.backup_handler = backup_handler
        self.logger = logging.getLogger("LocalStorageDB")

    def _check_exists(self):
        if not self.db_path or not os.path.isfile(self.db_path):
            raise DatabaseNotFoundError(self.db_path)

    def get_connection(self) -> sqlite3.Connection:
        # mode=rw: never let sqlite create an empty file at a wrong path
        uri = Path(self.db_path).resolve().as_uri() + "?mode=rw"
        return sqlite3.connect(uri, uri=True)

    @contextmanager
    def _connect(self):
        self._check_exists()
        try:
            conn = self.get_connection()
        except sqlite3.Error as e:
            raise DatabaseError(e) from e
        try:
            yield conn
        except sqlite3.Error as e:
            raise DatabaseError(e) from e
        finally:
            conn.close()

    def _read_quality_setting(self, conn: sqlite3.Connection) -> dict:
        row = conn.execute(
            f"SELECT value FROM {TABLE_NAME} WHERE key = ?", (QUALITY_SETTING_KEY,)
        ).fetchone()
        if row is None:
            raise SettingMissingError(QUALITY_SETTING_KEY)

        raw = row[0]
        if isinstance(raw, bytes):
            try:
                raw = raw.decode('utf-8')
            except UnicodeDecodeError as e:
                raise SettingFormatError(f"{QUALITY_SETTING_KEY} is not valid UTF-8: {e}") from e
        if not isinstance(raw, str):
            raise SettingFormatError(f"{QUALITY_SETTING_KEY} is not text")
        try:
            setting = json.loads(raw)
        except ValueError as e:
            raise SettingFormatError(e) from e
        if not isinstance(setting, dict):
            raise SettingFormatError(f"{QUALITY_SETTING_KEY} is not a JSON object")
        return setting

    def read_quality_setting(self) -> dict:
        with self._connect() as conn:
            return self._read_quality_setting(conn)

    def read_frame_rate(self) -> int:
        """Return the current KeyCustomFrameRate."""
        setting = self.read_quality_setting()
        fps = frame_rate_of(setting)
        self.logger.info(f"Current {FRAME_RATE_FIELD}: {fps} ({self.db_path})")
        return fps

    def unlock(self, target: int) -> UnlockResult:
        """
        Set KeyCustomFrameRate to target unless it already is.

        Everything else in the JSON object keeps its value and order; no
        other row is touched. Nothing is written (and nothing backed up)
        when the value already matches or when any check fails.
        """
        with self._connect() as conn:
            setting = self._read_quality_setting(conn)
            previous = frame_rate_of(setting)
            if previous == target:
                self.logger.info(f"{FRAME_RATE_FIELD} already {target}, nothing to do.")
                return UnlockResult(target, previous, changed=False)

            backup_path = None
            if self.backup_handler is not None:
                try:
                    backup_path = self.backup_handler(self.db_path)
                except OSError as e:
                    raise DatabaseError(f"Backup failed, database left unchanged: {e}") from e

            setting[FRAME_RATE_FIELD] = target
            payload = json.dumps(setting, ensure_ascii=False, separators=(',', ':'))
            with conn:
                cursor = conn.execute(
                    f"UPDATE {TABLE_NAME} SET value = ? WHERE key = ?",
                    (payload, QUALITY_SETTING_KEY),
                )
            self.logger.info(
                f"{FRAME_RATE_FIELD}: {previous} -> {target} "
                f"({cursor.rowcount} row updated, {self.db_path})"
            )
            return UnlockResult(target, previous, changed=True, backup_path=backup_path)
