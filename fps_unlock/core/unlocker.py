"""
UI-independent state of one unlock session.

Holds the resolved database path, the last read/written FPS value and the
last status message. The window renders this object; it never talks to the
database itself.
"""
import os
import logging

from fps_unlock.core.app_config import AppConfig
from fps_unlock.core.errors import UnlockError, DatabaseNotFoundError
from fps_unlock.core.file_handler import FileHandler
from fps_unlock.core.game_locator import locate_local_storage
from fps_unlock.core.local_storage import LocalStorageDB


class UnlockSession:
    def __init__(self, config: AppConfig, locator=locate_local_storage):
        self.config = config
        self.locator = locator
        self.logger = logging.getLogger("UnlockSession")

        self.db_path = ""
        self.current_fps = None
        self.status = ""
        self.status_error = False
        self.last_result = None

    @property
    def presets(self) -> list:
        return self.config.fps_presets

    def _open_db(self) -> LocalStorageDB:
        backup = None
        if self.config.backup_before_write:
            file_handler: FileHandler = self.config.file_handler
            backup = lambda path: file_handler.backup_file(path, "LocalStorage")
        return LocalStorageDB(self.db_path, backup_handler=backup)

    def _set_status(self, message: str, error: bool = False):
        self.status = message
        self.status_error = error
        if error:
            self.logger.error(message)
        else:
            self.logger.info(message)

    def _read_current(self) -> bool:
        try:
            self.current_fps = self._open_db().read_frame_rate()
        except UnlockError as e:
            self.current_fps = None
            self._set_status(f"Error reading FPS setting: {e}", error=True)
            return False
        self.status = ""
        self.status_error = False
        return True

    def locate(self) -> bool:
        """Find LocalStorage.db through the registry and read its FPS limit."""
        try:
            path = self.locator(self.config.registry_key, self.config.registry_value)
        except DatabaseNotFoundError as e:
            # Registered, but the file is missing: show the derived path, drop the old reading
            self.db_path = e.path
            self.current_fps = None
            self.last_result = None
            self._set_status(f"Error locating game: {e}", error=True)
            return False
        except UnlockError as e:
            self._set_status(f"Error locating game: {e}", error=True)
            return False
        return self.choose(path)

    def choose(self, path: str) -> bool:
        """Use a path picked by the user (or the locator) and read its FPS limit."""
        self.db_path = path
        self.last_result = None
        ok = self._read_current()
        if ok:
            self.config.remember_db_path(path)
        return ok

    def restore_last(self) -> bool:
        """Reopen the database used in the previous run, if it still exists."""
        path = self.config.last_db_path
        if not path or not os.path.isfile(path):
            return False
        return self.choose(path)

    def refresh(self) -> bool:
        return self._read_current()

    def apply(self, target: int) -> bool:
        """Write target into the selected database. Returns True on success or no-op."""
        try:
            result = self._open_db().unlock(target)
        except UnlockError as e:
            self._set_status(f"Error: {e}", error=True)
            return False
        self.last_result = result
        self.current_fps = result.target
        self._set_status(result.message)
        return True

    def notices(self) -> list:
        if self.current_fps is None:
            return []
        return [
            f"FPS is already set to {fps}. No need to patch."
            for fps in self.presets
            if fps == self.current_fps
        ]
