"""
Persistent tool settings (config/settings.json).

Only the tool's own preferences live here. The game's settings database is
never cached or mirrored into this file, only its last used path.
"""
import logging

from fps_unlock.core.file_handler import FileHandler, get_file_handler

DEFAULT_REGISTRY_KEY = (
    "SOFTWARE\\WOW6432Node\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\"
    "KRInstall Wuthering Waves Overseas"
)
DEFAULT_REGISTRY_VALUE = "InstallPath"
DEFAULT_FPS_PRESETS = [120, 165]

DEFAULTS = {
    "last_db_path": "",
    "fps_presets": DEFAULT_FPS_PRESETS,
    "registry_key": DEFAULT_REGISTRY_KEY,
    "registry_value": DEFAULT_REGISTRY_VALUE,
    "backup_before_write": True,
}


def _clean_presets(raw) -> list:
    presets = []
    if not isinstance(raw, list):
        return list(DEFAULT_FPS_PRESETS)
    for value in raw:
        # bool is an int subclass; "true" is not a frame rate
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            continue
        if value not in presets:
            presets.append(value)
    return presets or list(DEFAULT_FPS_PRESETS)


class AppConfig:
    """Manages config/settings.json with defaults for missing keys."""

    FILE_NAME = "settings.json"

    def __init__(self, file_handler: FileHandler = None):
        self.file_handler = file_handler or get_file_handler()
        self.logger = logging.getLogger("AppConfig")
        self.path = self.file_handler.config_path(self.FILE_NAME)
        self._data = self._load()

    def _load(self) -> dict:
        data = dict(DEFAULTS)
        try:
            stored = self.file_handler.read_json(self.path)
        except FileNotFoundError:
            return data
        except (OSError, ValueError) as e:
            self.logger.warning(f"Failed to load {self.path}: {e}")
            self.file_handler.quarantine(self.path)
            return data

        if not isinstance(stored, dict):
            self.logger.warning(f"Ignoring {self.path}: top level is not an object")
            self.file_handler.quarantine(self.path)
            return data

        for key in DEFAULTS:
            if key in stored:
                data[key] = stored[key]
        data["fps_presets"] = _clean_presets(data["fps_presets"])
        if not isinstance(data["last_db_path"], str):
            data["last_db_path"] = ""
        data["backup_before_write"] = bool(data["backup_before_write"])
        return data

    def save(self):
        self.file_handler.write_json(self.path, self._data)
        self.logger.info(f"Saved settings to {self.path}")

    @property
    def fps_presets(self) -> list:
        return list(self._data["fps_presets"])

    @property
    def registry_key(self) -> str:
        return self._data["registry_key"]

    @property
    def registry_value(self) -> str:
        return self._data["registry_value"]

    @property
    def backup_before_write(self) -> bool:
        return self._data["backup_before_write"]

    @property
    def last_db_path(self) -> str:
        return self._data["last_db_path"]

    def remember_db_path(self, path: str):
        if path == self._data["last_db_path"]:
            return
        self._data["last_db_path"] = path
        try:
            self.save()
        except OSError as e:
            self.logger.warning(f"Could not remember last database path: {e}")
