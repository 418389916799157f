import os
import json
import shutil
import logging
from datetime import datetime
from typing import Optional, Any

from fps_unlock.utils.path_utils import get_user_data_path, ensure_dir


class FileHandler:
    """
    Owns every file the tool itself writes: config/, logs/ and backups/.
    The game's database is never touched here except for copying it into backups/.
    """

    def __init__(self, root: Optional[str] = None):
        self.project_root = root or get_user_data_path()
        self.log_dir = os.path.join(self.project_root, "logs")
        self.config_dir = os.path.join(self.project_root, "config")
        self.backup_dir = os.path.join(self.project_root, "backups")
        self.logger = logging.getLogger("FileHandler")

    def config_path(self, name: str) -> str:
        return os.path.join(self.config_dir, name)

    def read_json(self, path: str) -> Any:
        """Reads a JSON file. Raises OSError / ValueError to the caller."""
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def write_json(self, path: str, data: Any) -> None:
        """Writes JSON in the same layout as the rest of config/."""
        try:
            ensure_dir(os.path.dirname(path))
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4, ensure_ascii=False)
            self.logger.debug(f"Successfully wrote to {path}")
        except OSError as e:
            self.logger.error(f"Failed to write file {path}: {e}")
            raise

    def quarantine(self, path: str) -> Optional[str]:
        """Renames a broken file to <name>.bak.<timestamp> so defaults can be written."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        dest = f"{path}.bak.{timestamp}"
        try:
            os.replace(path, dest)
        except OSError as e:
            self.logger.warning(f"Could not move aside {path}: {e}")
            return None
        self.logger.warning(f"Moved unreadable file aside: {dest}")
        return dest

    def backup_file(self, source_path: str, prefix: str) -> str:
        """Copies source_path into backups/ as <prefix>_<timestamp><ext>."""
        ensure_dir(self.backup_dir)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        ext = os.path.splitext(source_path)[1]
        dest_path = os.path.join(self.backup_dir, f"{prefix}_{timestamp}{ext}")
        counter = 1
        while os.path.exists(dest_path):
            dest_path = os.path.join(self.backup_dir, f"{prefix}_{timestamp}_{counter}{ext}")
            counter += 1
        shutil.copy2(source_path, dest_path)
        self.logger.info(f"Backed up {source_path} -> {dest_path}")
        return dest_path


# Singleton accessor
_file_handler = None

def get_file_handler() -> FileHandler:
    """Get or create the shared FileHandler instance."""
    global _file_handler
    if _file_handler is None:
        _file_handler = FileHandler()
    return _file_handler
