import os
import sys

APP_DIR_NAME = "PloomFpsUnlock"


def _package_root():
    # 2 levels up from fps_unlock/utils/path_utils.py
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def is_installed_package(path=None):
    """True when the package runs from site-packages / dist-packages."""
    parts = os.path.normpath(path or _package_root()).split(os.sep)
    return any(p in ("site-packages", "dist-packages") for p in parts)


def get_per_user_dir():
    """Writable per-user data directory (%LOCALAPPDATA% or XDG data home)."""
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.path.join(os.path.expanduser("~"), "AppData", "Local")
    else:
        base = os.environ.get("XDG_DATA_HOME") or os.path.join(os.path.expanduser("~"), ".local", "share")
    return os.path.join(base, APP_DIR_NAME)


def get_project_root():
    """Returns absolute path to project root.
    EXE: Directory containing executable.
    DEV: Directory containing 'fps_unlock'.
    """
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    return _package_root()


def get_resource_path(relative_path):
    """Get absolute path to read-only resource.
    Works for dev and for PyInstaller (_MEIPASS).
    """
    base_path = getattr(sys, '_MEIPASS', None) or get_project_root()
    return os.path.join(base_path, relative_path)


def get_user_data_path(relative_path=""):
    """Get absolute path to writable user data area.
    Next to the EXE or the source checkout; per-user dir for a pip install.
    """
    base = get_project_root()
    if not getattr(sys, 'frozen', False) and is_installed_package(base):
        base = get_per_user_dir()
    return os.path.join(base, relative_path)


def ensure_dir(path):
    """Ensure directory exists."""
    if not os.path.exists(path):
        os.makedirs(path, exist_ok=True)
    return path
