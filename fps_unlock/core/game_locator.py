"""
Default location of the game's LocalStorage.db.

The launcher registers the install directory under the Uninstall key in
HKLM; the client keeps its local settings a few folders below it.
"""
import os
import logging

from fps_unlock.core.errors import RegistryError, DatabaseNotFoundError
from fps_unlock.core.app_config import DEFAULT_REGISTRY_KEY, DEFAULT_REGISTRY_VALUE

logger = logging.getLogger("GameLocator")

LOCAL_STORAGE_SUBPATH = ("Wuthering Waves Game", "Client", "Saved", "LocalStorage", "LocalStorage.db")


def read_install_path(key_path: str = DEFAULT_REGISTRY_KEY, value_name: str = DEFAULT_REGISTRY_VALUE) -> str:
    """Read the install directory from HKEY_LOCAL_MACHINE."""
    try:
        import winreg
    except ImportError:
        raise RegistryError("Registry error: The Windows registry is not available on this system.") from None

    try:
        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key_path) as key:
            value, _value_type = winreg.QueryValueEx(key, value_name)
    except OSError as e:
        logger.warning(f"Registry lookup failed for {key_path}\\{value_name}: {e}")
        raise RegistryError() from e

    if not isinstance(value, str) or not value.strip():
        raise RegistryError()
    return value.strip()


def local_storage_path(install_path: str) -> str:
    return os.path.join(install_path, *LOCAL_STORAGE_SUBPATH)


def locate_local_storage(key_path: str = DEFAULT_REGISTRY_KEY, value_name: str = DEFAULT_REGISTRY_VALUE) -> str:
    """
    Resolve the default LocalStorage.db path.

    Raises RegistryError when the game is not registered, and
    DatabaseNotFoundError when it is registered but the file is missing
    (the game has not been started yet, or was moved). Either way the user
    has to browse for the file manually.
    """
    install_path = read_install_path(key_path, value_name)
    db_path = local_storage_path(install_path)
    if not os.path.isfile(db_path):
        raise DatabaseNotFoundError(db_path)
    logger.info(f"Located settings database: {db_path}")
    return db_path
