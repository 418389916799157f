import os
import sys
import logging
from PyQt6.QtWidgets import QApplication
from rich.console import Console

from fps_unlock.main_setup import setup_error_handling
from fps_unlock.core.version import WINDOW_TITLE, VERSION_STRING
from fps_unlock.utils.path_utils import get_resource_path

ICON_RELATIVE_PATH = os.path.join("resource", "icon", "ploom.svg")


def main():
    # Logging and the excepthook must be in place before any window code runs.
    setup_error_handling()

    try:
        from fps_unlock.core.app_config import AppConfig
        from fps_unlock.core.unlocker import UnlockSession
        from fps_unlock.apps.unlock_window import FpsUnlockWindow

        app = QApplication(sys.argv)
        app.setApplicationName(WINDOW_TITLE)

        session = UnlockSession(AppConfig())
        window = FpsUnlockWindow(session)

        # アイコンの読み込み (EXE対応)
        icon_path = get_resource_path(ICON_RELATIVE_PATH)
        if os.path.exists(icon_path):
            if not window.set_window_icon_from_path(icon_path):
                logging.warning(f"Failed to load icon: {icon_path}")

        window.show()
        logging.info(f"Launched {VERSION_STRING}.")

        sys.exit(app.exec())
    except Exception:
        logging.error("Fatal error in main loop", exc_info=True)
        Console().print_exception(show_locals=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
