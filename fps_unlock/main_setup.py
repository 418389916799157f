import sys
import os
import logging
from datetime import datetime

from rich.logging import RichHandler
from rich.traceback import install

from fps_unlock.core.version import VERSION_STRING


def setup_error_handling(log_root: str = None):
    """リッチなエラー表示 ＋ ログ保存の設定"""
    # Reset root handlers so repeated calls (tests, restarts) do not duplicate output
    root = logging.getLogger()
    for h in root.handlers[:]:
        root.removeHandler(h)

    if log_root is None:
        from fps_unlock.core.file_handler import get_file_handler
        log_root = get_file_handler().log_dir

    log_dir = os.path.join(log_root, "log")
    error_dir = os.path.join(log_root, "error")
    os.makedirs(log_dir, exist_ok=True)
    os.makedirs(error_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_file = os.path.join(log_dir, f"session_{timestamp}.log")
    error_file = os.path.join(error_dir, f"error_{timestamp}.log")

    # install は traceback の表示を直接乗っ取るためのもの
    install(show_locals=True, width=120)

    root.setLevel(logging.INFO)
    formatter = logging.Formatter('%(asctime)s | %(levelname)s | [%(name)s] %(message)s')

    # セッションログ
    sh = logging.FileHandler(session_file, encoding='utf-8')
    sh.setFormatter(formatter)
    sh.setLevel(logging.INFO)
    root.addHandler(sh)

    # エラーログ
    eh = logging.FileHandler(error_file, encoding='utf-8')
    eh.setFormatter(formatter)
    eh.setLevel(logging.ERROR)
    root.addHandler(eh)

    # コンソール出力
    ch = RichHandler(rich_tracebacks=True, markup=False)
    ch.setFormatter(logging.Formatter('%(message)s'))
    ch.setLevel(logging.INFO)
    root.addHandler(ch)

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception
    logging.info(f"--- {VERSION_STRING} session started ---")
    return session_file, error_file
