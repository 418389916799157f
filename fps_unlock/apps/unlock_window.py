""" 🚨 厳守ルール: ファイル操作禁止 🚨
ファイルI/Oは、必ず fps_unlock.core.file_handler を介すること。
"""

import os
import logging
from PyQt6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel,
                             QPushButton, QFileDialog)
from PyQt6.QtCore import Qt

from fps_unlock.core.version import APP_NAME, WINDOW_TITLE, AUTHOR, GITHUB_URL, KOFI_URL
from fps_unlock.core.unlocker import UnlockSession
from fps_unlock.ui.frameless_window import FramelessWindow
from fps_unlock.ui.common_widgets import PathDisplay, Separator, LinkLabel
from fps_unlock.ui.styles import ButtonStyles, LabelStyles
from fps_unlock.ui.toast import Toast

INSTRUCTIONS = (
    "1) Check and set your FPS limit to 60, then close your game.\n"
    "2) Do not touch FPS or VSync options in-game.\n"
    "3) You can either automatically find it or browse and choose the file."
)


class FpsUnlockWindow(FramelessWindow):
    """Main window: pick LocalStorage.db, show the FPS limit, apply a preset."""

    def __init__(self, session: UnlockSession, parent=None):
        super().__init__(parent)
        self.logger = logging.getLogger("FpsUnlockWindow")
        self.session = session
        self.preset_buttons = {}

        self.setWindowTitle(WINDOW_TITLE)
        self._init_ui()
        self._toast = Toast(parent=self, y_offset=48)

        if self.session.restore_last():
            self.logger.info(f"Restored last database: {self.session.db_path}")
        self._refresh_view()
        self.setFixedWidth(640)
        self.adjustSize()

    def _init_ui(self):
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        heading = QLabel(APP_NAME)
        heading.setStyleSheet(LabelStyles.HEADING)
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(heading)
        layout.addWidget(Separator())
        layout.addSpacing(6)

        # Credits
        layout.addWidget(QLabel(f"Made by {AUTHOR}"))
        layout.addWidget(LinkLabel("Github:", GITHUB_URL))
        layout.addSpacing(6)
        layout.addWidget(QLabel("Support my Gacha addiction:"))
        layout.addWidget(LinkLabel("ko-fi:", KOFI_URL))
        layout.addSpacing(6)
        layout.addWidget(Separator())
        layout.addSpacing(6)

        # Steps
        layout.addWidget(QLabel("<b>Steps:</b>"))
        steps = QLabel(INSTRUCTIONS)
        steps.setStyleSheet(LabelStyles.MUTED)
        layout.addWidget(steps)
        layout.addWidget(Separator())

        layout.addWidget(QLabel("Select the SQLite database file:"))
        layout.addSpacing(4)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(6)

        self.btn_locate = QPushButton("Locate Configuration File")
        self.btn_locate.setStyleSheet(ButtonStyles.PRIMARY)
        self.btn_locate.clicked.connect(self._on_locate)
        btn_row.addWidget(self.btn_locate)

        self.btn_browse = QPushButton("Browse for Configuration File")
        self.btn_browse.setStyleSheet(ButtonStyles.DEFAULT)
        self.btn_browse.clicked.connect(self._on_browse)
        btn_row.addWidget(self.btn_browse)

        for fps in self.session.presets:
            btn = QPushButton(f"Set FPS to {fps}")
            btn.setStyleSheet(ButtonStyles.SUCCESS)
            btn.clicked.connect(lambda checked=False, target=fps: self._on_apply(target))
            btn_row.addWidget(btn)
            self.preset_buttons[fps] = btn
        layout.addLayout(btn_row)
        layout.addSpacing(6)

        self.path_display = PathDisplay()
        layout.addWidget(self.path_display)

        # Current FPS (hidden until a value has been read)
        self.current_box = QWidget()
        current_layout = QVBoxLayout(self.current_box)
        current_layout.setContentsMargins(0, 0, 0, 0)
        current_layout.setSpacing(2)
        current_layout.addWidget(Separator())
        current_layout.addWidget(QLabel("Current FPS Setting:"))
        self.current_label = QLabel()
        self.current_label.setStyleSheet(LabelStyles.VALUE)
        current_layout.addWidget(self.current_label)
        self.notice_label = QLabel()
        self.notice_label.setStyleSheet(LabelStyles.NOTICE)
        current_layout.addWidget(self.notice_label)
        layout.addWidget(self.current_box)

        layout.addSpacing(6)
        self.status_label = QLabel()
        self.status_label.setWordWrap(True)
        self.status_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self.status_label)
        layout.addStretch()

        self.set_content_widget(content)

    # --- Actions ---
    def _on_locate(self):
        self.session.locate()
        self._refresh_view(feedback=True)

    def _on_browse(self):
        start_dir = os.path.dirname(self.session.db_path) if self.session.db_path else ""
        path, _filter = QFileDialog.getOpenFileName(
            self, "Select LocalStorage.db", start_dir,
            "SQLite Database (*.db);;All Files (*)"
        )
        if not path:
            return
        self.session.choose(os.path.normpath(path))
        self._refresh_view(feedback=True)

    def _on_apply(self, target: int):
        self.session.apply(target)
        self._refresh_view(feedback=True)

    # --- View ---
    def _refresh_view(self, feedback: bool = False):
        session = self.session
        self.path_display.set_path(session.db_path)

        has_value = session.current_fps is not None
        self.current_box.setVisible(has_value)
        if has_value:
            self.current_label.setText(f"KeyCustomFrameRate: {session.current_fps}")
            notices = session.notices()
            self.notice_label.setText("\n".join(notices))
            self.notice_label.setVisible(bool(notices))

        is_error = session.status_error
        self.status_label.setText(session.status)
        self.status_label.setStyleSheet(LabelStyles.STATUS_ERROR if is_error else LabelStyles.STATUS_OK)

        if feedback and session.status:
            self._toast.show_status(session.status, error=is_error)

        self.adjustSize()
