""" 🚨 厳守ルール: ファイル操作禁止 🚨
ファイルI/Oは、必ず fps_unlock.core.file_handler を介すること。
"""

from PyQt6.QtWidgets import QPushButton
from PyQt6.QtGui import QCursor
from PyQt6.QtCore import Qt


class TitleBarButton(QPushButton):
    """Minimize / close button of the frameless title bar."""

    # role -> (glyph, hover background, tooltip)
    ROLES = {
        "minimize": ("_", "#3a3a3a", "Minimize"),
        "close": ("✕", "#c42b1c", "Close"),
    }

    def __init__(self, role: str, parent=None):
        glyph, hover, tip = self.ROLES[role]
        super().__init__(glyph, parent)
        self.role = role
        self.setObjectName(f"TitleBar_{role}")
        self.setToolTip(tip)
        self.setFixedSize(30, 30)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: transparent;
                border: none;
                color: #cccccc;
                font-weight: bold;
                font-family: "Segoe UI Emoji", "Segoe UI", sans-serif;
                font-size: 16px;
                padding: 0px;
            }}
            QPushButton:hover {{
                background-color: {hover};
            }}
            QPushButton:pressed {{
                background-color: #2c3e50;
            }}
        """)
