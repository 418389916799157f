from PyQt6.QtWidgets import QLineEdit, QFrame, QLabel
from PyQt6.QtCore import Qt


class StyledLineEdit(QLineEdit):
    """Standardized QLineEdit with project dark theme."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet("""
            QLineEdit {
                background-color: #3b3b3b;
                color: #ffffff;
                border: 1px solid #555;
                padding: 4px 8px;
                border-radius: 4px;
            }
            QLineEdit:hover {
                border-color: #3498db;
            }
            QLineEdit:focus {
                border-color: #3498db;
                background-color: #444;
            }
        """)


class PathDisplay(StyledLineEdit):
    """Read-only path field. Full path is kept in the tooltip for long install dirs."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setPlaceholderText("No configuration file selected")

    def set_path(self, path: str):
        self.setText(path)
        self.setToolTip(path)
        self.setCursorPosition(0)


class Separator(QFrame):
    """Thin horizontal rule themed by FramelessWindow (#Separator)."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("Separator")
        self.setFrameShape(QFrame.Shape.HLine)
        self.setFixedHeight(1)


class LinkLabel(QLabel):
    """Label row 'caption: <url>' that opens the url in the browser."""
    def __init__(self, caption: str, url: str, parent=None):
        super().__init__(parent)
        self.url = url
        self.setText(f'{caption} <a href="{url}" style="color: #5dade2;">{url}</a>')
        self.setTextFormat(Qt.TextFormat.RichText)
        self.setTextInteractionFlags(Qt.TextInteractionFlag.TextBrowserInteraction)
        self.setOpenExternalLinks(True)
