""" 🚨 厳守ルール: ファイル操作禁止 🚨
ファイルI/Oは、必ず fps_unlock.core.file_handler を介すること。
"""

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QIcon, QPixmap
from fps_unlock.ui.title_bar_button import TitleBarButton
from fps_unlock.ui.window_mixins import DraggableMixin


class FramelessWindow(QMainWindow, DraggableMixin):
    """
    Dark, fixed-size window with its own title bar (minimize + close only).
    Content is placed with set_content_widget().
    """
    TITLE_BAR_HEIGHT = 40

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.Window)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

        self.init_drag()
        self.border_radius = 8

        self._init_frameless_ui()

    def _init_frameless_ui(self):
        # Main container
        self.container = QWidget()
        self.container.setObjectName("FramelessContainer")
        self._update_stylesheet()
        self.setCentralWidget(self.container)

        self.main_layout = QVBoxLayout(self.container)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)

        # Title Bar
        self.title_bar = QWidget()
        self.title_bar.setObjectName("TitleBar")
        self.title_bar.setStyleSheet("background-color: transparent;")
        self.title_bar.setFixedHeight(self.TITLE_BAR_HEIGHT)

        self.title_bar_layout = QHBoxLayout(self.title_bar)
        self.title_bar_layout.setContentsMargins(10, 5, 10, 5)
        self.title_bar_layout.setSpacing(2)

        self.icon_label = QLabel()
        self.icon_label.setFixedSize(24, 24)
        self.icon_label.setVisible(False)
        self.title_bar_layout.addWidget(self.icon_label)

        self.title_label = QLabel("Application")
        self.title_label.setStyleSheet("padding-left: 5px;")
        self.title_bar_layout.addWidget(self.title_label)
        self.title_bar_layout.addStretch()

        self.min_btn = TitleBarButton("minimize")
        self.min_btn.clicked.connect(self.showMinimized)
        self.title_bar_layout.addWidget(self.min_btn)

        self.close_btn = TitleBarButton("close")
        self.close_btn.clicked.connect(self.close)
        self.title_bar_layout.addWidget(self.close_btn)

        self.main_layout.addWidget(self.title_bar)

        # Content Area
        self.content_area = QWidget()
        self.main_layout.addWidget(self.content_area)

    def setWindowTitle(self, title: str):
        """Override to sync title_label with window title."""
        super().setWindowTitle(title)
        if hasattr(self, 'title_label'):
            self.title_label.setText(title)

    def _update_stylesheet(self):
        radius = f"{self.border_radius}px"
        self.container.setStyleSheet(f"""
            #FramelessContainer {{
                background-color: rgba(43, 43, 43, 240);
                border: 1px solid #444;
                border-radius: {radius};
            }}
            QLabel {{ color: #ddd; background: transparent; }}

            QLineEdit {{
                color: #e0e0e0;
                background-color: #252525;
                border: 1px solid #555;
                border-radius: 4px;
                padding: 4px;
                selection-background-color: #3498db;
                selection-color: white;
            }}

            QFrame#Separator {{
                background-color: #444;
                max-height: 1px;
            }}
        """)

    def set_content_widget(self, widget: QWidget):
        if self.content_area.layout():
            QWidget().setLayout(self.content_area.layout())
        layout = QVBoxLayout(self.content_area)
        layout.setContentsMargins(14, 4, 14, 14)
        layout.addWidget(widget)

    def set_window_icon_from_path(self, path: str):
        icon = QIcon(path)
        if icon.isNull():
            return False
        pixmap: QPixmap = icon.pixmap(24, 24)
        self.icon_label.setPixmap(pixmap)
        self.icon_label.setVisible(True)
        self.setWindowIcon(icon)
        return True

    # -- Drag only from the title bar --
    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and event.position().y() <= self.TITLE_BAR_HEIGHT:
            self.handle_drag_press(event)
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        self.handle_drag_move(event)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.handle_drag_release(event)
        super().mouseReleaseEvent(event)
