""" 🚨 厳守ルール: ファイル操作禁止 🚨
ファイルI/Oは、必ず fps_unlock.core.file_handler を介すること。
"""

from PyQt6.QtCore import Qt, QPoint


class DraggableMixin:
    """Handles dragging logic for frameless windows."""

    def init_drag(self):
        self.draggable = False
        self._drag_pos = QPoint()

    def handle_drag_press(self, event):
        self._drag_pos = event.globalPosition().toPoint() - self.pos()
        self.draggable = True

    def handle_drag_move(self, event):
        if self.draggable and event.buttons() == Qt.MouseButton.LeftButton:
            self.move(event.globalPosition().toPoint() - self._drag_pos)

    def handle_drag_release(self, event):
        self.draggable = False
