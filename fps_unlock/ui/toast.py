"""
Toast Notification Widget - floating feedback after an unlock attempt.

Usage:
    from fps_unlock.ui.toast import Toast

    self._toast = Toast(parent=self)
    self._toast.show_status("FPS successfully unlocked to 120!")
"""

import logging
from PyQt6.QtWidgets import QLabel, QGraphicsOpacityEffect
from PyQt6.QtCore import Qt, QTimer, QPropertyAnimation, QAbstractAnimation


class Toast(QLabel):
    """Floating notification label with configurable style and position."""

    COLORS = {
        'success': '#2ecc71',
        'error': '#e74c3c',
    }

    def __init__(self, parent, text="", duration=2000, y_offset=60):
        super().__init__(text, parent)
        self._duration = duration
        self._y_offset = y_offset  # Vertical position from parent top
        self._color = self.COLORS['success']

        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)

        self.anim = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.anim.setDuration(300)

        # Timer for auto-hide
        self._hide_timer = QTimer(self)
        self._hide_timer.setSingleShot(True)
        self._hide_timer.timeout.connect(self.fade_out)

        self._apply_style()
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setWordWrap(False)
        self.adjustSize()
        self.hide()

    def _apply_style(self, color=None):
        c = color or self._color
        self.setStyleSheet(f"""
            background: rgba(40, 40, 40, 230);
            color: {c};
            border: 1px solid {c};
            border-radius: 15px;
            padding: 8px 20px;
            font-weight: bold;
            font-size: 11pt;
        """)

    def show_message(self, text=None, duration=None, preset="success"):
        """Display the toast notification."""
        self._hide_timer.stop()
        if self.anim.state() == QAbstractAnimation.State.Running:
            self.anim.stop()

        # A pending fade-out would hide the new message
        try:
            self.anim.finished.disconnect(self.hide)
        except TypeError:
            pass

        if text:
            self.setText(text)

        self._color = self.COLORS[preset]
        self._apply_style(self._color)
        self.adjustSize()

        parent = self.parentWidget()
        if parent:
            x = (parent.width() - self.width()) // 2
            self.move(max(0, x), self._y_offset)

        self.show()
        self.raise_()
        logging.debug(f"[Toast] {preset}: {text}")

        # Fade In
        self.opacity_effect.setOpacity(0.0)
        self.anim.setDuration(300)
        self.anim.setStartValue(0.0)
        self.anim.setEndValue(1.0)
        self.anim.start()

        self._hide_timer.start(duration or self._duration)

    def fade_out(self):
        """Animate fade out and hide."""
        if self.anim.state() == QAbstractAnimation.State.Running:
            self.anim.stop()

        try:
            self.anim.finished.disconnect(self.hide)
        except TypeError:
            pass

        self.anim.setDuration(500)
        self.anim.setStartValue(1.0)
        self.anim.setEndValue(0.0)
        self.anim.finished.connect(self.hide)
        self.anim.start()

    def show_status(self, text, error=False):
        """Flash an unlock status line in red or green."""
        self.show_message(text, preset="error" if error else "success")
