"""
Shared UI Styles - Reusable button styles, colors, and label themes.

Usage:
    from fps_unlock.ui.styles import ButtonStyles
    btn.setStyleSheet(ButtonStyles.PRIMARY)
"""

class ButtonStyles:
    """Reusable button stylesheet templates."""

    # Default button style (gray)
    DEFAULT = """
        QPushButton {
            background-color: #3b3b3b;
            color: #fff;
            border: 1px solid #555;
            border-radius: 4px;
            padding: 6px 10px;
        }
        QPushButton:hover {
            background-color: #4a4a4a;
            border-color: #777;
        }
        QPushButton:pressed {
            background-color: #222;
            padding-top: 8px;
            padding-left: 12px;
        }
        QPushButton:disabled {
            background-color: #222;
            color: #555;
            border-color: #333;
        }
    """

    # Primary action button (blue)
    PRIMARY = """
        QPushButton {
            background-color: #2980b9;
            color: #fff;
            border: 1px solid #3498db;
            border-radius: 4px;
            padding: 6px 10px;
        }
        QPushButton:hover {
            background-color: #3498db;
            border-color: #fff;
        }
        QPushButton:pressed {
            background-color: #1a5276;
            padding-top: 8px;
            padding-left: 12px;
        }
        QPushButton:disabled {
            background-color: #1f3a4d;
            color: #777;
            border-color: #2c4a5e;
        }
    """

    # Success/Apply button (green)
    SUCCESS = """
        QPushButton {
            background-color: #27ae60;
            color: #fff;
            border: 1px solid #2ecc71;
            border-radius: 4px;
            padding: 6px 10px;
        }
        QPushButton:hover {
            background-color: #2ecc71;
            border-color: #fff;
        }
        QPushButton:pressed {
            background-color: #1e8449;
            padding-top: 8px;
            padding-left: 12px;
        }
        QPushButton:disabled {
            background-color: #1d3b2a;
            color: #777;
            border-color: #2a4d38;
        }
    """


class LabelStyles:
    """Text colors for status and headings."""

    HEADING = "color: #ecf0f1; font-size: 18px; font-weight: bold;"
    MUTED = "color: #aaa;"
    VALUE = "color: #5dade2; font-weight: bold;"
    NOTICE = "color: #f39c12;"
    STATUS_OK = "color: #2ecc71; font-weight: bold;"
    STATUS_ERROR = "color: #e74c3c; font-weight: bold;"
