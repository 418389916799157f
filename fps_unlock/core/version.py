"""
Ploom FPS Unlock - Version Constants
This file contains version information for the application.
Update VERSION_PATCH when code changes are made.
"""

APP_NAME = "WuWa Ploom 120 & 165 FPS Unlock"
WINDOW_TITLE = "WuWa Ploom Tools"
VERSION_MAJOR = 1
VERSION_MINOR = 1
VERSION_PATCH = 0
VERSION = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"
VERSION_STRING = f"{APP_NAME} v{VERSION}"

AUTHOR = "abellio"
GITHUB_URL = "https://github.com/jakubs7"
KOFI_URL = "https://ko-fi.com/abellio"
