"""Exceptions raised by the core layer. The UI only ever shows ``str(err)``."""


class UnlockError(Exception):
    """Base class for every failure the unlocker reports to the user."""


class RegistryError(UnlockError):
    """Raised when the game install location cannot be read from the registry."""
    def __init__(self, message="Registry error: Could not access the registry key or value."):
        super().__init__(message)


class DatabaseNotFoundError(UnlockError):
    """Raised when the settings database does not exist at the given path."""
    def __init__(self, path: str):
        self.path = path
        if path:
            message = f"File not found or inaccessible: {path}"
        else:
            message = "No configuration file selected."
        super().__init__(message)


class DatabaseError(UnlockError):
    """Raised when the file cannot be used as the game's settings database."""
    def __init__(self, detail):
        super().__init__(f"Database error: {detail}")


class SettingMissingError(UnlockError):
    """Raised when the quality setting row or the FPS member is absent."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} not found")


class SettingFormatError(UnlockError):
    """Raised when the stored quality setting is not in the expected JSON shape."""
    def __init__(self, detail):
        super().__init__(f"JSON error: {detail}")
