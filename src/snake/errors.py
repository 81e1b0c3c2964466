# errors.py
class SnakeError(Exception):
    """Base class for errors raised by the snake package."""


class AssetLoadError(SnakeError):
    """An image asset is missing or unreadable. Fatal at startup."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"could not load asset {path!r}: {reason}")
        self.path = path
        self.reason = reason


class GameNotRunningError(SnakeError):
    """step_game() was called on a state that is not running."""
