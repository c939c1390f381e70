# errors.py


class CatcherError(Exception):
    """Base class for fatal startup errors."""


class InitializationError(CatcherError):
    """A platform subsystem (video, audio, window) failed to start."""


class AssetLoadError(CatcherError):
    """An image or music file is missing or could not be decoded."""

    def __init__(self, path, reason: str = "") -> None:
        self.path = path
        msg = f"Unable to load {path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
