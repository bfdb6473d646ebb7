"""Errors raised while loading a manifest."""


class ManifestError(Exception):
    """Base class for manifest loading failures."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ManifestNotFoundError(ManifestError):
    """The manifest file does not exist."""


class ManifestReadError(ManifestError):
    """The manifest file exists but could not be read."""


class ManifestParseError(ManifestError):
    """The manifest bytes are not a valid package.json document."""
