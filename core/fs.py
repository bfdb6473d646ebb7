"""File access used to locate and read manifests."""

from pathlib import Path
from typing import Protocol


class FileAccess(Protocol):
    """Anything that can return the bytes of a file by relative path.

    Implementations raise FileNotFoundError for a missing file and OSError
    for any other read failure.
    """

    def read_bytes(self, path: str) -> bytes: ...


class LocalFileSystem:
    """Reads files relative to a directory on disk."""

    def __init__(self, root: str | Path = "."):
        self.root = Path(root)

    def read_bytes(self, path: str) -> bytes:
        return (self.root / path).read_bytes()


class MemoryFileSystem:
    """In-memory file store, mainly for tests."""

    def __init__(self, files: dict[str, bytes] | None = None):
        self._files: dict[str, bytes] = dict(files or {})

    def write_bytes(self, path: str, data: bytes) -> None:
        self._files[path] = bytes(data)

    def write_text(self, path: str, text: str, encoding: str = "utf-8") -> None:
        self.write_bytes(path, text.encode(encoding))

    def read_bytes(self, path: str) -> bytes:
        try:
            return self._files[path]
        except KeyError:
            raise FileNotFoundError(path) from None
