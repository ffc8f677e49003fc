"""In-memory backend for unit tests — dict-backed fake."""

from __future__ import annotations


class MemoryFileStore:
    """Dict-backed IFileStore for unit tests."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}

    def read(self, path: str) -> bytes:
        return self._files[path]

    def write(self, path: str, data: bytes) -> str:
        self._files[path] = data
        return path

    def exists(self, path: str) -> bool:
        return path in self._files

