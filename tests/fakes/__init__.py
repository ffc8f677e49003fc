"""Shared test doubles — memory file store plus a failure-injecting variant."""

from __future__ import annotations

from roadregistry.core.exceptions import StorageError
from roadregistry.persistence.memory_backend import MemoryFileStore


class FailingFileStore(MemoryFileStore):
    """MemoryFileStore whose writes to selected paths raise StorageError."""

    def __init__(self, fail_writes_to: set[str] | None = None) -> None:
        super().__init__()
        self.fail_writes_to = set(fail_writes_to or ())

    def write(self, path: str, data: bytes) -> str:
        if path in self.fail_writes_to:
            raise StorageError(f"injected write failure for {path!r}")
        return super().write(path, data)


__all__ = ["FailingFileStore", "MemoryFileStore"]
