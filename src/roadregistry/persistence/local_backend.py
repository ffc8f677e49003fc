"""Local filesystem backend implementing IFileStore."""

from __future__ import annotations

from pathlib import Path

from roadregistry.core.exceptions import StorageError


class LocalFileStore:
    """IFileStore rooted at a base directory on disk."""

    def __init__(self, base_dir: str | Path = ".") -> None:
        self._base_dir = Path(base_dir)

    def _resolve(self, path: str) -> Path:
        return self._base_dir / path

    def read(self, path: str) -> bytes:
        try:
            return self._resolve(path).read_bytes()
        except OSError as exc:
            raise StorageError(f"Read failed for {path!r}: {exc}") from exc

    def write(self, path: str, data: bytes) -> str:
        target = self._resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
            return path
        except OSError as exc:
            raise StorageError(f"Write failed for {path!r}: {exc}") from exc

    def exists(self, path: str) -> bool:
        try:
            return self._resolve(path).is_file()
        except OSError as exc:
            raise StorageError(f"Stat failed for {path!r}: {exc}") from exc
