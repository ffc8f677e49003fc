"""Unit tests for LocalFileStore on a temporary directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from roadregistry.core.exceptions import StorageError
from roadregistry.persistence.local_backend import LocalFileStore


@pytest.fixture
def backend(tmp_path):
    return LocalFileStore(tmp_path)


class TestReadWrite:
    def test_write_returns_path(self, backend):
        assert backend.write("persons.txt", b"a,b") == "persons.txt"

    def test_round_trip(self, backend, tmp_path):
        backend.write("persons.txt", b"row\n")
        assert backend.read("persons.txt") == b"row\n"
        assert (tmp_path / "persons.txt").read_bytes() == b"row\n"

    def test_write_creates_parent_directories(self, backend, tmp_path):
        backend.write("data/2026/demerits.txt", b"x")
        assert (tmp_path / "data" / "2026" / "demerits.txt").is_file()

    def test_read_missing_raises_storage_error(self, backend):
        with pytest.raises(StorageError):
            backend.read("missing.txt")


class TestExists:
    def test_missing(self, backend):
        assert backend.exists("persons.txt") is False

    def test_present(self, backend):
        backend.write("persons.txt", b"")
        assert backend.exists("persons.txt") is True

    def test_stat_failure_raises_storage_error(self, backend, monkeypatch):
        def denied(self):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "is_file", denied)
        with pytest.raises(StorageError):
            backend.exists("persons.txt")
