"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from pathlib import Path

from roadregistry.core.config import AppSettings
from roadregistry.core.protocols import IFileStore
from roadregistry.persistence.local_backend import LocalFileStore
from roadregistry.persistence.memory_backend import MemoryFileStore
from roadregistry.persistence.record_store import RecordStore
from roadregistry.persistence.s3_backend import S3FileStore


def create_file_store(settings: AppSettings | None = None) -> IFileStore:
    """Create the file store selected by ``settings.storage.backend``."""
    if settings is None:
        settings = AppSettings()

    backend = settings.storage.backend
    if backend == "s3":
        return S3FileStore(
            bucket=settings.s3.bucket,
            region=settings.s3.region,
            endpoint_url=settings.s3.endpoint_url,
        )
    if backend == "memory":
        return MemoryFileStore()
    return LocalFileStore(Path(settings.storage.data_dir))


def create_persistence(settings: AppSettings | None = None) -> RecordStore:
    """Create a wired-up record store from application settings."""
    if settings is None:
        settings = AppSettings()

    return RecordStore(
        create_file_store(settings),
        people_path=settings.storage.people_file,
        offenses_path=settings.storage.offenses_file,
    )
