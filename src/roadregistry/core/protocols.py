"""Protocol interfaces for RoadRegistry abstractions.

Storage collaborators are expressed as Protocols: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from roadregistry.models.offense import OffenseRecord
from roadregistry.models.person import PersonRow


# ---------------------------------------------------------------------------
# Persistence: File Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileStore(Protocol):
    """Whole-object storage for dataset files (filesystem, S3, memory)."""

    def read(self, path: str) -> bytes: ...

    def write(self, path: str, data: bytes) -> str: ...

    def exists(self, path: str) -> bool: ...


# ---------------------------------------------------------------------------
# Persistence: Record Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IRecordStore(Protocol):
    """Read-all / write-all access to the people and offenses datasets."""

    def read_people(self) -> list[PersonRow]: ...

    def write_people(self, rows: list[PersonRow]) -> None: ...

    def read_offenses(self) -> list[OffenseRecord]: ...

    def append_offenses(self, records: list[OffenseRecord]) -> None: ...
