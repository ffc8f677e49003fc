"""Line-oriented people and offenses datasets on top of an IFileStore.

People:   identity,firstName,lastName,address,birthdate,demeritTotal,suspended
Offenses: identity,offenseDate,points

No header row and no escaping. A missing dataset reads as empty and is
created on first write. People rows may carry fields past the seventh;
they are kept and written back. Lines that do not parse are kept as
RawLine and written back untouched.
"""

from __future__ import annotations

import re

import structlog

from roadregistry.core.exceptions import StorageError, ValidationError
from roadregistry.core.protocols import IFileStore
from roadregistry.models.offense import OffenseRecord
from roadregistry.models.person import PersonRecord, PersonRow, RawLine
from roadregistry.validation.validators import format_date, parse_date

logger = structlog.get_logger(__name__)

FIELD_SEPARATOR = ","
PERSON_FIELDS = 7
OFFENSE_FIELDS = 3
ENCODING = "utf-8"

_NON_NEGATIVE_INT = re.compile(r"[0-9]+")
_INT = re.compile(r"-?[0-9]+")
_BOOLEANS = {"true": True, "false": False}


def split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def join_lines(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def parse_person_line(line: str) -> PersonRow:
    """Parse one people row; short rows and corrupt totals come back as RawLine."""
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < PERSON_FIELDS:
        return RawLine(text=line)
    identity, first, last, address, birthdate, total, suspended = parts[:PERSON_FIELDS]
    if not _NON_NEGATIVE_INT.fullmatch(total) or suspended not in _BOOLEANS:
        return RawLine(text=line, identity=identity)
    return PersonRecord(
        identity=identity,
        first_name=first,
        last_name=last,
        address=address,
        birthdate=birthdate,
        demerit_total=int(total),
        suspended=_BOOLEANS[suspended],
        trailing_fields=parts[PERSON_FIELDS:],
    )


def format_person(row: PersonRow) -> str:
    if isinstance(row, RawLine):
        return row.text
    return FIELD_SEPARATOR.join([
        row.identity,
        row.first_name,
        row.last_name,
        row.address,
        row.birthdate,
        str(row.demerit_total),
        "true" if row.suspended else "false",
        *row.trailing_fields,
    ])


def parse_offense_line(line: str) -> OffenseRecord | None:
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != OFFENSE_FIELDS:
        return None
    identity, offense_date, points = parts
    if not _INT.fullmatch(points):
        return None
    try:
        parsed_date = parse_date(offense_date)
    except ValidationError:
        return None
    return OffenseRecord(identity=identity, offense_date=parsed_date, points=int(points))


def format_offense(record: OffenseRecord) -> str:
    return FIELD_SEPARATOR.join([
        record.identity,
        format_date(record.offense_date),
        str(record.points),
    ])


class RecordStore:
    """IRecordStore over two dataset files in an IFileStore."""

    def __init__(self, file_store: IFileStore, people_path: str = "persons.txt",
                 offenses_path: str = "demerits.txt") -> None:
        self._files = file_store
        self._people_path = people_path
        self._offenses_path = offenses_path

    @property
    def people_path(self) -> str:
        return self._people_path

    @property
    def offenses_path(self) -> str:
        return self._offenses_path

    def _read_text(self, path: str) -> str:
        if not self._files.exists(path):
            return ""
        try:
            return self._files.read(path).decode(ENCODING)
        except UnicodeDecodeError as exc:
            raise StorageError(f"Dataset {path!r} is not valid {ENCODING}: {exc}") from exc

    def _write_text(self, path: str, text: str) -> None:
        self._files.write(path, text.encode(ENCODING))

    def read_people(self) -> list[PersonRow]:
        return [parse_person_line(line) for line in split_lines(self._read_text(self._people_path))]

    def write_people(self, rows: list[PersonRow]) -> None:
        self._write_text(self._people_path, join_lines([format_person(row) for row in rows]))
        logger.debug("people_written", path=self._people_path, rows=len(rows))

    def read_offenses(self) -> list[OffenseRecord]:
        records: list[OffenseRecord] = []
        for line in split_lines(self._read_text(self._offenses_path)):
            record = parse_offense_line(line)
            if record is not None:
                records.append(record)
        return records

    def append_offenses(self, records: list[OffenseRecord]) -> None:
        if not records:
            return
        existing = self._read_text(self._offenses_path)
        if existing and not existing.endswith("\n"):
            existing += "\n"
        added = join_lines([format_offense(record) for record in records])
        self._write_text(self._offenses_path, existing + added)
        logger.debug("offenses_appended", path=self._offenses_path, rows=len(records))
