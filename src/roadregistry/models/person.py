"""Person records as stored in the people dataset."""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, Field

from roadregistry.core.exceptions import CorruptRecordError, ValidationError
from roadregistry.validation.validators import parse_date


class PersonRecord(BaseModel):
    """One row of the people dataset.

    The birthdate is kept as its stored ``DD-MM-YYYY`` text so that a
    corrupt value survives a rewrite and can be detected when a rule needs
    the calendar date. Fields past the seventh are carried in
    ``trailing_fields`` and written back after the flag.
    """

    identity: str
    first_name: str
    last_name: str
    address: str
    birthdate: str
    demerit_total: int = Field(default=0, ge=0)
    suspended: bool = False
    trailing_fields: list[str] = Field(default_factory=list)

    def birth_date(self) -> date:
        """Parsed birthdate; raises CorruptRecordError if the stored text is bad."""
        try:
            return parse_date(self.birthdate)
        except ValidationError as exc:
            raise CorruptRecordError(self.identity, "birthdate", self.birthdate) from exc


class PersonDraft(BaseModel):
    """Personal details supplied by a caller.

    Demerit total and suspension are never client-settable, so they are
    absent here.
    """

    identity: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    birthdate: Optional[str] = None


class PendingUpdate(PersonDraft):
    """Desired end state of a person's details for an update."""


class RawLine(BaseModel):
    """A dataset line that did not parse; written back verbatim.

    ``identity`` is set when the line has a full set of fields but a
    corrupt total or flag, so the identity stays taken and addressable.
    """

    text: str
    identity: Optional[str] = None


PersonRow = Union[PersonRecord, RawLine]
