"""Field grammars for identities, addresses and dates.

Identity: exactly 10 characters. The first two are digits 2-9, at least
two of positions 2-7 are neither letters nor digits, and the last two are
uppercase A-Z. Example: ``56s_d%&fAB``.

Address: ``StreetNumber|Street|City|State|Country`` with State ``Victoria``.
Example: ``32|Highland Street|Melbourne|Victoria|Australia``.

Date: ``DD-MM-YYYY``, calendar-valid. Example: ``15-11-1990``.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from roadregistry.core.exceptions import ValidationError

IDENTITY_LENGTH = 10
LEADING_DIGITS = "23456789"
MIN_SPECIAL_CHARS = 2
ADDRESS_SEPARATOR = "|"
ADDRESS_COMPONENTS = 5
ADDRESS_STATE_INDEX = 3
REQUIRED_STATE = "Victoria"
DATE_FORMAT = "%d-%m-%Y"

_DATE_SHAPE = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")


def _is_upper_ascii(ch: str) -> bool:
    return "A" <= ch <= "Z"


def validate_identity(identity: Optional[str]) -> bool:
    """Return True iff *identity* matches the person ID grammar."""
    if identity is None or len(identity) != IDENTITY_LENGTH:
        return False
    if identity[0] not in LEADING_DIGITS or identity[1] not in LEADING_DIGITS:
        return False
    specials = sum(1 for ch in identity[2:8] if not ch.isalnum())
    if specials < MIN_SPECIAL_CHARS:
        return False
    return _is_upper_ascii(identity[8]) and _is_upper_ascii(identity[9])


def validate_address(address: Optional[str]) -> bool:
    """Return True iff *address* has five ``|`` parts and the state is Victoria."""
    if address is None:
        return False
    parts = address.split(ADDRESS_SEPARATOR)
    if len(parts) != ADDRESS_COMPONENTS:
        return False
    return parts[ADDRESS_STATE_INDEX] == REQUIRED_STATE


def parse_date(text: Optional[str]) -> date:
    """Parse ``DD-MM-YYYY`` strictly.

    Out-of-range fields (``31-04-2020``, ``29-02-2023``) are rejected rather
    than rolled over into the next month.

    Raises:
        ValidationError: if *text* is missing, mis-shaped or not a real date.
    """
    if text is None:
        raise ValidationError("date", "missing")
    if not _DATE_SHAPE.fullmatch(text):
        raise ValidationError("date", f"{text!r} is not DD-MM-YYYY")
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as exc:
        raise ValidationError("date", f"{text!r} is not a calendar date") from exc


def format_date(value: date) -> str:
    """Serialise *value* back through the ``DD-MM-YYYY`` grammar."""
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


def is_valid_date(text: Optional[str]) -> bool:
    try:
        parse_date(text)
    except ValidationError:
        return False
    return True


_UNSTORABLE = (",", "\n", "\r")


def ensure_storable(field: str, value: Optional[str]) -> None:
    """Reject values that would break the comma-delimited dataset line.

    Raises:
        ValidationError: if *value* contains a field separator or line break.
    """
    if value is not None and any(ch in value for ch in _UNSTORABLE):
        raise ValidationError(field, f"{value!r} contains a separator or line break")
