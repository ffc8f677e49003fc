"""Update eligibility rules for personal details.

A person's details may change subject to:

- If the person is under 18, their address cannot be changed.
- If the birthdate changes, nothing else (ID, names, address) may change
  in the same update.
- If the first digit of the person's ID is even, the ID cannot be changed.

Every changed field must also satisfy the same grammar as on
registration. Demerit total and suspension are never touched here.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import structlog

from roadregistry.core.config import RulesConfig
from roadregistry.core.exceptions import (
    AddressChangeNotAllowed,
    BirthdateChangeNotAtomic,
    IdentityImmutable,
    ValidationError,
)
from roadregistry.models.person import PendingUpdate, PersonRecord
from roadregistry.validation.age import age_years
from roadregistry.validation.validators import (
    parse_date,
    validate_address,
    validate_identity,
)

logger = structlog.get_logger(__name__)

EVEN_DIGITS = "02468"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def has_even_leading_digit(identity: str) -> bool:
    return identity[:1] in EVEN_DIGITS if identity else False


def changed_fields(stored: PersonRecord, pending: PendingUpdate) -> list[str]:
    """Names of the personal fields whose pending value differs from storage."""
    pairs = [
        ("identity", stored.identity, pending.identity),
        ("first_name", stored.first_name, pending.first_name),
        ("last_name", stored.last_name, pending.last_name),
        ("address", stored.address, pending.address),
        ("birthdate", stored.birthdate, pending.birthdate),
    ]
    return [name for name, old, new in pairs if old != new]


def apply_update(
    stored: PersonRecord,
    pending: PendingUpdate,
    today: date,
    rules: RulesConfig | None = None,
) -> PersonRecord:
    """Check *pending* against *stored* and return the merged record.

    Raises:
        CorruptRecordError: the stored birthdate no longer parses.
        BirthdateChangeNotAtomic: birthdate changed alongside other fields.
        AddressChangeNotAllowed: address changed while under the minimum age.
        IdentityImmutable: ID changed while its leading digit is even.
        ValidationError: a changed field fails its grammar, or a name is blank.
    """
    if rules is None:
        rules = RulesConfig()

    birth = stored.birth_date()
    age = age_years(birth, today)
    changed = changed_fields(stored, pending)

    birthdate_changed = "birthdate" in changed
    if birthdate_changed:
        others = [name for name in changed if name != "birthdate"]
        if others:
            raise BirthdateChangeNotAtomic(stored.identity, others)
        parse_date(pending.birthdate)

    if "address" in changed and age < rules.address_change_min_age:
        raise AddressChangeNotAllowed(stored.identity, age, rules.address_change_min_age)

    if "identity" in changed and has_even_leading_digit(stored.identity):
        raise IdentityImmutable(stored.identity)

    if _is_blank(pending.first_name):
        raise ValidationError("first_name", "must not be blank")
    if _is_blank(pending.last_name):
        raise ValidationError("last_name", "must not be blank")

    if "address" in changed and not validate_address(pending.address):
        raise ValidationError("address", f"{pending.address!r} is not a Victorian address")

    if "identity" in changed and not validate_identity(pending.identity):
        raise ValidationError("identity", f"{pending.identity!r} does not match the ID format")

    logger.debug("update_accepted", identity=stored.identity, changed=changed)
    return stored.model_copy(
        update={
            "identity": pending.identity,
            "first_name": pending.first_name,
            "last_name": pending.last_name,
            "address": pending.address,
            "birthdate": pending.birthdate if birthdate_changed else stored.birthdate,
        }
    )
