"""Registry facade: register people, update details, record offenses.

Every mutating operation reads the whole dataset, decides in memory and
rewrites only on acceptance. Failures come back as an OperationResult;
nothing in the RoadRegistryError tree escapes.

``record_offenses`` appends offense rows before rewriting the people
dataset. If the second write fails the offense rows stay appended without
an updated total, so a failed result means the datasets may need
reconciliation.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional, Sequence, Union

import structlog

from roadregistry.core.config import AppSettings, RulesConfig
from roadregistry.core.exceptions import (
    CorruptRecordError,
    DuplicateIdentity,
    NotFoundError,
    RoadRegistryError,
    ValidationError,
)
from roadregistry.core.protocols import IRecordStore
from roadregistry.core.types import Clock
from roadregistry.models.offense import CandidateOffense, OffenseRecord
from roadregistry.models.outcome import OperationResult, Outcome
from roadregistry.models.person import (
    PendingUpdate,
    PersonDraft,
    PersonRecord,
    PersonRow,
    RawLine,
)
from roadregistry.persistence import create_persistence
from roadregistry.rules.demerits import assess, resolve_batch
from roadregistry.rules.update_rules import apply_update
from roadregistry.validation.validators import (
    ensure_storable,
    parse_date,
    validate_address,
    validate_identity,
)

logger = structlog.get_logger(__name__)

OffenseInput = Union[CandidateOffense, tuple]

_DRAFT_FIELDS = ("identity", "first_name", "last_name", "address", "birthdate")


def _find(rows: list[PersonRow], identity: str) -> int | None:
    """Index of the first row holding *identity*, corrupt rows included."""
    for index, row in enumerate(rows):
        if row.identity == identity:
            return index
    return None


def _person_at(rows: list[PersonRow], index: int) -> PersonRecord:
    row = rows[index]
    if isinstance(row, RawLine):
        raise CorruptRecordError(row.identity or "", "record", row.text)
    return row


def _ensure_draft_storable(draft: PersonDraft) -> None:
    for field in _DRAFT_FIELDS:
        ensure_storable(field, getattr(draft, field))


def _to_candidates(batch: Iterable[OffenseInput]) -> list[CandidateOffense]:
    candidates: list[CandidateOffense] = []
    for entry in batch:
        if isinstance(entry, CandidateOffense):
            candidates.append(entry)
            continue
        try:
            offense_date, points = entry
            candidates.append(CandidateOffense(offense_date=offense_date, points=points))
        except (TypeError, ValueError) as exc:
            # pydantic's ValidationError is a ValueError
            raise ValidationError("offense", f"{entry!r} is not a (date, points) pair") from exc
    return candidates


class RoadRegistry:
    """Facade over the record store and the rule modules."""

    def __init__(
        self,
        store: IRecordStore,
        *,
        rules: RulesConfig | None = None,
        today: Clock = date.today,
    ) -> None:
        self._store = store
        self._rules = rules or RulesConfig()
        self._today = today

    # ------------------------------------------------------------------
    # Use cases
    # ------------------------------------------------------------------

    def register(self, draft: PersonDraft) -> OperationResult:
        """Validate *draft* and append it with a zero total, unsuspended."""
        return self._run("register", draft.identity, lambda: self._register(draft))

    def update(
        self, pending: PendingUpdate, current_identity: Optional[str] = None
    ) -> OperationResult:
        """Apply *pending* to the person found by *current_identity*.

        The lookup defaults to ``pending.identity``; pass the current
        identity separately to change an ID.
        """
        lookup = current_identity if current_identity is not None else pending.identity
        return self._run("update", lookup, lambda: self._update(pending, lookup))

    def record_offenses(
        self, identity: str, batch: Sequence[OffenseInput]
    ) -> OperationResult:
        """Append *batch* for *identity* and re-evaluate total and suspension.

        Entries are CandidateOffense or ``(date_or_text, points)`` pairs.
        """
        return self._run(
            "record_offenses", identity, lambda: self._record_offenses(identity, batch)
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_person(self, identity: str) -> PersonRecord | None:
        """Stored record for *identity*; CorruptRecordError if its row is unreadable."""
        rows = self._store.read_people()
        index = _find(rows, identity)
        return None if index is None else _person_at(rows, index)

    def offense_history(self, identity: str) -> list[OffenseRecord]:
        return [o for o in self._store.read_offenses() if o.identity == identity]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run(self, operation: str, identity: Optional[str],
             action: Callable[[], str]) -> OperationResult:
        log = logger.bind(operation=operation, identity=identity)
        try:
            message = action()
        except RoadRegistryError as exc:
            result = OperationResult.from_error(exc)
            if result.outcome == Outcome.STORAGE_ERROR:
                log.error("operation_failed", outcome=str(result.outcome), reason=result.reason)
            else:
                log.warning("operation_rejected", outcome=str(result.outcome), reason=result.reason)
            return result
        log.info("operation_succeeded", detail=message)
        return OperationResult.success(message)

    def _register(self, draft: PersonDraft) -> str:
        if not validate_identity(draft.identity):
            raise ValidationError("identity", f"{draft.identity!r} does not match the ID format")
        for field in ("first_name", "last_name"):
            value = getattr(draft, field)
            if value is None or not value.strip():
                raise ValidationError(field, "must not be blank")
        if not validate_address(draft.address):
            raise ValidationError("address", f"{draft.address!r} is not a Victorian address")
        parse_date(draft.birthdate)
        _ensure_draft_storable(draft)

        rows = self._store.read_people()
        if _find(rows, draft.identity) is not None:
            raise DuplicateIdentity(draft.identity)

        record = PersonRecord(
            identity=draft.identity,
            first_name=draft.first_name,
            last_name=draft.last_name,
            address=draft.address,
            birthdate=draft.birthdate,
        )
        self._store.write_people(rows + [record])
        return "person registered"

    def _update(self, pending: PendingUpdate, lookup: Optional[str]) -> str:
        if lookup is None:
            raise ValidationError("identity", "missing")
        _ensure_draft_storable(pending)

        rows = self._store.read_people()
        index = _find(rows, lookup)
        if index is None:
            raise NotFoundError(lookup)
        stored = _person_at(rows, index)
        merged = apply_update(stored, pending, self._today(), self._rules)

        if merged.identity != lookup and _find(rows, merged.identity) is not None:
            raise DuplicateIdentity(merged.identity)

        rows[index] = merged
        self._store.write_people(rows)
        return "person updated"

    def _record_offenses(self, identity: str, batch: Sequence[OffenseInput]) -> str:
        rows = self._store.read_people()
        index = _find(rows, identity)
        if index is None:
            raise NotFoundError(identity)
        person = _person_at(rows, index)
        person.birth_date()

        new_offenses = resolve_batch(identity, _to_candidates(batch), self._rules)
        self._store.append_offenses(new_offenses)

        assessment = assess(person, self._store.read_offenses(), self._today(), self._rules)
        rows[index] = person.model_copy(
            update={"demerit_total": assessment.total, "suspended": assessment.suspended}
        )
        self._store.write_people(rows)
        return (
            f"{len(new_offenses)} offense(s) recorded; total {assessment.total}, "
            f"suspended {assessment.suspended}"
        )


def create_registry(settings: AppSettings | None = None,
                    today: Clock = date.today) -> RoadRegistry:
    """Build a RoadRegistry wired to the configured storage backend."""
    if settings is None:
        settings = AppSettings()
    return RoadRegistry(create_persistence(settings), rules=settings.rules, today=today)
