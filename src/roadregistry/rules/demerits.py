"""Demerit point aggregation and licence suspension.

Offense points must be whole numbers between 1 and 6 with a DD-MM-YYYY
offense date. The suspension verdict looks at the points accrued in the
trailing two years:

- under 21: suspended when the total exceeds 6;
- 21 and over: suspended when the total exceeds 12.

The total is recomputed from the full offense history on every call, so a
suspension clears once old offenses leave the window.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from pydantic import BaseModel

from roadregistry.core.config import RulesConfig
from roadregistry.core.exceptions import ValidationError
from roadregistry.models.offense import CandidateOffense, OffenseRecord
from roadregistry.models.person import PersonRecord
from roadregistry.validation.age import age_years, years_before
from roadregistry.validation.validators import parse_date


class DemeritAssessment(BaseModel):
    """Result of re-evaluating one person's offense history."""

    identity: str
    age: int
    window_start: date
    total: int
    suspended: bool


def resolve_offense(
    identity: str, candidate: CandidateOffense, rules: RulesConfig
) -> OffenseRecord:
    """Turn one batch entry into a storable offense, or raise ValidationError."""
    offense_date = candidate.offense_date
    if offense_date is None:
        raise ValidationError("offense_date", "missing")
    if isinstance(offense_date, str):
        offense_date = parse_date(offense_date)

    points = candidate.points
    if points is None:
        raise ValidationError("points", "missing")
    if not rules.min_points <= points <= rules.max_points:
        raise ValidationError(
            "points", f"{points} is outside {rules.min_points}-{rules.max_points}"
        )
    return OffenseRecord(identity=identity, offense_date=offense_date, points=points)


def resolve_batch(
    identity: str, batch: Sequence[CandidateOffense], rules: RulesConfig
) -> list[OffenseRecord]:
    """Validate a whole batch; one bad entry rejects all of them."""
    return [resolve_offense(identity, candidate, rules) for candidate in batch]


def window_total(
    identity: str, offenses: Iterable[OffenseRecord], window_start: date
) -> int:
    """Sum points for *identity* on or after *window_start*."""
    return sum(
        offense.points
        for offense in offenses
        if offense.identity == identity and offense.offense_date >= window_start
    )


def is_suspended(age: int, total: int, rules: RulesConfig) -> bool:
    if age < rules.probationary_age:
        return total > rules.probationary_threshold
    return total > rules.full_threshold


def assess(
    person: PersonRecord,
    offenses: Iterable[OffenseRecord],
    today: date,
    rules: RulesConfig | None = None,
) -> DemeritAssessment:
    """Recompute total and verdict for *person* from the full history.

    Raises:
        CorruptRecordError: the stored birthdate no longer parses.
    """
    if rules is None:
        rules = RulesConfig()
    age = age_years(person.birth_date(), today)
    window_start = years_before(today, rules.window_years)
    total = window_total(person.identity, offenses, window_start)
    return DemeritAssessment(
        identity=person.identity,
        age=age,
        window_start=window_start,
        total=total,
        suspended=is_suspended(age, total, rules),
    )
