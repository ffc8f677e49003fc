"""Tests for person records and operation outcomes."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from roadregistry.core.exceptions import (
    CorruptRecordError,
    IdentityImmutable,
    NotFoundError,
    StorageError,
    ValidationError,
)
from roadregistry.models.offense import CandidateOffense
from roadregistry.models.outcome import OperationResult, Outcome
from roadregistry.models.person import PendingUpdate, PersonRecord


def _record(**overrides) -> PersonRecord:
    fields = dict(
        identity="23ab!#XYKZ", first_name="John", last_name="Doe",
        address="12|Main Street|Melbourne|Victoria|Australia", birthdate="15-04-1995",
    )
    fields.update(overrides)
    return PersonRecord(**fields)


def test_new_record_defaults_to_zero_and_unsuspended():
    record = _record()
    assert record.demerit_total == 0
    assert record.suspended is False


def test_negative_total_rejected():
    with pytest.raises(PydanticValidationError):
        _record(demerit_total=-1)


def test_birth_date_parses_stored_text():
    assert _record().birth_date() == date(1995, 4, 15)


def test_birth_date_corrupt_raises():
    with pytest.raises(CorruptRecordError) as exc_info:
        _record(birthdate="15/04/1995").birth_date()
    assert exc_info.value.field == "birthdate"


def test_pending_update_fields_default_to_none():
    assert PendingUpdate().model_dump() == {
        "identity": None, "first_name": None, "last_name": None, "address": None, "birthdate": None,
    }


def test_candidate_offense_keeps_text_dates_as_text():
    assert CandidateOffense(offense_date="2026-03-01", points=2).offense_date == "2026-03-01"


@pytest.mark.parametrize("points", [True, 2.0, "3"])
def test_candidate_offense_points_must_be_int(points):
    with pytest.raises(PydanticValidationError):
        CandidateOffense(offense_date="01-03-2026", points=points)


class TestOperationResult:
    def test_success_is_truthy(self):
        result = OperationResult.success("done")
        assert result.ok and bool(result)
        assert result.outcome == Outcome.SUCCESS

    @pytest.mark.parametrize("exc, outcome", [
        (ValidationError("address", "bad"), Outcome.VALIDATION_ERROR),
        (IdentityImmutable("23ab!#XYKZ"), Outcome.RULE_VIOLATION),
        (NotFoundError("23ab!#XYKZ"), Outcome.NOT_FOUND),
        (StorageError("disk full"), Outcome.STORAGE_ERROR),
        (CorruptRecordError("23ab!#XYKZ", "birthdate", "x"), Outcome.STORAGE_ERROR),
    ])
    def test_from_error_maps_taxonomy(self, exc, outcome):
        result = OperationResult.from_error(exc)
        assert not result
        assert result.outcome == outcome
        assert result.reason == str(exc)
