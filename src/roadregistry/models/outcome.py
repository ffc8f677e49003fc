"""Operation outcomes returned by the registry facade."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from roadregistry.core.exceptions import (
    NotFoundError,
    RoadRegistryError,
    RuleViolation,
    StorageError,
    ValidationError,
)


class Outcome(StrEnum):
    SUCCESS = "SUCCESS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    RULE_VIOLATION = "RULE_VIOLATION"
    NOT_FOUND = "NOT_FOUND"
    STORAGE_ERROR = "STORAGE_ERROR"


_OUTCOME_BY_ERROR: list[tuple[type[RoadRegistryError], Outcome]] = [
    (ValidationError, Outcome.VALIDATION_ERROR),
    (RuleViolation, Outcome.RULE_VIOLATION),
    (NotFoundError, Outcome.NOT_FOUND),
    (StorageError, Outcome.STORAGE_ERROR),
]


class OperationResult(BaseModel):
    """Success/failure of a registry operation. Truthy iff it succeeded."""

    outcome: Outcome
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.SUCCESS

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, reason: str = "") -> OperationResult:
        return cls(outcome=Outcome.SUCCESS, reason=reason)

    @classmethod
    def from_error(cls, exc: RoadRegistryError) -> OperationResult:
        for error_type, outcome in _OUTCOME_BY_ERROR:
            if isinstance(exc, error_type):
                return cls(outcome=outcome, reason=str(exc))
        return cls(outcome=Outcome.STORAGE_ERROR, reason=str(exc))
