"""Offense records and candidate offense batches."""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, StrictInt


class OffenseRecord(BaseModel):
    """One row of the offenses dataset."""

    identity: str
    offense_date: date
    points: int


class CandidateOffense(BaseModel):
    """One entry of an offense batch before validation.

    ``offense_date`` may be a calendar date or ``DD-MM-YYYY`` text.
    Points must be a real int; booleans, floats and numeric text are
    refused. Missing values are rejected by the aggregator, not here.
    """

    offense_date: Optional[Union[date, str]] = None
    points: Optional[StrictInt] = None
