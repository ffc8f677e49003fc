"""Type aliases used across RoadRegistry."""

from __future__ import annotations

from datetime import date
from typing import Callable

Clock = Callable[[], date]
