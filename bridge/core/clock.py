"""Clock used to stamp newly created records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass
class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass
class FixedClock:
    """Clock frozen at a given instant (tests, replays)."""

    at: datetime

    def now(self) -> datetime:
        return self.at
