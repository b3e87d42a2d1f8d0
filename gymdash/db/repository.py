from __future__ import annotations

from datetime import date
from typing import Iterable, Protocol, runtime_checkable

from gymdash.db.models import ActivityRecord, Member, Payment


@runtime_checkable
class GymRepository(Protocol):
    """
    Read-only access to the collections the reports are built from.

    Any backend can implement it; reporting code depends on nothing else.
    """

    async def fetch_activities(self, limit: int = 20) -> list[ActivityRecord]: ...

    async def fetch_activities_by_date_range(
        self,
        start: date,
        end: date,
    ) -> list[ActivityRecord]: ...

    async def fetch_members(self) -> list[Member]: ...

    async def fetch_payments(self) -> list[Payment]: ...


def _newest_first(records: Iterable[ActivityRecord]) -> list[ActivityRecord]:
    # Same ordering the backend applies: date DESC, then time DESC
    return sorted(
        records,
        key=lambda r: (r.date or date.min, r.time or ""),
        reverse=True,
    )


class InMemoryGymRepository:
    """
    Repository over fixed snapshots, used for tests and local demos.
    """

    def __init__(
        self,
        *,
        activities: Iterable[ActivityRecord] = (),
        members: Iterable[Member] = (),
        payments: Iterable[Payment] = (),
    ) -> None:
        self._activities = list(activities)
        self._members = list(members)
        self._payments = list(payments)

    async def fetch_activities(self, limit: int = 20) -> list[ActivityRecord]:
        return _newest_first(self._activities)[:limit]

    async def fetch_activities_by_date_range(
        self,
        start: date,
        end: date,
    ) -> list[ActivityRecord]:
        return [
            r
            for r in _newest_first(self._activities)
            if r.date is not None and start <= r.date <= end
        ]

    async def fetch_members(self) -> list[Member]:
        return list(self._members)

    async def fetch_payments(self) -> list[Payment]:
        return sorted(
            self._payments,
            key=lambda p: p.date or date.min,
            reverse=True,
        )
