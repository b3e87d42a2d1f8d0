from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Mapping, Optional, Sequence, Union

from pydantic import BaseModel

from gymdash.core.validation import parse_amount
from gymdash.db.models import ActivityRecord, ActivityType, Member, Payment
from gymdash.db.repository import GymRepository
from gymdash.reports.aggregation import (
    AggregationBucket,
    Granularity,
    aggregate_count,
    aggregate_sum,
    by_activity_type,
    by_membership_type,
    category_label,
    granularity_for_range,
)
from gymdash.reports.date_range import DateRange, RangeId, resolve_date_range
from gymdash.reports.filtering import filter_by_range
from gymdash.reports.relative_time import format_relative_time


logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_LIMIT = 100


class ReportSummary(BaseModel):
    total_members: int
    premium_members: int
    total_revenue: Decimal
    payment_count: int
    activity_count: int
    check_in_count: int


class Report(BaseModel):
    date_range: DateRange
    granularity: Granularity
    revenue: list[AggregationBucket]
    membership: list[AggregationBucket]
    activity: list[AggregationBucket]
    summary: ReportSummary


class ActivityLine(BaseModel):
    member_name: str
    type_label: str
    detail: Optional[str] = None
    when: str


def summarize(
    members: Sequence[Member],
    payments: Sequence[Payment],
    activities: Sequence[ActivityRecord],
) -> ReportSummary:
    """
    Headline numbers shown next to the charts.

    Computed over everything fetched, not just the selected range.
    """

    total_revenue = sum(
        (p.amount for p in payments if p.amount is not None),
        Decimal(0),
    )
    return ReportSummary(
        total_members=len(members),
        premium_members=sum(1 for m in members if m.membership_type == "premium"),
        total_revenue=total_revenue,
        payment_count=len(payments),
        activity_count=len(activities),
        check_in_count=sum(
            1 for a in activities if a.activity_type is ActivityType.CHECK_IN
        ),
    )


def describe_activity(
    record: ActivityRecord,
    now: Union[date, datetime],
) -> ActivityLine:
    detail: Optional[str] = None
    if record.activity_type is ActivityType.PAYMENT:
        amount = parse_amount(record.amount)
        if amount is not None:
            detail = f"${amount:.2f}"
    elif record.activity_type is ActivityType.CLASS_BOOKING and record.class_name:
        detail = record.class_name

    if record.date is None:
        when = record.time or ""
    else:
        when = format_relative_time(record.date, now, time=record.time)

    return ActivityLine(
        member_name=record.member_name,
        type_label=category_label(by_activity_type(record)),
        detail=detail,
        when=when,
    )


class ReportService:
    """
    Fetches the gym collections and assembles the reports screen.

    Holds no state besides its repository; every call fetches fresh data.
    """

    def __init__(
        self,
        repository: GymRepository,
        *,
        activity_limit: int = DEFAULT_ACTIVITY_LIMIT,
    ) -> None:
        self._repository = repository
        self._activity_limit = activity_limit

    async def build_report(
        self,
        range_id: Union[RangeId, str, None] = RangeId.THIS_MONTH,
        custom: Optional[Mapping[str, str]] = None,
        now: Union[date, datetime, None] = None,
    ) -> Report:
        """
        Revenue, membership and activity breakdowns for the selected range.

        Raises `InvalidRangeError` for a malformed custom range before any
        data is fetched.
        """

        date_range = resolve_date_range(range_id, custom, now=now)
        granularity = granularity_for_range(date_range)

        members = await self._repository.fetch_members()
        payments = await self._repository.fetch_payments()
        activities = await self._repository.fetch_activities(self._activity_limit)
        logger.debug(
            "Building report for %s..%s: %d members, %d payments, %d activities",
            date_range.start_date,
            date_range.end_date,
            len(members),
            len(payments),
            len(activities),
        )

        return Report(
            date_range=date_range,
            granularity=granularity,
            revenue=aggregate_sum(filter_by_range(payments, date_range), granularity),
            membership=aggregate_count(members, by_membership_type),
            activity=aggregate_count(
                filter_by_range(activities, date_range),
                by_activity_type,
            ),
            summary=summarize(members, payments, activities),
        )

    async def recent_activity(
        self,
        limit: int = 5,
        now: Union[date, datetime, None] = None,
    ) -> list[ActivityLine]:
        """
        Latest activities with relative "when" labels, newest first.
        """

        moment = now or datetime.now()
        activities = await self._repository.fetch_activities(limit)
        return [describe_activity(record, moment) for record in activities]
