"""
Reporting core: date ranges, filtering, aggregation and relative time labels.

Everything here except `service` is synchronous and pure.
"""

from .aggregation import (
    AggregationBucket,
    Granularity,
    aggregate_count,
    aggregate_sum,
    by_activity_type,
    by_membership_type,
    granularity_for_range,
)
from .date_range import DateRange, InvalidRangeError, RangeId, resolve_date_range
from .filtering import filter_by_range
from .relative_time import format_relative_time

__all__ = [
    "AggregationBucket",
    "DateRange",
    "Granularity",
    "InvalidRangeError",
    "RangeId",
    "aggregate_count",
    "aggregate_sum",
    "by_activity_type",
    "by_membership_type",
    "filter_by_range",
    "format_relative_time",
    "granularity_for_range",
    "resolve_date_range",
]
