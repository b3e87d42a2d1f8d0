from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from factories import make_activity, make_member, make_payment
from gymdash.reports.aggregation import (
    AggregationBucket,
    Granularity,
    aggregate_count,
    aggregate_sum,
    bucket_total,
    by_activity_type,
    by_membership_type,
    category_label,
    granularity_for_range,
)
from gymdash.reports.date_range import DateRange, resolve_date_range
from gymdash.reports.filtering import filter_by_range


def test_sum_of_nothing_is_empty():
    assert aggregate_sum([], Granularity.DAY) == []
    assert aggregate_sum([], Granularity.MONTH) == []


def test_non_numeric_amounts_count_as_zero_within_october():
    payments = [
        {"amount": "10.50", "date": "2023-10-01"},
        {"amount": "abc", "date": "2023-10-01"},
        {"amount": "5", "date": "2023-11-01"},
    ]
    october = resolve_date_range("thisMonth", now=date(2023, 10, 20))

    buckets = aggregate_sum(filter_by_range(payments, october), "day")

    # The Nov 1 payment is outside October and "abc" counts as zero: 10.50, not 15.5
    assert buckets == [AggregationBucket(label="Oct 1", value=Decimal("10.50"))]


def test_day_buckets_come_out_chronologically():
    # Backend order is newest first
    payments = [
        make_payment(1, "2023-10-12", 40),
        make_payment(2, "2023-10-03", "2.50"),
        make_payment(3, "2023-10-01", "10"),
        make_payment(4, "2023-10-03", "7.5"),
    ]

    buckets = aggregate_sum(payments, Granularity.DAY)

    assert [b.label for b in buckets] == ["Oct 1", "Oct 3", "Oct 12"]
    assert [b.value for b in buckets] == [Decimal("10"), Decimal("10.0"), Decimal("40")]


def test_month_buckets():
    payments = [
        make_payment(1, "2023-01-15", "100"),
        make_payment(2, "2023-03-02", "50"),
        make_payment(3, "2023-01-31", "25.25"),
    ]

    buckets = aggregate_sum(payments, Granularity.MONTH)

    assert buckets == [
        AggregationBucket(label="Jan", value=Decimal("125.25")),
        AggregationBucket(label="Mar", value=Decimal("50")),
    ]


def test_bucket_total_matches_sum_of_included_amounts():
    payments = [
        make_payment(1, "2023-10-01", "10.50"),
        make_payment(2, "2023-10-02", "oops"),
        make_payment(3, "2023-10-02", 4),
        make_payment(4, None, "1000"),
    ]

    buckets = aggregate_sum(payments, Granularity.DAY)

    assert bucket_total(buckets) == Decimal("14.50")


def test_undated_records_are_skipped_in_sums():
    assert aggregate_sum([{"amount": "5"}], Granularity.DAY) == []


def test_count_by_activity_type_uses_display_labels():
    activities = [
        make_activity(1, "2023-10-01", "check-in"),
        make_activity(2, "2023-10-01", "payment"),
        make_activity(3, "2023-10-02", "check-in"),
        make_activity(4, "2023-10-03", "class-booking"),
        make_activity(5, "2023-10-03", "new-member"),
        make_activity(6, "2023-10-04", "guest-pass"),
        make_activity(7, "2023-10-04", ""),
    ]

    buckets = aggregate_count(activities, by_activity_type)

    assert [(b.label, b.value) for b in buckets] == [
        ("Check-ins", 2),
        ("Payments", 1),
        ("Class Bookings", 1),
        ("New Members", 1),
        ("Guest-pass", 1),
        ("Other", 1),
    ]


def test_count_by_membership_type_defaults_to_standard():
    members = [
        make_member(1, "premium"),
        make_member(2, None),
        make_member(3, "standard"),
        make_member(4, "premium"),
    ]

    buckets = aggregate_count(members, by_membership_type)

    assert [(b.label, b.value) for b in buckets] == [("Premium", 2), ("Standard", 2)]


def test_count_with_custom_classifier_and_missing_key():
    records = [{"kind": "vip"}, {"kind": None}, {"kind": "vip"}]

    buckets = aggregate_count(records, lambda r: r["kind"])

    assert [(b.label, b.value) for b in buckets] == [("Vip", 2), ("Other", 1)]


def test_classifiers_read_plain_mappings():
    assert by_activity_type({"type": "check-in"}) == "check-in"
    assert by_membership_type({"membershipType": "premium"}) == "premium"
    assert by_membership_type({}) == "standard"


@pytest.mark.parametrize(
    ("key", "label"),
    [
        ("check-in", "Check-ins"),
        ("payment", "Payments"),
        ("class-booking", "Class Bookings"),
        ("new-member", "New Members"),
        ("premium", "Premium"),
        ("aLREADY", "ALREADY"),
        ("", ""),
    ],
)
def test_category_label(key, label):
    assert category_label(key) == label


def test_granularity_follows_window_length():
    month = DateRange(start_date=date(2023, 10, 1), end_date=date(2023, 10, 31))
    quarter = resolve_date_range("last3Months", now=date(2023, 10, 15))
    year = resolve_date_range("thisYear", now=date(2023, 10, 15))

    assert granularity_for_range(month) is Granularity.DAY
    assert granularity_for_range(quarter) is Granularity.DAY
    assert granularity_for_range(year) is Granularity.MONTH


def test_window_spanning_two_years_keeps_months_apart():
    payments = [
        make_payment(1, "2022-10-05", "100"),
        make_payment(2, "2023-10-05", "1"),
    ]
    window = resolve_date_range(
        "custom", {"start_date": "2022-10-01", "end_date": "2023-10-31"}
    )
    granularity = granularity_for_range(window)

    buckets = aggregate_sum(filter_by_range(payments, window), granularity)

    assert granularity is Granularity.MONTH
    assert buckets == [
        AggregationBucket(label="Oct 2022", value=Decimal("100")),
        AggregationBucket(label="Oct 2023", value=Decimal("1")),
    ]


def test_day_labels_carry_the_year_across_new_year():
    payments = [
        make_payment(1, "2023-01-01", "5"),
        make_payment(2, "2022-12-31", "7"),
    ]

    buckets = aggregate_sum(payments, Granularity.DAY)

    assert [b.label for b in buckets] == ["Dec 31, 2022", "Jan 1, 2023"]
