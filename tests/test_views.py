from __future__ import annotations

from datetime import date

import pytest
import pytest_asyncio

from gymdash.bot.keyboards import Keyboards
from gymdash.bot.views import render_activity, render_recent, render_report, render_revenue
from gymdash.reports.date_range import RangeId
from gymdash.reports.service import ActivityLine, ReportService


@pytest_asyncio.fixture
async def october_report(repository, today):
    return await ReportService(repository).build_report("thisMonth", now=today)


@pytest.mark.asyncio
async def test_render_revenue(october_report):
    text = render_revenue(october_report)

    assert "Revenue Analysis" in text
    assert "<code>2023-10-01</code>" in text
    assert "Oct 1: <b>$10.50</b>" in text
    assert "Oct 12: <b>$40.00</b>" in text
    assert "<b>Total:</b> $50.50" in text


@pytest.mark.asyncio
async def test_render_report_sections(october_report):
    text = render_report(october_report)

    assert "4 (2 premium)" in text
    assert "$170.49 (5 total payments)" in text
    assert "6 (3 check-ins recorded)" in text
    assert "Premium: <b>2</b>" in text
    assert "Class Bookings: <b>1</b>" in text


@pytest.mark.asyncio
async def test_empty_period_messages(repository):
    report = await ReportService(repository).build_report("today", now=date(2030, 1, 1))

    assert "No revenue data available" in render_revenue(report)
    assert "No activity data available" in render_activity(report)


def test_render_recent_escapes_names():
    text = render_recent(
        [
            ActivityLine(member_name="A <b>", type_label="Payments", detail="$5.00", when="Yesterday"),
            ActivityLine(member_name="", type_label="Check-ins", when="Today"),
        ]
    )

    assert "A &lt;b&gt;" in text
    assert "$5.00" in text
    assert "<i>(Yesterday)</i>" in text
    assert "<b>Unknown</b>" in text


def test_render_recent_empty():
    assert "No activity recorded yet." in render_recent([])


def test_range_menu_marks_selection():
    markup = Keyboards.range_menu("revenue", RangeId.LAST_MONTH)

    buttons = [b for row in markup.inline_keyboard for b in row]
    assert len(buttons) == 8
    assert all(b.callback_data.startswith("revenue:") for b in buttons)
    selected = [b.text for b in buttons if b.text.startswith("✓")]
    assert selected == ["✓ Last Month"]
