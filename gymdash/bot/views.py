"""
Text renderings of reports for the bot.

Functions here are pure: they take already-built report objects and
return HTML message bodies.
"""

from __future__ import annotations

from html import escape

from gymdash.bot.keyboards import MessageTemplates
from gymdash.reports.aggregation import AggregationBucket, bucket_total
from gymdash.reports.date_range import DateRange
from gymdash.reports.service import ActivityLine, Report


def _range_line(date_range: DateRange) -> str:
    return (
        f"{escape(date_range.label)}: "
        f"<code>{date_range.start_date}</code> – <code>{date_range.end_date}</code>"
    )


def _bucket_lines(buckets: list[AggregationBucket], *, money: bool) -> list[str]:
    lines = []
    for bucket in buckets:
        value = MessageTemplates.money(bucket.value) if money else str(bucket.value)
        lines.append(MessageTemplates.item(f"{escape(bucket.label)}: <b>{value}</b>"))
    return lines


def render_revenue(report: Report) -> str:
    lines = [
        MessageTemplates.header("Revenue Analysis", "💰"),
        _range_line(report.date_range),
        "",
    ]
    if not report.revenue:
        lines.append("No revenue data available for the selected period.")
        return "\n".join(lines)

    lines.extend(_bucket_lines(report.revenue, money=True))
    lines.append("")
    lines.append(
        MessageTemplates.stat("Total", MessageTemplates.money(bucket_total(report.revenue)))
    )
    return "\n".join(lines)


def render_activity(report: Report) -> str:
    lines = [
        MessageTemplates.header("Activity Breakdown", "🏃"),
        _range_line(report.date_range),
        "",
    ]
    if not report.activity:
        lines.append("No activity data available for the selected period.")
        return "\n".join(lines)

    lines.extend(_bucket_lines(report.activity, money=False))
    return "\n".join(lines)


def render_report(report: Report) -> str:
    summary = report.summary
    lines = [
        MessageTemplates.header("Reports & Analytics", "📊"),
        _range_line(report.date_range),
        MessageTemplates.section("Summary", "📈"),
        MessageTemplates.stat(
            "Total members", f"{summary.total_members} ({summary.premium_members} premium)"
        ),
        MessageTemplates.stat(
            "Revenue",
            f"{MessageTemplates.money(summary.total_revenue)} "
            f"({summary.payment_count} total payments)",
        ),
        MessageTemplates.stat(
            "Activity",
            f"{summary.activity_count} ({summary.check_in_count} check-ins recorded)",
        ),
        MessageTemplates.section("Revenue", "💰"),
    ]

    if report.revenue:
        lines.extend(_bucket_lines(report.revenue, money=True))
    else:
        lines.append("No revenue data available for the selected period.")

    lines.append(MessageTemplates.section("Membership Distribution", "👥"))
    if report.membership:
        lines.extend(_bucket_lines(report.membership, money=False))
    else:
        lines.append("No membership data available.")

    lines.append(MessageTemplates.section("Activity Breakdown", "🏃"))
    if report.activity:
        lines.extend(_bucket_lines(report.activity, money=False))
    else:
        lines.append("No activity data available for the selected period.")

    return "\n".join(lines)


def render_recent(activity: list[ActivityLine]) -> str:
    lines = [MessageTemplates.header("Recent Activity", "🕒"), ""]
    if not activity:
        lines.append("No activity recorded yet.")
        return "\n".join(lines)

    for line in activity:
        text = f"<b>{escape(line.member_name or 'Unknown')}</b> · {escape(line.type_label)}"
        if line.detail:
            text += f" · {escape(line.detail)}"
        if line.when:
            text += f" <i>({escape(line.when)})</i>"
        lines.append(MessageTemplates.item(text))
    return "\n".join(lines)
