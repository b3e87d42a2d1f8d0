from __future__ import annotations

from typing import Callable

from aiogram import F, Router
from aiogram.filters import Command, CommandObject
from aiogram.types import CallbackQuery, Message

from gymdash.bot.keyboards import Keyboards, MessageTemplates
from gymdash.bot.views import render_activity, render_report, render_revenue
from gymdash.core.logging import configure_logging
from gymdash.db import BackendError
from gymdash.reports.date_range import InvalidRangeError, RangeId, parse_range_id
from gymdash.reports.service import Report, ReportService

router = Router(name="reports")
logger = configure_logging()

_VIEWS: dict[str, tuple[Callable[[Report], str], RangeId]] = {
    "report": (render_report, RangeId.THIS_MONTH),
    "revenue": (render_revenue, RangeId.THIS_MONTH),
    "activity": (render_activity, RangeId.LAST_7_DAYS),
}


def parse_range_args(
    args: str | None,
    default: RangeId,
) -> tuple[RangeId, dict[str, str] | None]:
    """
    Turn command arguments into a range id and optional custom bounds.

    One argument is a range id; two arguments are custom start/end dates.
    """

    parts = (args or "").split()
    if not parts:
        return default, None
    if len(parts) >= 2:
        return RangeId.CUSTOM, {"start_date": parts[0], "end_date": parts[1]}
    return parse_range_id(parts[0]), None


async def _render(
    view: str,
    reports: ReportService,
    range_id: RangeId,
    custom: dict[str, str] | None = None,
) -> str:
    renderer, _ = _VIEWS[view]
    try:
        report = await reports.build_report(range_id, custom)
    except InvalidRangeError as exc:
        return MessageTemplates.error(
            f"{exc}. Use dates like <code>2024-01-31</code>."
        )
    except BackendError as exc:
        logger.exception("Backend error building %s: %s", view, exc)
        return MessageTemplates.error("Failed to load report data. Please try again.")
    except Exception as exc:
        logger.exception("Error building %s: %s", view, exc)
        return MessageTemplates.error("Failed to build the report.")
    return renderer(report)


async def _answer_view(
    view: str,
    message: Message,
    command: CommandObject,
    reports: ReportService,
) -> None:
    _, default = _VIEWS[view]
    range_id, custom = parse_range_args(command.args, default)
    text = await _render(view, reports, range_id, custom)
    await message.answer(text, reply_markup=Keyboards.range_menu(view, range_id))


@router.message(Command("report"))
async def cmd_report(message: Message, command: CommandObject, reports: ReportService) -> None:
    """
    Full report: summary, revenue, membership and activity breakdowns.
    """

    await _answer_view("report", message, command, reports)


@router.message(Command("revenue"))
async def cmd_revenue(message: Message, command: CommandObject, reports: ReportService) -> None:
    await _answer_view("revenue", message, command, reports)


@router.message(Command("activity"))
async def cmd_activity(message: Message, command: CommandObject, reports: ReportService) -> None:
    await _answer_view("activity", message, command, reports)


@router.callback_query(F.data.regexp(r"^(report|revenue|activity):\w+$"))
async def on_range_selected(callback: CallbackQuery, reports: ReportService) -> None:
    """
    Re-render the current view for the range picked on the keyboard.
    """

    view, _, raw_range = callback.data.partition(":")
    range_id = parse_range_id(raw_range)
    text = await _render(view, reports, range_id)

    if callback.message is not None:
        await callback.message.edit_text(
            text,
            reply_markup=Keyboards.range_menu(view, range_id),
        )
    await callback.answer()
