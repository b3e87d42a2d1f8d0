from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.types import CallbackQuery, Message

from gymdash.bot.keyboards import MessageTemplates
from gymdash.bot.views import render_recent
from gymdash.core.logging import configure_logging
from gymdash.reports.service import ReportService

router = Router(name="dashboard")
logger = configure_logging()

RECENT_LIMIT = 5


async def _recent_text(reports: ReportService) -> str:
    try:
        lines = await reports.recent_activity(RECENT_LIMIT)
    except Exception as exc:
        logger.exception("Error loading recent activity: %s", exc)
        return MessageTemplates.error("Failed to load recent activity.")
    return render_recent(lines)


@router.message(Command("recent"))
async def cmd_recent(message: Message, reports: ReportService) -> None:
    """
    Latest activities with "Today" / "Yesterday" / "N days ago" labels.
    """

    await message.answer(await _recent_text(reports))


@router.callback_query(F.data == "recent")
async def on_recent(callback: CallbackQuery, reports: ReportService) -> None:
    if callback.message is not None:
        await callback.message.answer(await _recent_text(reports))
    await callback.answer()
