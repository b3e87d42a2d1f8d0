from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from gymdash.bot.keyboards import Keyboards

router = Router(name="start")

HELP_LINES = [
    "👋 Gym dashboard reports.",
    "",
    "/report [range] – full report",
    "/revenue [range] – revenue by day or month",
    "/activity [range] – activity breakdown",
    "/recent – latest check-ins, payments and bookings",
    "",
    "Range: today, yesterday, last7Days, last30Days, thisMonth, lastMonth, "
    "last3Months, thisYear, or two dates <code>YYYY-MM-DD YYYY-MM-DD</code>.",
]


@router.message(CommandStart())
async def cmd_start(message: Message) -> None:
    await message.answer("\n".join(HELP_LINES), reply_markup=Keyboards.main_menu())


@router.message(Command("help"))
async def cmd_help(message: Message) -> None:
    await message.answer("\n".join(HELP_LINES))
