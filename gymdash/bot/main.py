from __future__ import annotations

import asyncio

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.fsm.storage.memory import MemoryStorage

from gymdash.bot.handlers import setup_routers
from gymdash.bot.middlewares import ReportServiceMiddleware
from gymdash.core import get_settings
from gymdash.core.logging import configure_logging
from gymdash.db import get_backend_client
from gymdash.reports.service import ReportService


async def _run_bot() -> None:
    settings = get_settings()
    logger = configure_logging()

    bot = Bot(
        token=settings.bot_token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    backend = get_backend_client()
    reports = ReportService(backend, activity_limit=settings.activity_fetch_limit)

    dp = Dispatcher(storage=MemoryStorage())
    dp.message.middleware(ReportServiceMiddleware(reports))
    dp.callback_query.middleware(ReportServiceMiddleware(reports))
    dp.include_router(setup_routers())

    logger.info("Starting bot in %s environment", settings.environment)

    try:
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        # Graceful shutdown
        await backend.close()
        await bot.session.close()


def main() -> None:
    asyncio.run(_run_bot())


if __name__ == "__main__":
    main()
