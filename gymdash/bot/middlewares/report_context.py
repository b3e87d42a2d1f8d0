from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from gymdash.reports.service import ReportService


class ReportServiceMiddleware(BaseMiddleware):
    """
    Middleware that attaches the shared report service to handler data.

    Handlers receive it as the `reports` keyword argument.
    """

    def __init__(self, service: ReportService) -> None:
        self._service = service

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        data["reports"] = self._service
        return await handler(event, data)
