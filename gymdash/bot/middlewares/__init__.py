"""
Middlewares for the Telegram bot.

Currently includes:
- ReportServiceMiddleware: injects the report service into handlers.
"""

from .report_context import ReportServiceMiddleware

__all__ = ["ReportServiceMiddleware"]
