from aiogram import Router

from . import dashboard, reports, start


def setup_routers() -> Router:
    """
    Aggregate and return root router for the bot.
    """

    router = Router(name="root")
    router.include_router(start.router)
    router.include_router(reports.router)
    router.include_router(dashboard.router)
    return router
