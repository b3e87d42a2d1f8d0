from __future__ import annotations

import os
from datetime import date

import pytest

# Bot modules read settings at import time
os.environ.setdefault("BOT_TOKEN", "123456:test-token")
os.environ.setdefault("BACKEND_URL", "https://backend.test")
os.environ.setdefault("BACKEND_PROJECT_ID", "project-1")
os.environ.setdefault("BACKEND_PUBLIC_KEY", "public-key")

from gymdash.core.config import get_settings  # noqa: E402
from gymdash.db.repository import InMemoryGymRepository  # noqa: E402
from factories import make_activity, make_member, make_payment  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def today() -> date:
    return date(2023, 10, 15)


@pytest.fixture
def repository() -> InMemoryGymRepository:
    return InMemoryGymRepository(
        members=[
            make_member(1, "premium"),
            make_member(2, "standard"),
            make_member(3, None),
            make_member(4, "premium"),
        ],
        payments=[
            make_payment(1, "2023-10-01", "10.50"),
            make_payment(2, "2023-10-01", "abc"),
            make_payment(3, "2023-10-12", 40),
            make_payment(4, "2023-09-30", "99.99"),
            make_payment(5, None, "20"),
        ],
        activities=[
            make_activity(1, "2023-10-15", "check-in", time="10:15 AM"),
            make_activity(2, "2023-10-14", "payment", amount="40"),
            make_activity(3, "2023-10-10", "class-booking", className="Power Yoga"),
            make_activity(4, "2023-10-02", "new-member"),
            make_activity(5, "2023-09-20", "check-in"),
            make_activity(6, "not-a-date", "check-in"),
        ],
    )
