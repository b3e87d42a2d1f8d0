from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, HttpUrl, ValidationError


class Settings(BaseModel):
    bot_token: str
    backend_url: HttpUrl
    backend_project_id: str
    backend_public_key: str
    activity_fetch_limit: int = Field(default=100, gt=0)
    environment: Literal["local", "staging", "production"] = "local"

    @property
    def is_debug(self) -> bool:
        return self.environment == "local"


def _build_settings() -> Settings:
    # Load .env file once on first settings build (for local development)
    load_dotenv()

    try:
        return Settings(
            bot_token=os.environ["BOT_TOKEN"],
            backend_url=os.environ["BACKEND_URL"],
            backend_project_id=os.environ["BACKEND_PROJECT_ID"],
            backend_public_key=os.environ["BACKEND_PUBLIC_KEY"],
            activity_fetch_limit=os.getenv("ACTIVITY_FETCH_LIMIT", "100"),
            environment=os.getenv("ENVIRONMENT", "local"),
        )
    except KeyError as exc:
        required_keys = (
            "BOT_TOKEN",
            "BACKEND_URL",
            "BACKEND_PROJECT_ID",
            "BACKEND_PUBLIC_KEY",
        )
        missing = [key for key in required_keys if key not in os.environ]
        raise RuntimeError(
            f"Missing required environment variables: {', '.join(missing)}"
        ) from exc
    except ValidationError as exc:
        raise RuntimeError(f"Invalid settings: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Cached accessor for application settings.

    Reads environment variables once and validates them with Pydantic.
    """

    return _build_settings()
