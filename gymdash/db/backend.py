from __future__ import annotations

import logging
from datetime import date
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from gymdash.core import Settings, get_settings
from gymdash.db.models import ActivityRecord, BackendRecord, Member, Payment


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BackendRecord)


ACTIVITY_TABLE = "Activity1"
MEMBER_TABLE = "member"
PAYMENT_TABLE = "payment"

_ACTIVITY_FIELDS = ("Id", "Name", "type", "time", "amount", "className", "date")
_MEMBER_FIELDS = (
    "Id",
    "Name",
    "firstName",
    "lastName",
    "email",
    "phone",
    "membershipType",
    "emergencyContact",
    "checkedIn",
    "expiryDate",
)
_PAYMENT_FIELDS = (
    "Id",
    "Name",
    "memberId",
    "amount",
    "date",
    "paymentMethod",
    "description",
)
_NEWEST_ACTIVITY_FIRST = [
    {"field": "date", "direction": "DESC"},
    {"field": "time", "direction": "DESC"},
]


class BackendError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, detail: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


def _validate_rows(model: type[RecordT], table: str, items: list[Any]) -> list[RecordT]:
    """
    Validate backend rows, leaving out the ones that do not fit the model.
    """

    records: list[RecordT] = []
    for item in items:
        try:
            records.append(model.model_validate(item))
        except ValidationError as exc:
            logger.warning(
                "Skipping invalid '%s' row: %s", table, exc.errors(include_url=False)
            )
    return records


class BackendClient:
    """
    Minimal async client for the hosted records backend.

    Read-only: it implements `GymRepository` and nothing more.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        base_url = str(self._settings.backend_url).rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "X-Project-Id": self._settings.backend_project_id,
                "X-Public-Key": self._settings.backend_public_key,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=10.0,
            transport=transport,
        )

    async def close(self) -> None:
        await self._http.aclose()

    async def _fetch_records(
        self,
        table: str,
        *,
        fields: tuple[str, ...],
        order_by: list[dict[str, str]] | None = None,
        where: list[dict[str, Any]] | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        payload: dict[str, Any] = {
            "fields": list(fields),
            "pagingInfo": {"limit": limit, "offset": offset},
        }
        if order_by:
            payload["orderBy"] = order_by
        if where:
            payload["where"] = where

        try:
            response = await self._http.post(f"/tables/{table}/fetch", json=payload)
        except httpx.HTTPError as exc:
            raise BackendError(f"Backend request failed for '{table}'", detail=str(exc)) from exc

        if response.status_code >= 400:
            raise BackendError(
                f"Backend fetch failed for '{table}'",
                status_code=response.status_code,
                detail=response.text,
            )
        try:
            body = response.json()
        except ValueError as exc:
            raise BackendError(
                f"Backend returned a non-JSON body for '{table}'",
                status_code=response.status_code,
                detail=response.text,
            ) from exc
        if not isinstance(body, dict):
            raise BackendError(f"Unexpected response shape for '{table}'", detail=response.text)
        items = body.get("data")
        if items is None:
            return []
        if not isinstance(items, list):
            raise BackendError(f"Unexpected response shape for '{table}'", detail=response.text)
        return items

    async def fetch_activities(self, limit: int = 20) -> list[ActivityRecord]:
        """
        Most recent activities, newest first.
        """

        items = await self._fetch_records(
            ACTIVITY_TABLE,
            fields=_ACTIVITY_FIELDS,
            order_by=_NEWEST_ACTIVITY_FIRST,
            limit=limit,
        )
        return _validate_rows(ActivityRecord, ACTIVITY_TABLE, items)

    async def fetch_activities_by_date_range(
        self,
        start: date,
        end: date,
    ) -> list[ActivityRecord]:
        """
        Activities whose date falls in [start, end], filtered server-side.
        """

        items = await self._fetch_records(
            ACTIVITY_TABLE,
            fields=_ACTIVITY_FIELDS,
            order_by=_NEWEST_ACTIVITY_FIRST,
            where=[
                {
                    "fieldName": "date",
                    "operator": "GreaterThanOrEqualTo",
                    "values": [start.isoformat()],
                },
                {
                    "fieldName": "date",
                    "operator": "LessThanOrEqualTo",
                    "values": [end.isoformat()],
                },
            ],
        )
        return _validate_rows(ActivityRecord, ACTIVITY_TABLE, items)

    async def fetch_members(self) -> list[Member]:
        items = await self._fetch_records(MEMBER_TABLE, fields=_MEMBER_FIELDS)
        return _validate_rows(Member, MEMBER_TABLE, items)

    async def fetch_payments(self) -> list[Payment]:
        items = await self._fetch_records(
            PAYMENT_TABLE,
            fields=_PAYMENT_FIELDS,
            order_by=[{"field": "date", "direction": "DESC"}],
        )
        return _validate_rows(Payment, PAYMENT_TABLE, items)


_backend_client: BackendClient | None = None


def get_backend_client() -> BackendClient:
    """
    Lazy singleton for BackendClient.

    The bot closes it on shutdown.
    """

    global _backend_client
    if _backend_client is None:
        _backend_client = BackendClient()
    return _backend_client
