from __future__ import annotations

import datetime as dt
import logging
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from gymdash.core.validation import parse_amount, parse_calendar_date


logger = logging.getLogger(__name__)


class ActivityType(str, Enum):
    CHECK_IN = "check-in"
    PAYMENT = "payment"
    CLASS_BOOKING = "class-booking"
    NEW_MEMBER = "new-member"


class BackendRecord(BaseModel):
    # Records are snapshots fetched from the hosted backend; never mutated here.
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(validation_alias=AliasChoices("id", "Id"))

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value


class DatedRecord(BackendRecord):
    date: Optional[dt.date] = None

    @field_validator("date", mode="before")
    @classmethod
    def _lenient_date(cls, value: Any) -> Optional[dt.date]:
        if value is None or value == "":
            return None
        parsed = parse_calendar_date(value)
        if parsed is None:
            logger.warning("Ignoring unparseable record date: %r", value)
        return parsed


class ActivityRecord(DatedRecord):
    # Raw backend value; unknown types are kept so reports can still label them
    type: Optional[str] = None
    time: Optional[str] = None
    amount: Optional[Decimal] = None
    class_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("class_name", "className"),
    )
    member_name: str = Field(
        default="",
        validation_alias=AliasChoices("member_name", "memberName", "Name"),
    )

    @field_validator("type", mode="before")
    @classmethod
    def _type_value(cls, value: Any) -> Any:
        if isinstance(value, ActivityType):
            return value.value
        return value or None

    @field_validator("amount", mode="before")
    @classmethod
    def _lenient_amount(cls, value: Any) -> Optional[Decimal]:
        return parse_amount(value)

    @property
    def activity_type(self) -> Optional[ActivityType]:
        try:
            return ActivityType(self.type)
        except ValueError:
            return None


class Member(BackendRecord):
    name: str = Field(default="", validation_alias=AliasChoices("name", "Name"))
    first_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("first_name", "firstName"),
    )
    last_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("last_name", "lastName"),
    )
    email: Optional[str] = None
    phone: Optional[str] = None
    membership_type: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("membership_type", "membershipType"),
    )
    checked_in: bool = Field(
        default=False,
        validation_alias=AliasChoices("checked_in", "checkedIn"),
    )
    expiry_date: Optional[dt.date] = Field(
        default=None,
        validation_alias=AliasChoices("expiry_date", "expiryDate"),
    )

    @field_validator("expiry_date", mode="before")
    @classmethod
    def _lenient_expiry(cls, value: Any) -> Optional[dt.date]:
        if value is None or value == "":
            return None
        return parse_calendar_date(value)

    @field_validator("checked_in", mode="before")
    @classmethod
    def _checked_in_flag(cls, value: Any) -> Any:
        if value is None or value == "":
            return False
        return value

    @property
    def full_name(self) -> str:
        parts = [p for p in (self.first_name, self.last_name) if p]
        if parts:
            return " ".join(parts)
        return self.name


class Payment(DatedRecord):
    name: str = Field(default="", validation_alias=AliasChoices("name", "Name"))
    member_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("member_id", "memberId"),
    )
    amount: Optional[Decimal] = None
    payment_method: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("payment_method", "paymentMethod"),
    )
    description: Optional[str] = None

    @field_validator("member_id", mode="before")
    @classmethod
    def _member_ref(cls, value: Any) -> Any:
        # Lookup fields come back either as a bare id or as an expanded object
        if isinstance(value, dict):
            value = value.get("Id", value.get("id"))
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _lenient_amount(cls, value: Any) -> Optional[Decimal]:
        return parse_amount(value)
