from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gestion_reservas.api.schemas.common import coerce_amount, coerce_enum
from gestion_reservas.domain.entities.reservation import ReservationStatus
from gestion_reservas.domain.errors import InvalidDateRangeError
from gestion_reservas.domain.value_objects.stay_dates import StayDates


class ReservationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    client_id: int = Field(gt=0)
    property_id: int = Field(gt=0)
    start_date: date
    end_date: date
    guests: int = Field(ge=1)
    status: ReservationStatus = ReservationStatus.PENDING
    total_price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    cancellation_reason: str | None = Field(default=None, max_length=500)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return coerce_enum(ReservationStatus, value)

    @field_validator("total_price", mode="before")
    @classmethod
    def normalize_price(cls, value):
        return coerce_amount(value)

    @field_validator("end_date")
    @classmethod
    def validate_dates(cls, value: date, info: Any) -> date:
        start = info.data.get("start_date")
        if start:
            try:
                StayDates(start=start, end=value)
            except InvalidDateRangeError as exc:
                raise ValueError("end_date must be after start_date") from exc
        return value

    @field_validator("cancellation_reason")
    @classmethod
    def validate_cancellation_reason(cls, value: str | None, info: Any) -> str | None:
        if value is not None and not value.strip():
            return None
        if value and info.data.get("status") != ReservationStatus.CANCELLED:
            raise ValueError("cancellation_reason is only allowed for cancelled reservations")
        return value


class ReservationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    property_id: int
    start_date: date
    end_date: date
    guests: int
    status: ReservationStatus
    total_price: Decimal
    cancellation_reason: str | None = None


class DeletedResponse(BaseModel):
    deleted: int
