from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gestion_reservas.api.schemas.common import coerce_amount, coerce_enum
from gestion_reservas.domain.entities.payment import PaymentAction, PaymentMethod, PaymentStatus


class PaymentCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    reservation_id: int = Field(gt=0)
    # Si no se indica, se usa el precio total de la reserva
    amount: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    method: PaymentMethod
    status: PaymentStatus

    @field_validator("amount", mode="before")
    @classmethod
    def normalize_amount(cls, value):
        return coerce_amount(value)

    @field_validator("amount")
    @classmethod
    def validate_positive(cls, value: Decimal | None) -> Decimal | None:
        if value is not None and value <= 0:
            raise ValueError("amount must be greater than 0")
        return value

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, value):
        return coerce_enum(PaymentMethod, value)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return coerce_enum(PaymentStatus, value)


class PaymentUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    method: PaymentMethod
    status: PaymentStatus

    @field_validator("method", mode="before")
    @classmethod
    def normalize_method(cls, value):
        return coerce_enum(PaymentMethod, value)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return coerce_enum(PaymentStatus, value)


class PaymentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    reservation_id: int
    paid_at: datetime
    amount: Decimal
    method: PaymentMethod
    status: PaymentStatus
    transaction_reference: str


class PaymentHistoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    payment_id: int
    action: PaymentAction
    previous_status: PaymentStatus | None = None
    new_status: PaymentStatus | None = None
    previous_amount: Decimal | None = None
    new_amount: Decimal | None = None
    recorded_at: datetime | None = None


class NextReferenceResponse(BaseModel):
    transaction_reference: str


class ReservationAmountResponse(BaseModel):
    reservation_id: int
    amount: Decimal
