from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gestion_reservas.api.schemas.common import coerce_amount
from gestion_reservas.domain.entities.rental_property import PropertyStatus


class PropertyRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    address: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=100)
    country: str = Field(min_length=1, max_length=50)
    nightly_price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    capacity: int = Field(ge=1)
    description: str = Field(min_length=1, max_length=500)
    status: PropertyStatus

    @field_validator("nightly_price", mode="before")
    @classmethod
    def normalize_price(cls, value):
        return coerce_amount(value)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        if isinstance(value, str):
            return PropertyStatus.parse(value)
        return value


class PropertyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
    city: str
    country: str
    nightly_price: Decimal
    capacity: int
    description: str
    status: PropertyStatus


class PropertyIdResponse(BaseModel):
    id: int
