import re
from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# E.164: "+" followed by 7 to 15 digits
PHONE_PATTERN = re.compile(r"^\+[0-9]{7,15}$")


class ClientRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=150)
    email: EmailStr
    phone: str
    country: str = Field(min_length=1, max_length=50)

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_letters_and_spaces(cls, value: str) -> str:
        if not all(ch.isalpha() or ch.isspace() for ch in value):
            raise ValueError("solo puede contener letras y espacios")
        return value

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str) -> str:
        if not PHONE_PATTERN.match(value):
            raise ValueError("el teléfono debe tener formato internacional E.164 (+34600111222)")
        return value


class ClientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: str
    country: str
    registered_on: date


class ClientIdResponse(BaseModel):
    id: int
