from decimal import Decimal
from enum import Enum
from typing import TypeVar

from gestion_reservas.domain.errors import InvalidMoneyError
from gestion_reservas.domain.value_objects.money import Money

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value: object) -> E | object:
    """Acepta el valor almacenado o el nombre del miembro, sin distinguir mayúsculas."""
    if isinstance(value, enum_cls) or not isinstance(value, str):
        return value
    normalized = value.strip()
    for member in enum_cls:
        if normalized.lower() == str(member.value).lower() or normalized.upper() == member.name:
            return member
    allowed = ", ".join(str(member.value) for member in enum_cls)
    raise ValueError(f"valor no válido '{value}', se esperaba uno de: {allowed}")


def coerce_amount(value: object) -> Decimal | object:
    """Normaliza importes de formulario ("120,50" -> Decimal("120.50"))."""
    if value is None or isinstance(value, Decimal):
        return value
    if isinstance(value, (str, int, float)):
        try:
            return Money.parse(value).amount
        except InvalidMoneyError as exc:
            raise ValueError(exc.message) from exc
    return value
