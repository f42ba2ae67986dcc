"""Value Object Money - representa un importe en euros."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from gestion_reservas.domain.errors import InvalidMoneyError

CENTS = Decimal("0.01")
# Columnas NUMERIC(10, 2)
MAX_INTEGER_DIGITS = 8


@dataclass(frozen=True)
class Money:
    """
    Value Object inmutable que representa un importe monetario.

    Attributes:
        amount: Importe decimal redondeado a 2 decimales.
        currency_code: Código ISO 4217 de la moneda (por defecto EUR).
    """

    amount: Decimal
    currency_code: str = "EUR"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        try:
            object.__setattr__(self, "amount", self.amount.quantize(CENTS))
        except InvalidOperation as exc:
            raise InvalidMoneyError(f"Importe fuera de rango: {self.amount}") from exc

        if len(self.currency_code) != 3:
            raise InvalidMoneyError(f"currency_code debe ser de 3 caracteres: {self.currency_code}")

        if self.amount < 0:
            raise InvalidMoneyError(f"amount no puede ser negativo: {self.amount}")

    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    def is_positive(self) -> bool:
        return self.amount > 0

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency_code}"

    @classmethod
    def parse(cls, raw: str | Decimal | int | float, currency_code: str = "EUR") -> "Money":
        """
        Crea un Money desde la entrada de un formulario.

        Acepta la coma como separador decimal ("120,50" equivale a "120.50").
        """
        if isinstance(raw, Decimal):
            return cls(amount=raw, currency_code=currency_code)
        text = str(raw).strip().replace(",", ".")
        try:
            amount = Decimal(text)
        except InvalidOperation as exc:
            raise InvalidMoneyError(f"Importe no numérico: {raw!r}") from exc
        if not amount.is_finite():
            raise InvalidMoneyError(f"Importe no numérico: {raw!r}")
        if not amount.is_zero() and amount.adjusted() >= MAX_INTEGER_DIGITS:
            raise InvalidMoneyError(f"Importe fuera de rango: {raw!r}")
        if amount.as_tuple().exponent < -2 and amount != amount.quantize(CENTS):
            raise InvalidMoneyError(f"Importe con más de 2 decimales: {raw!r}")
        return cls(amount=amount, currency_code=currency_code)
