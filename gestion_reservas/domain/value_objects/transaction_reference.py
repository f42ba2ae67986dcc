"""Value Object TransactionReference - referencia secuencial de un pago."""

import re
from dataclasses import dataclass

PREFIX = "TXN"
_PATTERN = re.compile(rf"^{PREFIX}(\d+)$")


@dataclass(frozen=True)
class TransactionReference:
    """
    Referencia de transacción con formato TXN seguido de al menos 3 dígitos.

    Ejemplos: TXN001, TXN042, TXN1000 (pasado el 999 crece sin error).
    """

    number: int

    WIDTH = 3

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError(f"El número de referencia debe ser positivo: {self.number}")

    @property
    def value(self) -> str:
        return f"{PREFIX}{self.number:0{self.WIDTH}d}"

    def __str__(self) -> str:
        return self.value

    def next(self) -> "TransactionReference":
        return TransactionReference(self.number + 1)

    @classmethod
    def first(cls) -> "TransactionReference":
        return cls(1)

    @classmethod
    def parse(cls, raw: str | None) -> "TransactionReference | None":
        """Interpreta una referencia almacenada; None si no tiene formato TXN<dígitos>."""
        if not raw:
            return None
        match = _PATTERN.match(raw.strip())
        if not match:
            return None
        number = int(match.group(1))
        return cls(number) if number >= 1 else None

    @classmethod
    def next_after(cls, last_reference: str | None) -> str:
        """
        Calcula la referencia que sigue a la última almacenada.

        Sin pagos previos, o con una referencia ilegible, se empieza en TXN001.
        """
        last = cls.parse(last_reference)
        if last is None:
            return cls.first().value
        return last.next().value
