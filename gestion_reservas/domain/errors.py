"""Excepciones de dominio para la gestión de reservas."""


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Errores de Reserva ===


class InvalidReservationStatusError(DomainError):
    """El estado actual de la reserva no permite pasar al estado pedido."""

    def __init__(self, current_status: str, target_status: str):
        super().__init__(
            message=f"No se puede pasar una reserva de '{current_status}' a '{target_status}'",
            code="INVALID_RESERVATION_STATUS",
        )
        self.current_status = current_status
        self.target_status = target_status


# === Errores de Validación ===


class InvalidDateRangeError(DomainError):
    """Rango de fechas inválido."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_DATE_RANGE")


class InvalidMoneyError(DomainError):
    """Monto monetario inválido."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_MONEY")
