"""Interface Clock - Puerto para abstracción de tiempo."""

from abc import ABC, abstractmethod
from datetime import date, datetime


class Clock(ABC):
    """
    Puerto para abstracción del tiempo del sistema.

    Permite inyectar implementaciones fake para testing determinista.
    Las fechas son locales y sin zona horaria, como se guardan en la base de datos.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Retorna la fecha/hora actual."""
        raise NotImplementedError

    def today(self) -> date:
        """Retorna la fecha actual (sin hora)."""
        return self.now().date()


class SystemClock(Clock):
    """Implementación real que usa el reloj del sistema."""

    def now(self) -> datetime:
        return datetime.now().replace(microsecond=0)


class FakeClock(Clock):
    """
    Implementación fake para testing.

    Permite fijar el tiempo para pruebas deterministas.
    """

    def __init__(self, fixed_time: datetime | None = None):
        self._fixed_time = fixed_time or datetime(2025, 11, 3, 12, 0, 0)

    def now(self) -> datetime:
        return self._fixed_time
