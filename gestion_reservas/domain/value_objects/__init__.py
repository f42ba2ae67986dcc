"""Value Objects del dominio de reservas."""

from gestion_reservas.domain.value_objects.money import Money
from gestion_reservas.domain.value_objects.stay_dates import StayDates
from gestion_reservas.domain.value_objects.transaction_reference import TransactionReference

__all__ = [
    "Money",
    "StayDates",
    "TransactionReference",
]
