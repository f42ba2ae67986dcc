"""Interfaces (Puertos) de la capa de aplicación."""

from gestion_reservas.application.interfaces.client_repo import NOT_FOUND_ID, ClientRepo
from gestion_reservas.application.interfaces.clock import Clock, FakeClock, SystemClock
from gestion_reservas.application.interfaces.payment_repo import PaymentHistoryRepo, PaymentRepo
from gestion_reservas.application.interfaces.property_repo import PropertyRepo
from gestion_reservas.application.interfaces.reservation_repo import ReservationRepo
from gestion_reservas.application.interfaces.transaction_manager import TransactionManager
from gestion_reservas.application.interfaces.valuation_repo import ValuationRepo

__all__ = [
    # Repositories
    "ClientRepo",
    "NOT_FOUND_ID",
    "PropertyRepo",
    "ReservationRepo",
    "PaymentRepo",
    "PaymentHistoryRepo",
    "ValuationRepo",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
]
