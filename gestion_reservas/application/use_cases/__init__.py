"""Casos de uso de la aplicación."""

from gestion_reservas.application.use_cases.manage_clients import ClientUseCases
from gestion_reservas.application.use_cases.manage_properties import PropertyUseCases
from gestion_reservas.application.use_cases.manage_reservations import ReservationUseCases
from gestion_reservas.application.use_cases.manage_valuations import ValuationUseCases
from gestion_reservas.application.use_cases.payment_ledger import PaymentLedgerUseCase

__all__ = [
    "ClientUseCases",
    "PropertyUseCases",
    "ReservationUseCases",
    "PaymentLedgerUseCase",
    "ValuationUseCases",
]
