"""Repositorios SQL (SQLAlchemy Core sobre sesión async)."""

from gestion_reservas.infrastructure.db.repositories.client_repo_sql import ClientRepoSQL
from gestion_reservas.infrastructure.db.repositories.payment_repo_sql import (
    PaymentHistoryRepoSQL,
    PaymentRepoSQL,
)
from gestion_reservas.infrastructure.db.repositories.property_repo_sql import PropertyRepoSQL
from gestion_reservas.infrastructure.db.repositories.reservation_repo_sql import ReservationRepoSQL
from gestion_reservas.infrastructure.db.repositories.valuation_repo_sql import ValuationRepoSQL

__all__ = [
    "ClientRepoSQL",
    "PropertyRepoSQL",
    "ReservationRepoSQL",
    "PaymentRepoSQL",
    "PaymentHistoryRepoSQL",
    "ValuationRepoSQL",
]
