from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gestion_reservas.api.deps import get_db_session
from gestion_reservas.application.interfaces.clock import Clock, SystemClock
from gestion_reservas.application.use_cases.manage_clients import ClientUseCases
from gestion_reservas.application.use_cases.manage_properties import PropertyUseCases
from gestion_reservas.application.use_cases.manage_reservations import ReservationUseCases
from gestion_reservas.application.use_cases.manage_valuations import ValuationUseCases
from gestion_reservas.application.use_cases.payment_ledger import PaymentLedgerUseCase
from gestion_reservas.config import Settings, get_settings
from gestion_reservas.infrastructure.db.repositories.client_repo_sql import ClientRepoSQL
from gestion_reservas.infrastructure.db.repositories.payment_repo_sql import (
    PaymentHistoryRepoSQL,
    PaymentRepoSQL,
)
from gestion_reservas.infrastructure.db.repositories.property_repo_sql import PropertyRepoSQL
from gestion_reservas.infrastructure.db.repositories.reservation_repo_sql import ReservationRepoSQL
from gestion_reservas.infrastructure.db.repositories.valuation_repo_sql import ValuationRepoSQL
from gestion_reservas.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager


def get_clock() -> Clock:
    return SystemClock()


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession = Depends(get_db_session),
    clock: Clock = Depends(get_clock),
):
    client_repo = ClientRepoSQL(session)
    property_repo = PropertyRepoSQL(session)
    reservation_repo = ReservationRepoSQL(session)
    payment_repo = PaymentRepoSQL(session)
    history_repo = PaymentHistoryRepoSQL(
        session, use_stored_procedure=settings.audit_use_stored_procedure
    )
    valuation_repo = ValuationRepoSQL(session)
    tx_manager = SQLAlchemyTransactionManager(session)

    return {
        "clients": ClientUseCases(
            client_repo=client_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "properties": PropertyUseCases(
            property_repo=property_repo,
            transaction_manager=tx_manager,
        ),
        "reservations": ReservationUseCases(
            reservation_repo=reservation_repo,
            client_repo=client_repo,
            property_repo=property_repo,
            transaction_manager=tx_manager,
            enforce_transitions=settings.enforce_reservation_transitions,
        ),
        "payments": PaymentLedgerUseCase(
            payment_repo=payment_repo,
            history_repo=history_repo,
            reservation_repo=reservation_repo,
            transaction_manager=tx_manager,
            clock=clock,
            max_attempts=settings.reference_retry_attempts,
        ),
        "valuations": ValuationUseCases(
            valuation_repo=valuation_repo,
            reservation_repo=reservation_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
    }
