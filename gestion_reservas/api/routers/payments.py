from fastapi import APIRouter, Depends, status

from gestion_reservas.api.dependencies import get_use_cases
from gestion_reservas.api.responses import unwrap
from gestion_reservas.api.schemas.payments import (
    NextReferenceResponse,
    PaymentCreateRequest,
    PaymentHistoryResponse,
    PaymentResponse,
    PaymentUpdateRequest,
    ReservationAmountResponse,
)
from gestion_reservas.api.schemas.reservations import DeletedResponse

router = APIRouter()


@router.get("/payments", response_model=list[PaymentResponse])
async def list_payments(use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["payments"].list_payments())


@router.post("/payments", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def register_payment(payload: PaymentCreateRequest, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["payments"].register_payment(payload))


@router.get("/payments/next-reference", response_model=NextReferenceResponse)
async def next_reference(use_cases=Depends(get_use_cases)):
    return NextReferenceResponse(transaction_reference=unwrap(await use_cases["payments"].next_reference()))


@router.get("/payments/reservations", response_model=list[int])
async def payable_reservation_ids(use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["payments"].reservation_ids())


@router.get("/payments/reservations/{reservation_id}/amount", response_model=ReservationAmountResponse)
async def reservation_amount(reservation_id: int, use_cases=Depends(get_use_cases)):
    amount = unwrap(await use_cases["payments"].amount_for_reservation(reservation_id))
    return ReservationAmountResponse(reservation_id=reservation_id, amount=amount)


@router.get("/payments/{payment_id}", response_model=PaymentResponse)
async def get_payment(payment_id: int, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["payments"].get_payment(payment_id))


@router.put("/payments/{payment_id}", response_model=PaymentResponse)
async def update_payment(payment_id: int, payload: PaymentUpdateRequest, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["payments"].update_payment(payment_id, payload))


@router.delete("/payments/{payment_id}", response_model=DeletedResponse)
async def delete_payment(payment_id: int, use_cases=Depends(get_use_cases)):
    return DeletedResponse(deleted=unwrap(await use_cases["payments"].delete_payment(payment_id)))


@router.get("/payments/{payment_id}/history", response_model=list[PaymentHistoryResponse])
async def payment_history(payment_id: int, use_cases=Depends(get_use_cases)):
    return unwrap(await use_cases["payments"].list_history(payment_id))
