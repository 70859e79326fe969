from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from src.dependencies import get_payment_service
from src.finance.api.schemas import parse_payment
from src.finance.application.services import PaymentService
from src.shared.http.params import EntityId, IdFilter
from src.shared.http.responses import created, ok
from src.shared.validation import month_query

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.get("")
async def list_payments(
    month: Optional[str] = Query(default=None),
    student_id: IdFilter = None,
    group_id: IdFilter = None,
    service: PaymentService = Depends(get_payment_service),
):
    payments = await service.list(month=month_query(month), student_id=student_id, group_id=group_id)
    return ok([p.to_dict() for p in payments])


@router.post("", status_code=201)
async def create_payment(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: PaymentService = Depends(get_payment_service),
):
    """Record a payment; the student is marked paid."""
    payment = await service.create(parse_payment(payload))
    return created(payment.to_dict(), message="Payment recorded successfully")


@router.delete("/{payment_id}")
async def delete_payment(payment_id: EntityId, service: PaymentService = Depends(get_payment_service)):
    """
    Delete a payment. The student is marked unpaid when no payment for the
    current month remains.
    """
    await service.delete(payment_id)
    return ok(message="Payment deleted successfully")
