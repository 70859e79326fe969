from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from src.dependencies import get_expense_service
from src.finance.api.schemas import parse_expense
from src.finance.application.services import ExpenseService
from src.shared.http.params import EntityId
from src.shared.http.responses import created, ok
from src.shared.validation import month_query

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.get("")
async def list_expenses(
    month: Optional[str] = Query(default=None),
    service: ExpenseService = Depends(get_expense_service),
):
    expenses = await service.list(month_query(month))
    return ok([e.to_dict() for e in expenses])


@router.get("/{expense_id}")
async def get_expense(expense_id: EntityId, service: ExpenseService = Depends(get_expense_service)):
    expense = await service.get(expense_id)
    return ok(expense.to_dict())


@router.post("", status_code=201)
async def create_expense(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: ExpenseService = Depends(get_expense_service),
):
    expense = await service.create(parse_expense(payload))
    return created(expense.to_dict(), message="Expense created successfully")


@router.put("/{expense_id}")
async def update_expense(
    expense_id: EntityId,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: ExpenseService = Depends(get_expense_service),
):
    expense = await service.update(expense_id, parse_expense(payload))
    return ok(expense.to_dict(), message="Expense updated successfully")


@router.delete("/{expense_id}")
async def delete_expense(expense_id: EntityId, service: ExpenseService = Depends(get_expense_service)):
    await service.delete(expense_id)
    return ok(message="Expense deleted successfully")
