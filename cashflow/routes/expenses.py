"""Expense API routes"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from shared.dependencies import get_records_client, store_failure
from shared.records import RecordStoreClient, RecordStoreError
from ..core.session import FinanceSession
from ..models.expense import ExpenseForm, ExpenseListResponse
from ..services.expenses import ExpenseService, ExpenseValidationError, category_totals
from .deps import require_identity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/expenses", tags=["Expenses"])


def _expense_response(expenses, message=None) -> ExpenseListResponse:
    return ExpenseListResponse(
        expenses=expenses,
        totals=category_totals(expenses),
        message=message,
    )


@router.get("", response_model=ExpenseListResponse)
async def list_expenses(
    session: FinanceSession = Depends(require_identity),
    client: RecordStoreClient = Depends(get_records_client),
):
    """
    Get the user's 50 most recent expenses with category totals.

    A failed load answers with an empty list and a message instead of an
    error, so the page still renders.
    """
    try:
        expenses = await ExpenseService(client).list_expenses(session)
    except RecordStoreError as e:
        logger.error(f"Error fetching expenses: {e}")
        return _expense_response([], message="Unable to load expenses. Please try again later.")

    return _expense_response(expenses)


@router.post("", response_model=ExpenseListResponse)
async def add_expense(
    form: ExpenseForm,
    session: FinanceSession = Depends(require_identity),
    client: RecordStoreClient = Depends(get_records_client),
):
    """Record an expense"""
    try:
        await ExpenseService(client).add_expense(session, form)
    except ExpenseValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RecordStoreError as e:
        raise store_failure(e, "to add expense")

    return _expense_response(session.expenses, message="Expense added")


@router.delete("/{expense_id}", response_model=ExpenseListResponse)
async def delete_expense(
    expense_id: str,
    session: FinanceSession = Depends(require_identity),
    client: RecordStoreClient = Depends(get_records_client),
):
    """Delete an expense"""
    try:
        await ExpenseService(client).delete_expense(session, expense_id)
    except RecordStoreError as e:
        raise store_failure(e, "to delete expense")

    return _expense_response(session.expenses, message="Expense deleted")
