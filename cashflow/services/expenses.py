"""
Expense tracking

Lists, records and deletes the signed-in user's expenses and sums them
per category for the spending chart.
"""

import re
import logging
from datetime import datetime, timezone

from shared.records import RecordStoreClient, build_filter
from ..core.session import FinanceSession
from ..models.expense import CategoryTotals, Expense, ExpenseCategory, ExpenseForm

logger = logging.getLogger(__name__)

EXPENSES_COLLECTION = "expenses"
EXPENSES_PAGE_SIZE = 50

# Leading decimal number, e.g. "12.50" or "12.50 USD"
AMOUNT_PATTERN = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class ExpenseValidationError(ValueError):
    """Expense form rejected before contacting the record store"""
    pass


def parse_amount(value: str) -> float:
    """Read the leading number of an amount field"""
    match = AMOUNT_PATTERN.match(value)
    if not match:
        raise ExpenseValidationError("Amount must be a valid number.")
    return float(match.group(0))


def normalize_date(value: str) -> str:
    """
    Convert a date or date-time input to an ISO-8601 UTC timestamp.

    Inputs without a timezone are taken as UTC.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        raise ExpenseValidationError("Date must be a valid date.")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    parsed = parsed.astimezone(timezone.utc)

    return parsed.strftime("%Y-%m-%dT%H:%M:%S.") + f"{parsed.microsecond // 1000:03d}Z"


def parse_expense_form(form: ExpenseForm, user_id: str) -> dict:
    """
    Validate an expense form and build the record payload.

    Raises:
        ExpenseValidationError: on the first invalid field
    """
    if not all([form.to, form.phone, form.amount, form.date, form.category]):
        raise ExpenseValidationError("All fields are required.")

    amount = parse_amount(form.amount)

    try:
        category = ExpenseCategory(form.category)
    except ValueError:
        raise ExpenseValidationError(
            f"Category must be one of: {', '.join(c.value for c in ExpenseCategory)}."
        )

    return {
        "user": user_id,
        "to": form.to,
        "phone": form.phone,
        "amount": amount,
        "date": normalize_date(form.date),
        "category": category.value,
    }


def category_totals(expenses: list[Expense]) -> CategoryTotals:
    """Sum amounts per category, keeping the order categories first appear in"""
    totals: dict[str, float] = {}
    for expense in expenses:
        key = expense.category.value
        totals[key] = totals.get(key, 0) + expense.amount

    return CategoryTotals(labels=list(totals.keys()), values=list(totals.values()))


class ExpenseService:
    """Expense operations for a signed-in session"""

    def __init__(self, client: RecordStoreClient):
        self.client = client

    async def list_expenses(self, session: FinanceSession) -> list[Expense]:
        """Load the first page of the user's expenses, newest first"""
        result = await self.client.get_list(
            EXPENSES_COLLECTION,
            page=1,
            per_page=EXPENSES_PAGE_SIZE,
            filter=build_filter("user = {:user}", user=session.auth.user_id),
            sort="-date",
            token=session.auth.token,
        )
        session.expenses = [Expense.model_validate(item) for item in result.items]
        return session.expenses

    async def add_expense(self, session: FinanceSession, form: ExpenseForm) -> Expense:
        """
        Record an expense and put it at the top of the loaded list.

        Raises:
            ExpenseValidationError: if the form is invalid
            RecordStoreError: if the record store rejects the expense
        """
        payload = parse_expense_form(form, session.auth.user_id)

        record = await self.client.create(
            EXPENSES_COLLECTION, payload, token=session.auth.token
        )
        expense = Expense.model_validate(record)
        session.expenses = [expense] + session.expenses

        logger.info(f"Expense {expense.id} recorded for user {expense.user}")
        return expense

    async def delete_expense(self, session: FinanceSession, expense_id: str) -> None:
        """Delete an expense and drop it from the loaded list"""
        await self.client.delete(EXPENSES_COLLECTION, expense_id, token=session.auth.token)
        session.expenses = [e for e in session.expenses if e.id != expense_id]
        logger.info(f"Expense {expense_id} deleted")
