# CashFlowMin business logic

from .expenses import (
    ExpenseService,
    ExpenseValidationError,
    category_totals,
    parse_expense_form,
)
from .budget import BUDGET_RULE, budget_split, budget_overview
from .profile import ProfileService

__all__ = [
    "ExpenseService",
    "ExpenseValidationError",
    "category_totals",
    "parse_expense_form",
    "BUDGET_RULE",
    "budget_split",
    "budget_overview",
    "ProfileService",
]
