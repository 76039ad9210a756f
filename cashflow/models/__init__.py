# Data models

from .expense import (
    ExpenseCategory,
    Expense,
    ExpenseForm,
    CategoryTotals,
    ExpenseListResponse,
)
from .profile import Profile, ProfileUpdateRequest, BudgetLine, BudgetOverview

__all__ = [
    "ExpenseCategory",
    "Expense",
    "ExpenseForm",
    "CategoryTotals",
    "ExpenseListResponse",
    "Profile",
    "ProfileUpdateRequest",
    "BudgetLine",
    "BudgetOverview",
]
