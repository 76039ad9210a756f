"""Profile and budget models for CashFlowMin"""

from pydantic import BaseModel, Field
from typing import Optional

from .expense import ExpenseCategory


class Profile(BaseModel):
    """User record fields shown on the profile page"""
    id: str
    email: str = ""
    name: str = ""
    phone: str = ""
    balance: float = 0
    salary: float = 0


class ProfileUpdateRequest(BaseModel):
    """Partial profile update"""
    name: Optional[str] = None
    phone: Optional[str] = None
    balance: Optional[float] = None
    salary: Optional[float] = Field(None, ge=0)


class BudgetLine(BaseModel):
    """Allocation and spending of one budget category"""
    category: ExpenseCategory
    percent: int
    allocated: float
    spent: float
    remaining: float


class BudgetOverview(BaseModel):
    """50/30/20 split of the salary against recorded expenses"""
    salary: float
    lines: list[BudgetLine]
    total_spent: float
    total_remaining: float
