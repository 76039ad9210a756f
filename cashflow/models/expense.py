"""Expense models for CashFlowMin"""

from pydantic import BaseModel
from typing import Optional
from enum import Enum


class ExpenseCategory(str, Enum):
    NEEDS = "Needs"
    WANTS = "Wants"
    SAVINGS = "Savings"


class Expense(BaseModel):
    """Expense record as stored"""
    id: str
    user: str
    to: str
    phone: str
    amount: float
    date: str
    category: ExpenseCategory


class ExpenseForm(BaseModel):
    """Raw expense form input. Every field arrives as entered."""
    to: str = ""
    phone: str = ""
    amount: str = ""
    date: str = ""
    category: str = ""


class CategoryTotals(BaseModel):
    """Amount spent per category, in the order categories first appear"""
    labels: list[str] = []
    values: list[float] = []


class ExpenseListResponse(BaseModel):
    """Expenses of the signed-in user with their category totals"""
    expenses: list[Expense]
    totals: CategoryTotals
    message: Optional[str] = None
