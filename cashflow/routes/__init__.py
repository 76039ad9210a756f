# CashFlowMin API routes

from .auth import router as auth_router
from .expenses import router as expenses_router
from .profile import router as profile_router
from .budget import router as budget_router

__all__ = ["auth_router", "expenses_router", "profile_router", "budget_router"]
