"""Budget API routes"""

from fastapi import APIRouter, Depends

from shared.dependencies import get_records_client, store_failure
from shared.records import RecordStoreClient, RecordStoreError
from ..core.session import FinanceSession
from ..models.profile import BudgetOverview
from ..services.budget import budget_overview
from ..services.expenses import ExpenseService
from ..services.profile import ProfileService
from .deps import require_identity

router = APIRouter(prefix="/api/budget", tags=["Budget"])


@router.get("", response_model=BudgetOverview)
async def get_budget(
    session: FinanceSession = Depends(require_identity),
    client: RecordStoreClient = Depends(get_records_client),
):
    """50/30/20 split of the stored salary against recorded expenses"""
    try:
        profile = await ProfileService(client).get_profile(session.auth)
        expenses = await ExpenseService(client).list_expenses(session)
    except RecordStoreError as e:
        raise store_failure(e, "to load budget")

    return budget_overview(profile.salary, expenses)
