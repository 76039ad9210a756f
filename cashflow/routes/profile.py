"""Profile API routes"""

from fastapi import APIRouter, Depends

from shared.dependencies import get_records_client, store_failure
from shared.records import RecordStoreClient, RecordStoreError
from ..core.session import FinanceSession
from ..models.profile import Profile, ProfileUpdateRequest
from ..services.profile import ProfileService
from .deps import require_identity

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=Profile)
async def get_profile(
    session: FinanceSession = Depends(require_identity),
    client: RecordStoreClient = Depends(get_records_client),
):
    """Get the signed-in user's profile"""
    try:
        return await ProfileService(client).get_profile(session.auth)
    except RecordStoreError as e:
        raise store_failure(e, "to load profile")


@router.patch("", response_model=Profile)
async def update_profile(
    request: ProfileUpdateRequest,
    session: FinanceSession = Depends(require_identity),
    client: RecordStoreClient = Depends(get_records_client),
):
    """Update name, phone, balance or salary"""
    try:
        return await ProfileService(client).update_profile(session.auth, request)
    except RecordStoreError as e:
        raise store_failure(e, "to update profile")
