"""Sign-in, sign-up and sign-out routes for the storefront"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from shared.dependencies import get_records_client, store_failure
from shared.identity import (
    AuthService,
    IdentityResponse,
    SignInRequest,
    SignUpRequest,
    SignUpValidationError,
)
from shared.records import AuthenticationError, RecordStoreClient, RecordStoreError
from ..core.session import ShopSession
from .deps import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _identity(session: ShopSession) -> IdentityResponse:
    return IdentityResponse.from_auth(session.auth)


async def _after_sign_in(session: ShopSession, client: RecordStoreClient) -> None:
    session.identity_changed()
    try:
        await session.history.fetch(client, session.auth)
    except RecordStoreError as e:
        logger.error(f"Error fetching order history: {e}")


@router.get("/me", response_model=IdentityResponse)
async def get_identity(session: ShopSession = Depends(get_session)):
    """Current identity of the session"""
    return _identity(session)


@router.post("/sign-in", response_model=IdentityResponse)
async def sign_in(
    request: SignInRequest,
    session: ShopSession = Depends(get_session),
    client: RecordStoreClient = Depends(get_records_client),
):
    """Sign in with email and password"""
    try:
        await AuthService(client).sign_in(session.auth, request.email, request.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e) or "Authentication failed")
    except RecordStoreError as e:
        raise store_failure(e, "to sign in")

    await _after_sign_in(session, client)
    return _identity(session)


@router.post("/sign-up", response_model=IdentityResponse)
async def sign_up(
    request: SignUpRequest,
    session: ShopSession = Depends(get_session),
    client: RecordStoreClient = Depends(get_records_client),
):
    """Create an account and sign in"""
    try:
        await AuthService(client).sign_up(
            session.auth,
            email=request.email,
            password=request.password,
            name=request.name,
            phone=request.phone,
        )
    except SignUpValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e) or "Authentication failed")
    except RecordStoreError as e:
        if e.status == 400:
            raise HTTPException(status_code=400, detail=str(e))
        raise store_failure(e, "to create account")

    await _after_sign_in(session, client)
    return _identity(session)


@router.post("/sign-out", response_model=IdentityResponse)
async def sign_out(
    session: ShopSession = Depends(get_session),
    client: RecordStoreClient = Depends(get_records_client),
):
    """Sign out. Order history and the prefilled checkout email are dropped."""
    AuthService(client).sign_out(session.auth)
    session.identity_changed()
    session.view.show_history = False
    return _identity(session)
