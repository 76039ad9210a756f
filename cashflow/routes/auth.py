"""Sign-in, sign-up and sign-out routes for CashFlowMin"""

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
from ..core.session import FinanceSession
from .deps import get_session

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.get("/me", response_model=IdentityResponse)
async def get_identity(session: FinanceSession = Depends(get_session)):
    """Current identity of the session"""
    return IdentityResponse.from_auth(session.auth)


@router.post("/sign-in", response_model=IdentityResponse)
async def sign_in(
    request: SignInRequest,
    session: FinanceSession = Depends(get_session),
    client: RecordStoreClient = Depends(get_records_client),
):
    """Sign in with email and password"""
    try:
        await AuthService(client).sign_in(session.auth, request.email, request.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=str(e) or "Authentication failed")
    except RecordStoreError as e:
        raise store_failure(e, "to sign in")

    session.identity_changed()
    return IdentityResponse.from_auth(session.auth)


@router.post("/sign-up", response_model=IdentityResponse)
async def sign_up(
    request: SignUpRequest,
    session: FinanceSession = Depends(get_session),
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

    session.identity_changed()
    return IdentityResponse.from_auth(session.auth)


@router.post("/sign-out", response_model=IdentityResponse)
async def sign_out(
    session: FinanceSession = Depends(get_session),
    client: RecordStoreClient = Depends(get_records_client),
):
    """Sign out and forget the loaded expenses"""
    AuthService(client).sign_out(session.auth)
    session.identity_changed()
    return IdentityResponse.from_auth(session.auth)
