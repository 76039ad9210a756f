"""Request dependencies for CashFlowMin routes"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Response

from shared.dependencies import SESSION_HEADER
from ..core.session import session_manager, FinanceSession


def get_session(
    response: Response,
    x_session_id: Optional[str] = Header(None),
) -> FinanceSession:
    """Resolve the session from the X-Session-Id header, creating one if needed"""
    session = session_manager.get_or_create_session(x_session_id)
    session.touch()
    response.headers[SESSION_HEADER] = session.session_id
    return session


async def require_identity(session: FinanceSession = Depends(get_session)) -> FinanceSession:
    """Every finance page needs a signed-in user"""
    if not session.auth.is_valid:
        raise HTTPException(status_code=401, detail="Please sign in to continue")
    return session
