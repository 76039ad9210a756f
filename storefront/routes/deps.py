"""Request dependencies for storefront routes"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Response

from shared.dependencies import SESSION_HEADER
from ..core.session import session_manager, ShopSession


def get_session(
    response: Response,
    x_session_id: Optional[str] = Header(None),
) -> ShopSession:
    """Resolve the shopper's session from the X-Session-Id header, creating one if needed"""
    session = session_manager.get_or_create_session(x_session_id)
    session.touch()
    response.headers[SESSION_HEADER] = session.session_id
    return session


class IdentityDependency:
    """
    FastAPI dependency that resolves the session and checks its identity.

    Use require_identity on routes that act for a signed-in user; they
    answer 401 so the client can send the user to sign in.
    """

    def __init__(self, require_identity: bool = False):
        self.require_identity = require_identity

    async def __call__(self, session: ShopSession = Depends(get_session)) -> ShopSession:
        if self.require_identity and not session.auth.is_valid:
            raise HTTPException(status_code=401, detail="Please sign in to continue")
        return session


# Dependency instance
require_identity = IdentityDependency(require_identity=True)
