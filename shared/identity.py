"""
Identity and authentication

Holds the signed-in identity of a session and wraps the record store's
password authentication and sign-up flows.
"""

import re
import time
import logging
from dataclasses import dataclass
from typing import Optional, Any

import jwt
from pydantic import BaseModel

from .records import RecordStoreClient

logger = logging.getLogger(__name__)

# e.g. "9876543210", "+1-555-123-4567" or "+1 555 123 4567"
SIGN_UP_PHONE_PATTERN = re.compile(
    r"^[+]?[(]?[0-9]{1,4}[)]?[-\s.]?[0-9]{1,3}[-\s.]?[0-9]{3,4}[-\s.]?[0-9]{3,4}$"
)

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 8


class SignUpValidationError(ValueError):
    """Sign-up form rejected before contacting the record store"""
    pass


@dataclass
class AuthStore:
    """Auth token and identity record of one session"""
    token: str = ""
    model: Optional[dict[str, Any]] = None

    def save(self, token: str, model: dict[str, Any]) -> None:
        self.token = token
        self.model = model

    def clear(self) -> None:
        self.token = ""
        self.model = None

    @property
    def is_valid(self) -> bool:
        """True when a token is present and its JWT expiry has not passed"""
        if not self.token or self.model is None:
            return False

        try:
            payload = jwt.decode(self.token, options={"verify_signature": False})
        except jwt.PyJWTError:
            return False

        exp = payload.get("exp")
        return exp is None or exp > time.time()

    @property
    def user_id(self) -> Optional[str]:
        return self.model.get("id") if self.model else None

    @property
    def email(self) -> str:
        return (self.model or {}).get("email", "")


def validate_sign_up(email: str, password: str, name: str, phone: str) -> None:
    """Check a sign-up form, raising SignUpValidationError on the first bad field"""
    if len(name.strip()) < MIN_NAME_LENGTH:
        raise SignUpValidationError("Please enter your full name")
    if not SIGN_UP_PHONE_PATTERN.match(phone):
        raise SignUpValidationError("Please enter a valid phone number")
    if not email.strip():
        raise SignUpValidationError("Please enter your email address")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise SignUpValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )


class AuthService:
    """Sign-in, sign-up and sign-out against an auth collection"""

    def __init__(self, client: RecordStoreClient, collection: str = "users"):
        self.client = client
        self.collection = collection

    async def sign_in(self, store: AuthStore, email: str, password: str) -> dict[str, Any]:
        """Authenticate and remember the identity in the store"""
        result = await self.client.auth_with_password(self.collection, email, password)
        store.save(result.token, result.record)
        logger.info(f"Signed in user {store.user_id}")
        return result.record

    async def sign_up(
        self,
        store: AuthStore,
        email: str,
        password: str,
        name: str,
        phone: str,
    ) -> dict[str, Any]:
        """
        Create a user record and sign in as it.

        Raises:
            SignUpValidationError: if the form is invalid
            RecordStoreError: if the record store rejects the user
        """
        validate_sign_up(email, password, name, phone)

        await self.client.create(
            self.collection,
            {
                "email": email,
                "password": password,
                "passwordConfirm": password,
                "name": name,
                "phone": phone,
                "emailVisibility": True,
            },
        )
        logger.info(f"Created user account for {email}")

        return await self.sign_in(store, email, password)

    def sign_out(self, store: AuthStore) -> None:
        """Forget the identity held by the store"""
        if store.user_id:
            logger.info(f"Signed out user {store.user_id}")
        store.clear()


class SignInRequest(BaseModel):
    """Request to sign in"""
    email: str
    password: str


class SignUpRequest(BaseModel):
    """Request to create an account"""
    email: str
    password: str
    name: str
    phone: str


class IdentityResponse(BaseModel):
    """Signed-in identity of a session"""
    authenticated: bool
    user_id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_auth(cls, auth: AuthStore) -> "IdentityResponse":
        if not auth.is_valid:
            return cls(authenticated=False)
        return cls(
            authenticated=True,
            user_id=auth.user_id,
            email=auth.email,
            name=(auth.model or {}).get("name"),
        )
