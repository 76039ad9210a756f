# PocketBase record store client

from .client import (
    RecordStoreClient,
    RecordStoreError,
    AuthenticationError,
    RecordNotFoundError,
    build_filter,
)
from .models import AuthResult, RecordList

__all__ = [
    "RecordStoreClient",
    "RecordStoreError",
    "AuthenticationError",
    "RecordNotFoundError",
    "build_filter",
    "AuthResult",
    "RecordList",
]
