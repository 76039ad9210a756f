"""Record store data models"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RecordList:
    """One page of records from a collection"""
    page: int
    per_page: int
    total_items: int
    total_pages: int
    items: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "RecordList":
        return cls(
            page=data.get("page", 1),
            per_page=data.get("perPage", 0),
            total_items=data.get("totalItems", 0),
            total_pages=data.get("totalPages", 0),
            items=data.get("items", []),
        )


@dataclass
class AuthResult:
    """Response from a password authentication"""
    token: str
    record: dict[str, Any]
