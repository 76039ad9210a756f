"""CashFlowMin session state"""

from datetime import datetime
from dataclasses import dataclass, field

from shared.config import settings
from shared.identity import AuthStore
from shared.session import SessionManager
from ..models.expense import Expense


@dataclass
class FinanceSession:
    """Signed-in identity and loaded expenses of one browser session"""
    session_id: str
    created_at: datetime
    updated_at: datetime
    auth: AuthStore = field(default_factory=AuthStore)
    expenses: list[Expense] = field(default_factory=list)

    def touch(self) -> None:
        self.updated_at = datetime.now()

    def identity_changed(self) -> None:
        """Drop data loaded for the previous identity"""
        self.expenses = []


def _new_session(session_id: str, now: datetime) -> FinanceSession:
    return FinanceSession(session_id=session_id, created_at=now, updated_at=now)


# Singleton instance
session_manager: SessionManager[FinanceSession] = SessionManager(
    _new_session, max_age_hours=settings.session_max_age_hours
)
