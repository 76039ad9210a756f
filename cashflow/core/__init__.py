# Core session state

from .session import session_manager, FinanceSession

__all__ = ["session_manager", "FinanceSession"]
