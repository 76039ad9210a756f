# Core modules

from .session import session_manager, ShopSession, ViewState

__all__ = ["session_manager", "ShopSession", "ViewState"]
