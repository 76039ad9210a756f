"""Storefront session state"""

from datetime import datetime
from dataclasses import dataclass, field
from typing import Optional

from shared.config import settings
from shared.identity import AuthStore
from shared.session import SessionManager
from ..models.cart import ProductSelection
from ..models.checkout import CheckoutDraft
from ..models.product import FilterState
from ..services.cart import ShoppingCart
from ..services.catalog import toggle_value
from ..services.checkout import new_checkout_draft
from ..services.orders import OrderHistory


@dataclass
class ViewState:
    """Which panels are open"""
    show_cart: bool = False
    show_history: bool = False
    selected_product_id: Optional[int] = None


@dataclass
class ShopSession:
    """Browsing, cart and checkout state of one shopper"""
    session_id: str
    created_at: datetime
    updated_at: datetime
    auth: AuthStore = field(default_factory=AuthStore)
    filters: FilterState = field(default_factory=FilterState)
    selections: dict[int, ProductSelection] = field(default_factory=dict)
    liked: set[int] = field(default_factory=set)
    cart: ShoppingCart = field(default_factory=ShoppingCart)
    checkout: CheckoutDraft = field(default_factory=new_checkout_draft)
    history: OrderHistory = field(default_factory=OrderHistory)
    view: ViewState = field(default_factory=ViewState)
    is_checking_out: bool = False

    def touch(self) -> None:
        self.updated_at = datetime.now()

    def selection_for(self, product_id: int) -> ProductSelection:
        return self.selections.get(product_id, ProductSelection())

    def select_color(self, product_id: int, color: str) -> ProductSelection:
        current = self.selection_for(product_id)
        self.selections[product_id] = ProductSelection(color=color, size=current.size)
        return self.selections[product_id]

    def select_size(self, product_id: int, size: str) -> ProductSelection:
        current = self.selection_for(product_id)
        self.selections[product_id] = ProductSelection(color=current.color, size=size)
        return self.selections[product_id]

    def toggle_like(self, product_id: int) -> bool:
        """Like or unlike a product. Returns the new liked state."""
        if product_id in self.liked:
            self.liked.discard(product_id)
            return False
        self.liked.add(product_id)
        return True

    def toggle_color(self, color: str) -> None:
        self.filters.colors = toggle_value(self.filters.colors, color)

    def toggle_size(self, size: str) -> None:
        self.filters.sizes = toggle_value(self.filters.sizes, size)

    def reset_filters(self) -> None:
        self.filters = FilterState()

    def identity_changed(self) -> None:
        """Rescope identity-bound state after sign-in or sign-out"""
        self.history.reset()
        self.checkout.email = self.auth.email if self.auth.is_valid else ""


def _new_session(session_id: str, now: datetime) -> ShopSession:
    return ShopSession(session_id=session_id, created_at=now, updated_at=now)


# Singleton instance
session_manager: SessionManager[ShopSession] = SessionManager(
    _new_session, max_age_hours=settings.session_max_age_hours
)
