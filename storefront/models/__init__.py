# Storefront Models

from .product import (
    Product,
    ProductCategory,
    SortKey,
    FilterState,
    FilterUpdateRequest,
    FilterOptions,
    ProductSearchResponse,
    ALL_CATEGORIES,
)
from .cart import (
    CartItem,
    CartKey,
    CartLine,
    CartSummary,
    ProductSelection,
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
)
from .checkout import (
    Order,
    OrderCreate,
    OrderProduct,
    OrderStatus,
    OrderView,
    OrderHistoryResponse,
    CheckoutDraft,
    CheckoutUpdateRequest,
    CheckoutState,
    CheckoutResponse,
)

__all__ = [
    "Product",
    "ProductCategory",
    "SortKey",
    "FilterState",
    "FilterUpdateRequest",
    "FilterOptions",
    "ProductSearchResponse",
    "ALL_CATEGORIES",
    "CartItem",
    "CartKey",
    "CartLine",
    "CartSummary",
    "ProductSelection",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "Order",
    "OrderCreate",
    "OrderProduct",
    "OrderStatus",
    "OrderView",
    "OrderHistoryResponse",
    "CheckoutDraft",
    "CheckoutUpdateRequest",
    "CheckoutState",
    "CheckoutResponse",
]
