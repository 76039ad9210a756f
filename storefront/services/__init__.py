# Storefront business logic

from .catalog import filter_products, sort_products, toggle_value
from .cart import ShoppingCart, CartValidationError, shipping_for, order_total
from .checkout import (
    CheckoutService,
    CheckoutValidationError,
    CheckoutInProgressError,
    delivery_date_options,
    new_checkout_draft,
)
from .orders import (
    OrderHistory,
    OrderService,
    CancellationNotConfirmedError,
    OrderNotCancellableError,
)

__all__ = [
    "filter_products",
    "sort_products",
    "toggle_value",
    "ShoppingCart",
    "CartValidationError",
    "shipping_for",
    "order_total",
    "CheckoutService",
    "CheckoutValidationError",
    "CheckoutInProgressError",
    "delivery_date_options",
    "new_checkout_draft",
    "OrderHistory",
    "OrderService",
    "CancellationNotConfirmedError",
    "OrderNotCancellableError",
]
