# Storefront API routes

from .products import router as products_router
from .session import router as session_router
from .cart import router as cart_router
from .checkout import router as checkout_router
from .orders import router as orders_router
from .auth import router as auth_router

__all__ = [
    "products_router",
    "session_router",
    "cart_router",
    "checkout_router",
    "orders_router",
    "auth_router",
]
