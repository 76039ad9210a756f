"""
Strictly Formals Storefront

Catalog browsing, cart, checkout and order history for a formal-wear shop.
Orders and user accounts live in a PocketBase-style record store.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from shared.config import settings
from shared.dependencies import SESSION_HEADER, close_records_client
from .core.session import session_manager
from .routes import (
    products_router,
    session_router,
    cart_router,
    checkout_router,
    orders_router,
    auth_router,
)

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.storefront_name} storefront starting up...")
    logger.info(f"Record store: {settings.records_base_url}")
    yield
    logger.info(f"{settings.storefront_name} storefront shutting down...")
    await close_records_client()
    logger.info(f"Open sessions at shutdown: {len(session_manager.sessions)}")


# Create FastAPI app
app = FastAPI(
    title=settings.storefront_name,
    description="Formal-wear storefront: catalog, cart, checkout and order history",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[SESSION_HEADER],
)

# Include API routers
app.include_router(products_router)
app.include_router(session_router)
app.include_router(cart_router)
app.include_router(checkout_router)
app.include_router(orders_router)
app.include_router(auth_router)


@app.get("/")
async def home():
    """Storefront API index"""
    return {
        "message": f"{settings.storefront_name} API",
        "docs": "/docs",
        "endpoints": {
            "products": "/api/products",
            "session": "/api/session",
            "cart": "/api/cart",
            "checkout": "/api/checkout",
            "orders": "/api/orders",
            "auth": "/api/auth",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "storefront"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.storefront_port,
        reload=settings.debug,
    )
