"""
CashFlowMin

Personal finance tracker: expenses per user, category totals and a
50/30/20 budget split of the stored salary.
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
from .routes import auth_router, expenses_router, profile_router, budget_router

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
    logger.info(f"{settings.cashflow_name} starting up...")
    logger.info(f"Record store: {settings.records_base_url}")
    yield
    logger.info(f"{settings.cashflow_name} shutting down...")
    await close_records_client()
    logger.info(f"Open sessions at shutdown: {len(session_manager.sessions)}")


# Create FastAPI app
app = FastAPI(
    title=settings.cashflow_name,
    description="Expense tracking and budget split",
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
app.include_router(auth_router)
app.include_router(expenses_router)
app.include_router(profile_router)
app.include_router(budget_router)


@app.get("/")
async def home():
    """CashFlowMin API index"""
    return {
        "message": f"{settings.cashflow_name} API",
        "docs": "/docs",
        "endpoints": {
            "auth": "/api/auth",
            "expenses": "/api/expenses",
            "profile": "/api/profile",
            "budget": "/api/budget",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "cashflow"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cashflow.main:app",
        host=settings.host,
        port=settings.cashflow_port,
        reload=settings.debug,
    )
