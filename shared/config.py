"""Shared service configuration"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    storefront_name: str = "Strictly Formals"
    cashflow_name: str = "CashFlowMin"
    debug: bool = True
    host: str = "0.0.0.0"
    storefront_port: int = 8000
    cashflow_port: int = 8001

    # PocketBase record store
    records_base_url: str = "http://127.0.0.1:8090"
    records_timeout: float = 30.0

    # Sessions
    session_max_age_hours: int = 24

    class Config:
        env_file = "config/.env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
