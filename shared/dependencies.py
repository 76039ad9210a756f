"""FastAPI dependencies shared by both services"""

import logging
from typing import Optional

from fastapi import HTTPException

from .config import settings
from .records import RecordStoreClient, RecordStoreError

logger = logging.getLogger(__name__)

SESSION_HEADER = "X-Session-Id"

RETRY_MESSAGE = "Something went wrong. Please try again."

# Created on first use so importing the app does not open connections
records_client: Optional[RecordStoreClient] = None


def get_records_client() -> RecordStoreClient:
    """Get or create the record store client"""
    global records_client
    if records_client is None:
        records_client = RecordStoreClient(
            settings.records_base_url,
            timeout=settings.records_timeout,
        )
        logger.info(f"Record store client created for {settings.records_base_url}")
    return records_client


async def close_records_client() -> None:
    """Close the record store client if it was created"""
    global records_client
    if records_client is not None:
        await records_client.close()
        records_client = None


def store_failure(error: RecordStoreError, action: str) -> HTTPException:
    """Translate a record store failure into a retryable HTTP error"""
    logger.error(f"Error {action}: {error}")
    if error.status == 404:
        return HTTPException(status_code=404, detail="Record not found")
    return HTTPException(status_code=502, detail=f"Failed {action}. {RETRY_MESSAGE}")
