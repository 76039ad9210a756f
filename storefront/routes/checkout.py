"""Checkout API routes for the storefront"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from shared.dependencies import get_records_client, store_failure
from shared.records import RecordStoreClient, RecordStoreError
from ..core.session import ShopSession
from ..models.checkout import (
    CheckoutResponse,
    CheckoutState,
    CheckoutUpdateRequest,
)
from ..services.checkout import (
    CheckoutService,
    CheckoutValidationError,
    CheckoutInProgressError,
    can_submit,
    delivery_date_options,
    draft_errors,
    normalize_phone,
)
from .deps import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


def _checkout_state(session: ShopSession) -> CheckoutState:
    return CheckoutState(
        draft=session.checkout,
        delivery_dates=delivery_date_options(),
        errors=draft_errors(session.checkout),
        can_submit=can_submit(session.checkout, session.cart) and not session.is_checking_out,
        is_checking_out=session.is_checking_out,
    )


@router.get("", response_model=CheckoutState)
async def get_checkout(session: ShopSession = Depends(get_session)):
    """Get the checkout draft, its field errors and the delivery date options"""
    return _checkout_state(session)


@router.patch("", response_model=CheckoutState)
async def update_checkout(
    request: CheckoutUpdateRequest,
    session: ShopSession = Depends(get_session),
):
    """Edit checkout fields. Phone input keeps only its digits."""
    changes = request.model_dump(exclude_none=True)
    if "phone" in changes:
        changes["phone"] = normalize_phone(changes["phone"])

    session.checkout = session.checkout.model_copy(update=changes)
    return _checkout_state(session)


@router.post("", response_model=CheckoutResponse)
async def checkout(
    session: ShopSession = Depends(get_session),
    client: RecordStoreClient = Depends(get_records_client),
):
    """
    Place an order for the cart.

    Validation failures are reported without contacting the record store.
    On success the cart is emptied and the order history reloaded.
    """
    service = CheckoutService(client)

    try:
        order = await service.submit(session)
    except CheckoutInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except CheckoutValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RecordStoreError as e:
        raise store_failure(e, "to place order")

    try:
        await session.history.fetch(client, session.auth)
    except RecordStoreError as e:
        # the order is placed; a stale history is not worth failing over
        logger.error(f"Error fetching order history: {e}")

    return CheckoutResponse(success=True, order=order)
