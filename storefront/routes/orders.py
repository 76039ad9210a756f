"""Order history API routes for the storefront"""

from fastapi import APIRouter, HTTPException, Depends, Query

from shared.dependencies import get_records_client, store_failure
from shared.records import RecordStoreClient, RecordStoreError
from ..core.session import ShopSession
from ..models.checkout import OrderHistoryResponse, OrderView
from ..services.orders import (
    OrderService,
    CancellationNotConfirmedError,
    OrderNotCancellableError,
)
from .deps import get_session, require_identity

router = APIRouter(prefix="/api/orders", tags=["Orders"])


def _history_response(session: ShopSession, message=None) -> OrderHistoryResponse:
    return OrderHistoryResponse(
        orders=[OrderView(order=o, can_cancel=o.can_cancel) for o in session.history.orders],
        message=message,
    )


@router.get("", response_model=OrderHistoryResponse)
async def list_orders(
    session: ShopSession = Depends(get_session),
    client: RecordStoreClient = Depends(get_records_client),
):
    """
    Reload the order history of the signed-in identity, newest first.

    Signed-out sessions get an empty history. A load that is superseded
    while running answers with whatever history is current.
    """
    try:
        orders = await session.history.fetch(client, session.auth)
    except RecordStoreError as e:
        raise store_failure(e, "to load order history")

    message = "Order history is being refreshed" if orders is None else None
    return _history_response(session, message)


@router.delete("/{order_id}", response_model=OrderHistoryResponse)
async def cancel_order(
    order_id: str,
    confirm: bool = Query(False, description="The shopper confirmed the cancellation"),
    session: ShopSession = Depends(require_identity),
    client: RecordStoreClient = Depends(get_records_client),
):
    """Cancel a pending order"""
    service = OrderService(client)

    try:
        await service.cancel_order(session.history, session.auth, order_id, confirmed=confirm)
    except CancellationNotConfirmedError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OrderNotCancellableError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except RecordStoreError as e:
        raise store_failure(e, "to cancel order")

    return _history_response(session, message="Order cancelled successfully")
