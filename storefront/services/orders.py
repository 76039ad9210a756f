"""
Order history

Loads the signed-in identity's orders from the record store. Each session
keeps at most one load in flight: starting a new load, signing out or
closing the history view cancels the running one, and a cancelled load's
result is dropped.
"""

import asyncio
import logging
from typing import Optional

from shared.identity import AuthStore
from shared.records import RecordStoreClient, build_filter
from ..models.checkout import Order, OrderStatus
from .checkout import ORDERS_COLLECTION

logger = logging.getLogger(__name__)


class CancellationNotConfirmedError(ValueError):
    """Cancelling an order needs explicit confirmation"""
    pass


class OrderNotCancellableError(ValueError):
    """Only pending orders can be cancelled"""
    pass


class OrderHistory:
    """Order history of one session"""

    def __init__(self):
        self.orders: list[Order] = []
        self._task: Optional[asyncio.Task] = None

    @property
    def is_loading(self) -> bool:
        return self._task is not None and not self._task.done()

    def cancel(self) -> None:
        """Cancel the in-flight load, if any"""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            logger.debug("Cancelled order history fetch")
        self._task = None

    def reset(self) -> None:
        """Forget the loaded orders, e.g. after sign-out"""
        self.cancel()
        self.orders = []

    async def fetch(self, client: RecordStoreClient, auth: AuthStore) -> Optional[list[Order]]:
        """
        Load the orders of the signed-in identity, newest first.

        Returns the orders, or None when this load was superseded or
        cancelled before it finished. Without an identity the history is
        emptied and no request is made.
        """
        self.cancel()

        if not auth.is_valid:
            self.orders = []
            return self.orders

        task = asyncio.create_task(self._load(client, auth.email, auth.token))
        self._task = task

        try:
            orders = await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                # the caller itself is being cancelled
                raise
            return None
        finally:
            if self._task is task:
                self._task = None

        self.orders = orders
        return orders

    async def _load(self, client: RecordStoreClient, email: str, token: str) -> list[Order]:
        records = await client.get_full_list(
            ORDERS_COLLECTION,
            filter=build_filter("email = {:email}", email=email),
            sort="-created",
            token=token,
        )
        return [Order.model_validate(record) for record in records]


class OrderService:
    """Order cancellation for storefront sessions"""

    def __init__(self, client: RecordStoreClient):
        self.client = client

    async def cancel_order(
        self,
        history: OrderHistory,
        auth: AuthStore,
        order_id: str,
        confirmed: bool = False,
    ) -> Optional[list[Order]]:
        """
        Cancel a pending order and reload the history.

        The status is read back from the record store before deleting, so
        the pending-only rule holds even if the local history is stale.

        Raises:
            CancellationNotConfirmedError: if the user did not confirm
            OrderNotCancellableError: if the order is no longer pending
            RecordStoreError: if the record store call fails
        """
        if not confirmed:
            raise CancellationNotConfirmedError("Are you sure you want to cancel this order?")

        record = await self.client.get_one(ORDERS_COLLECTION, order_id, token=auth.token)
        order = Order.model_validate(record)

        if order.email != auth.email:
            raise OrderNotCancellableError("This order does not belong to you")
        if order.status != OrderStatus.PENDING:
            raise OrderNotCancellableError(
                f"Only pending orders can be cancelled (this order is {order.status.value})"
            )

        await self.client.delete(ORDERS_COLLECTION, order_id, token=auth.token)
        logger.info(f"Order {order_id} cancelled")

        return await history.fetch(self.client, auth)
