"""
Tests for order history and cancellation
"""
import asyncio
import unittest

from shared.identity import AuthService, AuthStore
from storefront.models.checkout import OrderStatus
from storefront.services.orders import (
    CancellationNotConfirmedError,
    OrderHistory,
    OrderNotCancellableError,
    OrderService,
)
from tests.fake_store import FakeRecordStore

EMAIL = "shopper@example.com"


class OrderTestCase(unittest.IsolatedAsyncioTestCase):
    """Signed-in identity against a fake record store"""

    async def asyncSetUp(self):
        self.store = FakeRecordStore()
        self.client = self.store.client()
        self.store.add_user(EMAIL, "password123", name="Sam Shopper")
        self.auth = AuthStore()
        await AuthService(self.client).sign_in(self.auth, EMAIL, "password123")
        self.store.requests.clear()
        self.history = OrderHistory()

    async def asyncTearDown(self):
        await self.client.close()

    def add_order(self, email=EMAIL, status="pending", total=10000):
        return self.store.add_record(
            "orders",
            email=email,
            phone="5551234567",
            deliveryAddress="1 Main St",
            deliveryDate="2024-03-06",
            products=[{"productId": 1, "name": "Classic Navy Blazer", "quantity": 1,
                       "price": 9500, "color": "Navy", "size": None}],
            totalAmount=total,
            status=status,
        )

    async def wait_for_requests(self, count):
        while len(self.store.requests) < count:
            await asyncio.sleep(0)


class TestOrderHistory(OrderTestCase):
    """Test cases for OrderHistory.fetch"""

    async def test_fetch_lists_own_orders_newest_first(self):
        """Test filtering by email and sort order"""
        older = self.add_order()
        self.add_order(email="someone@else.com")
        newer = self.add_order(status="shipped")

        orders = await self.history.fetch(self.client, self.auth)

        self.assertEqual([o.id for o in orders], [newer["id"], older["id"]])
        self.assertEqual(self.history.orders, orders)
        self.assertTrue(orders[1].can_cancel)
        self.assertFalse(orders[0].can_cancel)

    async def test_fetch_without_identity_is_empty(self):
        """Test that a signed-out history makes no request"""
        self.add_order()
        orders = await self.history.fetch(self.client, AuthStore())

        self.assertEqual(orders, [])
        self.assertEqual(self.store.requests, [])

    async def test_newer_fetch_supersedes_older(self):
        """Test that a superseded fetch never overwrites the history"""
        self.add_order()
        self.store.gate = asyncio.Event()

        first = asyncio.create_task(self.history.fetch(self.client, self.auth))
        await self.wait_for_requests(1)

        self.add_order()
        second = asyncio.create_task(self.history.fetch(self.client, self.auth))
        await self.wait_for_requests(2)
        self.store.gate.set()

        self.assertIsNone(await first)
        latest = await second
        self.assertEqual(len(latest), 2)
        self.assertEqual(len(self.history.orders), 2)
        self.assertFalse(self.history.is_loading)

    async def test_cancel_drops_in_flight_fetch(self):
        """Test closing the history while a load runs"""
        self.add_order()
        self.store.gate = asyncio.Event()

        fetch = asyncio.create_task(self.history.fetch(self.client, self.auth))
        await self.wait_for_requests(1)
        self.history.cancel()
        self.store.gate.set()

        self.assertIsNone(await fetch)
        self.assertEqual(self.history.orders, [])

    async def test_cancelling_the_caller_propagates(self):
        """Test that an outer cancellation is not swallowed"""
        self.store.gate = asyncio.Event()

        fetch = asyncio.create_task(self.history.fetch(self.client, self.auth))
        await self.wait_for_requests(1)
        fetch.cancel()

        with self.assertRaises(asyncio.CancelledError):
            await fetch

    async def test_reset_forgets_orders(self):
        """Test reset after sign-out"""
        self.add_order()
        await self.history.fetch(self.client, self.auth)
        self.history.reset()
        self.assertEqual(self.history.orders, [])


class TestCancelOrder(OrderTestCase):
    """Test cases for OrderService.cancel_order"""

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.service = OrderService(self.client)

    async def test_cancel_requires_confirmation(self):
        """Test that nothing happens without confirmation"""
        order = self.add_order()

        with self.assertRaises(CancellationNotConfirmedError):
            await self.service.cancel_order(self.history, self.auth, order["id"])

        self.assertEqual(self.store.requests, [])
        self.assertIn(order["id"], self.store.collections["orders"])

    async def test_cancel_pending_order(self):
        """Test that a pending order is deleted and the history reloaded"""
        keep = self.add_order(status="delivered")
        order = self.add_order()

        orders = await self.service.cancel_order(
            self.history, self.auth, order["id"], confirmed=True
        )

        self.assertNotIn(order["id"], self.store.collections["orders"])
        self.assertEqual([o.id for o in orders], [keep["id"]])
        self.assertEqual(orders[0].status, OrderStatus.DELIVERED)

    async def test_only_pending_orders_can_be_cancelled(self):
        """Test that the stored status is checked before deleting"""
        order = self.add_order(status="shipped")

        with self.assertRaises(OrderNotCancellableError):
            await self.service.cancel_order(self.history, self.auth, order["id"], confirmed=True)

        self.assertIn(order["id"], self.store.collections["orders"])

    async def test_stale_local_status_is_not_trusted(self):
        """Test an order that shipped after the history was loaded"""
        order = self.add_order()
        await self.history.fetch(self.client, self.auth)
        self.store.collections["orders"][order["id"]]["status"] = "processing"

        with self.assertRaises(OrderNotCancellableError):
            await self.service.cancel_order(self.history, self.auth, order["id"], confirmed=True)

    async def test_orders_of_other_users_cannot_be_cancelled(self):
        """Test the ownership check"""
        order = self.add_order(email="someone@else.com")

        with self.assertRaises(OrderNotCancellableError):
            await self.service.cancel_order(self.history, self.auth, order["id"], confirmed=True)

        self.assertIn(order["id"], self.store.collections["orders"])


if __name__ == '__main__':
    unittest.main()
