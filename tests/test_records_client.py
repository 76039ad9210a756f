"""
Tests for the record store client
"""
import json
import unittest

import httpx

from shared.records import (
    AuthenticationError,
    RecordNotFoundError,
    RecordStoreClient,
    RecordStoreError,
    build_filter,
)
from tests.fake_store import BASE_URL, FakeRecordStore


class TestBuildFilter(unittest.TestCase):
    """Test cases for build_filter"""

    def test_string_values_are_quoted(self):
        """Test binding a string"""
        self.assertEqual(build_filter("email = {:email}", email="a@b.co"), 'email = "a@b.co"')

    def test_quotes_cannot_break_out_of_literal(self):
        """Test escaping of embedded quotes and backslashes"""
        self.assertEqual(
            build_filter("name = {:name}", name='x" || id != "'),
            'name = "x\\" || id != \\""',
        )
        self.assertEqual(build_filter("name = {:name}", name="a\\b"), 'name = "a\\\\b"')

    def test_other_literals(self):
        """Test numbers, booleans and null"""
        self.assertEqual(
            build_filter("a = {:a} && b = {:b} && c = {:c}", a=5, b=True, c=None),
            "a = 5 && b = true && c = null",
        )


class TestRecordStoreClient(unittest.IsolatedAsyncioTestCase):
    """Test cases for RecordStoreClient against the fake store"""

    async def asyncSetUp(self):
        self.store = FakeRecordStore()
        self.client = self.store.client()

    async def asyncTearDown(self):
        await self.client.close()

    async def test_auth_with_password(self):
        """Test a successful password authentication"""
        user = self.store.add_user("a@b.co", "password123", name="Ann")

        result = await self.client.auth_with_password("users", "a@b.co", "password123")

        self.assertEqual(result.record["id"], user["id"])
        self.assertTrue(result.token)

    async def test_bad_credentials_raise_authentication_error(self):
        """Test that a 400 from auth becomes AuthenticationError"""
        self.store.add_user("a@b.co", "password123")

        with self.assertRaises(AuthenticationError) as ctx:
            await self.client.auth_with_password("users", "a@b.co", "wrong")
        self.assertEqual(ctx.exception.status, 400)
        self.assertEqual(str(ctx.exception), "Failed to authenticate.")

    async def test_token_is_sent_as_authorization_header(self):
        """Test the auth header"""
        await self.client.get_list("orders", token="tok123")
        self.assertEqual(self.store.requests[-1].headers["Authorization"], "tok123")

        await self.client.get_list("orders")
        self.assertNotIn("Authorization", self.store.requests[-1].headers)

    async def test_get_list_query_parameters(self):
        """Test paging, filter and sort parameters"""
        await self.client.get_list("expenses", page=2, per_page=50, filter='user = "u1"', sort="-date")

        params = self.store.requests[-1].url.params
        self.assertEqual(params["page"], "2")
        self.assertEqual(params["perPage"], "50")
        self.assertEqual(params["filter"], 'user = "u1"')
        self.assertEqual(params["sort"], "-date")

    async def test_get_full_list_walks_every_page(self):
        """Test that all pages are fetched"""
        for i in range(7):
            self.store.add_record("orders", email="a@b.co", n=i)

        items = await self.client.get_full_list("orders", batch=3)

        self.assertEqual(len(items), 7)
        self.assertEqual(len(self.store.requests), 3)

    async def test_crud(self):
        """Test create, read, update and delete of a record"""
        created = await self.client.create("orders", {"email": "a@b.co", "status": "pending"})
        record_id = created["id"]

        self.assertEqual((await self.client.get_one("orders", record_id))["status"], "pending")

        updated = await self.client.update("orders", record_id, {"status": "shipped"})
        self.assertEqual(updated["status"], "shipped")

        self.assertIsNone(await self.client.delete("orders", record_id))
        self.assertNotIn(record_id, self.store.collections["orders"])

    async def test_missing_record_raises_not_found(self):
        """Test the 404 mapping"""
        with self.assertRaises(RecordNotFoundError) as ctx:
            await self.client.get_one("orders", "nope")
        self.assertEqual(ctx.exception.status, 404)

    async def test_server_error_carries_status_and_data(self):
        """Test a failing response"""
        self.store.fail_with = 500

        with self.assertRaises(RecordStoreError) as ctx:
            await self.client.create("orders", {})
        self.assertEqual(ctx.exception.status, 500)
        self.assertEqual(ctx.exception.data, {})

    async def test_forbidden_maps_to_authentication_error(self):
        """Test the 403 mapping"""
        self.store.fail_with = 403
        with self.assertRaises(AuthenticationError):
            await self.client.get_list("orders")

    async def test_unreachable_store(self):
        """Test that transport errors become RecordStoreError"""
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = RecordStoreClient(BASE_URL, transport=httpx.MockTransport(refuse))
        try:
            with self.assertRaises(RecordStoreError) as ctx:
                await client.get_list("orders")
            self.assertEqual(ctx.exception.status, 0)
        finally:
            await client.close()

    async def test_non_json_error_body(self):
        """Test an error response without a JSON body"""
        client = RecordStoreClient(
            BASE_URL,
            transport=httpx.MockTransport(lambda request: httpx.Response(502, text="Bad Gateway")),
        )
        try:
            with self.assertRaises(RecordStoreError) as ctx:
                await client.get_one("orders", "x")
            self.assertEqual(str(ctx.exception), "Request failed with status 502")
        finally:
            await client.close()

    async def test_request_body_is_json(self):
        """Test that payloads are sent as JSON"""
        await self.client.create("orders", {"totalAmount": 500})
        self.assertEqual(json.loads(self.store.requests[-1].content), {"totalAmount": 500})


if __name__ == '__main__':
    unittest.main()
