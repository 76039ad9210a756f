"""
Tests for the CashFlowMin HTTP API
"""
import asyncio
import unittest

from fastapi.testclient import TestClient

from cashflow.main import app
from shared.dependencies import SESSION_HEADER, get_records_client
from tests.fake_store import FakeRecordStore

EXPENSE = {
    "to": "Landlord",
    "phone": "5551234567",
    "amount": "1500",
    "date": "2024-03-01T09:30",
    "category": "Needs",
}


class CashflowApiTestCase(unittest.TestCase):
    """Drives the API as one browser session against a fake record store"""

    def setUp(self):
        self.store = FakeRecordStore()
        self.records = self.store.client()
        app.dependency_overrides[get_records_client] = lambda: self.records
        self.client = TestClient(app)
        self.headers = {}
        self.user = self.store.add_user("ann@example.com", "password123", name="Ann Lee", salary=4000)
        # error responses carry no session header, so open the session first
        self.call("GET", "/api/auth/me")

    def tearDown(self):
        app.dependency_overrides.clear()
        asyncio.run(self.records.close())

    def call(self, method, url, **kwargs):
        response = self.client.request(method, url, headers=self.headers, **kwargs)
        session_id = response.headers.get(SESSION_HEADER)
        if session_id:
            self.headers = {SESSION_HEADER: session_id}
        return response

    def sign_in(self):
        response = self.call("POST", "/api/auth/sign-in", json={
            "email": "ann@example.com", "password": "password123",
        })
        self.assertEqual(response.status_code, 200, response.text)


class TestIdentityRequired(CashflowApiTestCase):
    """Every finance route needs a signed-in user"""

    def test_routes_answer_401_when_signed_out(self):
        """Test the sign-in redirect analogue"""
        for method, url in [
            ("GET", "/api/expenses"),
            ("POST", "/api/expenses"),
            ("DELETE", "/api/expenses/x"),
            ("GET", "/api/profile"),
            ("PATCH", "/api/profile"),
            ("GET", "/api/budget"),
        ]:
            kwargs = {"json": {}} if method in ("POST", "PATCH") else {}
            self.assertEqual(self.call(method, url, **kwargs).status_code, 401, url)


class TestExpenseRoutes(CashflowApiTestCase):
    """Test cases for /api/expenses"""

    def setUp(self):
        super().setUp()
        self.sign_in()

    def test_add_list_delete(self):
        """Test the expense lifecycle"""
        data = self.call("POST", "/api/expenses", json=EXPENSE).json()
        self.assertEqual(len(data["expenses"]), 1)
        expense = data["expenses"][0]
        self.assertEqual(expense["amount"], 1500)
        self.assertEqual(expense["date"], "2024-03-01T09:30:00.000Z")
        self.assertEqual(data["totals"], {"labels": ["Needs"], "values": [1500]})

        listed = self.call("GET", "/api/expenses").json()
        self.assertEqual([e["id"] for e in listed["expenses"]], [expense["id"]])

        deleted = self.call("DELETE", f"/api/expenses/{expense['id']}").json()
        self.assertEqual(deleted["expenses"], [])

    def test_invalid_expense(self):
        """Test form validation messages"""
        response = self.call("POST", "/api/expenses", json={**EXPENSE, "amount": "abc"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Amount must be a valid number.")
        self.assertEqual(self.store.requests_to("expenses"), [])

    def test_failed_load_degrades_to_empty_list(self):
        """Test that a store failure still renders the page"""
        self.store.fail_with = 500
        data = self.call("GET", "/api/expenses").json()
        self.assertEqual(data["expenses"], [])
        self.assertEqual(data["message"], "Unable to load expenses. Please try again later.")

    def test_expenses_are_dropped_on_sign_out(self):
        """Test that sign-out forgets the loaded expenses"""
        self.call("POST", "/api/expenses", json=EXPENSE)
        identity = self.call("POST", "/api/auth/sign-out").json()
        self.assertFalse(identity["authenticated"])
        self.assertEqual(self.call("GET", "/api/expenses").status_code, 401)


class TestProfileAndBudgetRoutes(CashflowApiTestCase):
    """Test cases for /api/profile and /api/budget"""

    def setUp(self):
        super().setUp()
        self.sign_in()

    def test_profile(self):
        """Test reading and updating the profile"""
        profile = self.call("GET", "/api/profile").json()
        self.assertEqual(profile["name"], "Ann Lee")
        self.assertEqual(profile["salary"], 4000)

        profile = self.call("PATCH", "/api/profile", json={"salary": 5000, "phone": "5550000000"}).json()
        self.assertEqual(profile["salary"], 5000)
        self.assertEqual(self.store.collections["users"][self.user["id"]]["phone"], "5550000000")

    def test_negative_salary_is_rejected(self):
        """Test request validation"""
        self.assertEqual(self.call("PATCH", "/api/profile", json={"salary": -1}).status_code, 422)

    def test_budget(self):
        """Test the split against recorded spending"""
        self.call("POST", "/api/expenses", json=EXPENSE)

        budget = self.call("GET", "/api/budget").json()

        self.assertEqual(budget["salary"], 4000)
        needs = budget["lines"][0]
        self.assertEqual(needs["category"], "Needs")
        self.assertEqual(needs["allocated"], 2000)
        self.assertEqual(needs["spent"], 1500)
        self.assertEqual(needs["remaining"], 500)
        self.assertEqual(budget["total_remaining"], 2500)


if __name__ == '__main__':
    unittest.main()
