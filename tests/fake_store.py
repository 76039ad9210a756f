"""
In-memory PocketBase stand-in for tests

Serves the record and auth endpoints the services use through
httpx.MockTransport, and records every request it receives.
"""

import asyncio
import json
import re
import time

import httpx
import jwt

from shared.records import RecordStoreClient

BASE_URL = "http://records.test"

FILTER_PATTERN = re.compile(r'^(\w+) = "((?:[^"\\]|\\.)*)"$')


def make_token(user_id: str, expires_in: int = 3600) -> str:
    """Mint an auth token the way the record store does"""
    return jwt.encode(
        {"id": user_id, "type": "authRecord", "exp": int(time.time()) + expires_in},
        "record-store-test-signing-secret-0001",
        algorithm="HS256",
    )


class FakeRecordStore:
    """Collections of records kept in dicts, reachable over a mock transport"""

    def __init__(self):
        self.collections: dict[str, dict[str, dict]] = {}
        self.passwords: dict[str, str] = {}
        self.requests: list[httpx.Request] = []
        self.fail_with: int = 0
        self.gate: asyncio.Event | None = None
        self._counter = 0

    # ---- test setup helpers ----

    def add_user(self, email: str, password: str, **fields) -> dict:
        record = self._insert("users", {"email": email, "name": "", "phone": "", **fields})
        self.passwords[record["id"]] = password
        return record

    def add_record(self, collection: str, **fields) -> dict:
        return self._insert(collection, fields)

    def client(self) -> RecordStoreClient:
        return RecordStoreClient(BASE_URL, transport=httpx.MockTransport(self.handler))

    def requests_to(self, collection: str) -> list[httpx.Request]:
        return [r for r in self.requests if f"/collections/{collection}/" in r.url.path]

    # ---- transport ----

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.gate is not None:
            await self.gate.wait()

        if self.fail_with:
            return self._error(self.fail_with, "Something went wrong while processing your request.")

        parts = request.url.path.strip("/").split("/")
        # api / collections / {collection} / ...
        collection = parts[2]
        rest = parts[3:]

        if rest == ["auth-with-password"]:
            return self._auth(collection, json.loads(request.content))

        records = self.collections.setdefault(collection, {})

        if rest == ["records"]:
            if request.method == "GET":
                return self._list(records, request.url.params)
            if request.method == "POST":
                return httpx.Response(200, json=self._create(collection, json.loads(request.content)))

        record_id = rest[1]
        if record_id not in records:
            return self._error(404, "The requested resource wasn't found.")

        if request.method == "GET":
            return httpx.Response(200, json=self._public(records[record_id]))
        if request.method == "PATCH":
            records[record_id].update(json.loads(request.content))
            return httpx.Response(200, json=self._public(records[record_id]))
        if request.method == "DELETE":
            del records[record_id]
            return httpx.Response(204)

        return self._error(405, "Method not allowed.")

    # ---- endpoint behavior ----

    def _auth(self, collection: str, body: dict) -> httpx.Response:
        for record in self.collections.get(collection, {}).values():
            if record.get("email") == body["identity"] and self.passwords.get(record["id"]) == body["password"]:
                return httpx.Response(
                    200,
                    json={"token": make_token(record["id"]), "record": self._public(record)},
                )
        return self._error(400, "Failed to authenticate.")

    def _list(self, records: dict, params) -> httpx.Response:
        items = list(records.values())

        expression = params.get("filter")
        if expression:
            match = FILTER_PATTERN.match(expression)
            field, value = match.group(1), match.group(2).replace('\\"', '"').replace("\\\\", "\\")
            items = [r for r in items if str(r.get(field)) == value]

        sort = params.get("sort")
        if sort:
            field = sort.lstrip("-")
            items.sort(key=lambda r: r.get(field, ""), reverse=sort.startswith("-"))

        page = int(params.get("page", 1))
        per_page = int(params.get("perPage", 30))
        total_pages = max(1, -(-len(items) // per_page))
        start = (page - 1) * per_page

        return httpx.Response(
            200,
            json={
                "page": page,
                "perPage": per_page,
                "totalItems": len(items),
                "totalPages": total_pages,
                "items": [self._public(r) for r in items[start:start + per_page]],
            },
        )

    def _create(self, collection: str, body: dict) -> dict:
        body = dict(body)
        password = body.pop("password", None)
        body.pop("passwordConfirm", None)
        record = self._insert(collection, body)
        if password is not None:
            self.passwords[record["id"]] = password
        return self._public(record)

    def _insert(self, collection: str, fields: dict) -> dict:
        self._counter += 1
        record = {
            "id": f"rec{self._counter:012d}",
            "created": f"2024-01-01 00:00:00.{self._counter:06d}Z",
            **fields,
        }
        self.collections.setdefault(collection, {})[record["id"]] = record
        return record

    @staticmethod
    def _public(record: dict) -> dict:
        return dict(record)

    @staticmethod
    def _error(status: int, message: str) -> httpx.Response:
        return httpx.Response(status, json={"code": status, "message": message, "data": {}})
