"""
Record Store Client

Async HTTP client for the PocketBase REST API used by both services
for authentication and record persistence.
"""

import logging
from typing import Optional, Any

import httpx

from .models import AuthResult, RecordList

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """Base exception for record store errors"""

    def __init__(self, message: str, status: int = 0, data: Optional[dict] = None):
        super().__init__(message)
        self.status = status
        self.data = data or {}


class AuthenticationError(RecordStoreError):
    """Authentication-related errors"""
    pass


class RecordNotFoundError(RecordStoreError):
    """The requested record does not exist or is not visible"""
    pass


def build_filter(expression: str, **params: Any) -> str:
    """
    Bind named parameters into a filter expression.

    Placeholders use the ``{:name}`` form. Strings are double-quoted with
    embedded quotes escaped, so user input can't break out of a literal.

        build_filter('email = {:email}', email='a@b.co')  ->  'email = "a@b.co"'
    """
    for name, value in params.items():
        if value is None:
            literal = "null"
        elif isinstance(value, bool):
            literal = "true" if value else "false"
        elif isinstance(value, (int, float)):
            literal = str(value)
        else:
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            literal = f'"{escaped}"'
        expression = expression.replace(f"{{:{name}}}", literal)
    return expression


class RecordStoreClient:
    """
    Client for a PocketBase record store.

    The client holds no identity of its own; callers pass the auth token of
    the session they act for, so one client can serve every session.

    Usage:
        client = RecordStoreClient("http://127.0.0.1:8090")
        auth = await client.auth_with_password("users", "a@b.co", "secret123")
        orders = await client.get_full_list("orders", sort="-created", token=auth.token)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize record store client.

        Args:
            base_url: Base URL of the PocketBase server
            timeout: Request timeout in seconds
            transport: Optional transport override (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self._http_client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    def _generate_headers(self, token: Optional[str] = None) -> dict[str, str]:
        """Generate headers including the auth token if available"""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if token:
            headers["Authorization"] = token
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
        params: Optional[dict] = None,
        token: Optional[str] = None,
    ) -> Any:
        """Make an HTTP request and decode the JSON response"""
        url = f"{self.base_url}{path}"

        try:
            response = await self._http_client.request(
                method=method,
                url=url,
                headers=self._generate_headers(token),
                json=body,
                params={k: v for k, v in (params or {}).items() if v is not None},
            )
        except httpx.HTTPError as e:
            logger.error(f"Record store unreachable: {method} {url} - {e}")
            raise RecordStoreError(f"Record store unreachable: {e}") from e

        if response.status_code >= 400:
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            raise self._error_for(response)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def _error_for(self, response: httpx.Response) -> RecordStoreError:
        """Map an error response to an exception"""
        try:
            payload = response.json()
        except ValueError:
            payload = {}

        message = payload.get("message") or f"Request failed with status {response.status_code}"
        data = payload.get("data") or {}

        if response.status_code in (401, 403):
            return AuthenticationError(message, response.status_code, data)
        if response.status_code == 404:
            return RecordNotFoundError(message, response.status_code, data)
        return RecordStoreError(message, response.status_code, data)

    # ==================== Auth APIs ====================

    async def auth_with_password(
        self,
        collection: str,
        identity: str,
        password: str,
    ) -> AuthResult:
        """Authenticate a record of an auth collection"""
        try:
            result = await self._request(
                "POST",
                f"/api/collections/{collection}/auth-with-password",
                body={"identity": identity, "password": password},
            )
        except AuthenticationError:
            raise
        except RecordStoreError as e:
            # A 400 here means bad credentials rather than a broken request
            if e.status == 400:
                raise AuthenticationError(e.args[0], e.status, e.data) from e
            raise

        return AuthResult(token=result["token"], record=result["record"])

    # ==================== Record APIs ====================

    async def get_list(
        self,
        collection: str,
        page: int = 1,
        per_page: int = 30,
        filter: Optional[str] = None,
        sort: Optional[str] = None,
        token: Optional[str] = None,
    ) -> RecordList:
        """Fetch one page of records"""
        result = await self._request(
            "GET",
            f"/api/collections/{collection}/records",
            params={
                "page": page,
                "perPage": per_page,
                "filter": filter,
                "sort": sort,
            },
            token=token,
        )
        return RecordList.from_response(result)

    async def get_full_list(
        self,
        collection: str,
        filter: Optional[str] = None,
        sort: Optional[str] = None,
        batch: int = 500,
        token: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """Fetch every matching record, page by page"""
        items: list[dict[str, Any]] = []
        page = 1

        while True:
            result = await self.get_list(
                collection,
                page=page,
                per_page=batch,
                filter=filter,
                sort=sort,
                token=token,
            )
            items.extend(result.items)

            if page >= result.total_pages or len(result.items) < batch:
                break
            page += 1

        return items

    async def get_one(
        self,
        collection: str,
        record_id: str,
        token: Optional[str] = None,
    ) -> dict[str, Any]:
        """Fetch a single record by ID"""
        return await self._request(
            "GET",
            f"/api/collections/{collection}/records/{record_id}",
            token=token,
        )

    async def create(
        self,
        collection: str,
        data: dict[str, Any],
        token: Optional[str] = None,
    ) -> dict[str, Any]:
        """Create a record"""
        return await self._request(
            "POST",
            f"/api/collections/{collection}/records",
            body=data,
            token=token,
        )

    async def update(
        self,
        collection: str,
        record_id: str,
        data: dict[str, Any],
        token: Optional[str] = None,
    ) -> dict[str, Any]:
        """Update fields of a record"""
        return await self._request(
            "PATCH",
            f"/api/collections/{collection}/records/{record_id}",
            body=data,
            token=token,
        )

    async def delete(
        self,
        collection: str,
        record_id: str,
        token: Optional[str] = None,
    ) -> None:
        """Delete a record"""
        await self._request(
            "DELETE",
            f"/api/collections/{collection}/records/{record_id}",
            token=token,
        )
