"""HTTP adapter for the vehicle directory and check persistence services."""

import time
from types import TracebackType
from typing import Any, List, Optional

import httpx

from src.vehicle_check.application.errors import CheckApiError
from src.vehicle_check.application.ports.services import CheckPersistence, VehicleDirectory
from src.vehicle_check.application.services.check_payload import CreateCheckPayload
from src.vehicle_check.domain.entities.vehicle import Vehicle
from src.vehicle_check.domain.value_objects.field_error import FieldError
from src.vehicle_check.infrastructure.logging import (
    generate_correlation_id,
    get_correlation_id,
    get_logger,
    log_api_call
)

logger = get_logger(__name__)


def parse_error_details(body: Any) -> Optional[List[FieldError]]:
    """Extract field/reason pairs from an ``{"error": {"details": [...]}}`` body.

    Returns None when the body carries no usable details list.
    """
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if not isinstance(error, dict):
        return None
    details = error.get("details")
    if not isinstance(details, list):
        return None

    parsed = []
    for detail in details:
        if not isinstance(detail, dict) or "field" not in detail or "reason" not in detail:
            return None
        parsed.append(FieldError(field=str(detail["field"]), reason=str(detail["reason"])))
    return parsed


class CheckApiClient(VehicleDirectory, CheckPersistence):
    """Async client for the check API.

    Can be used as an async context manager; a client passed in by the
    caller is not closed by this object.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize client.

        Args:
            base_url: API base URL, e.g. http://localhost:8000/api/v1
            timeout: Request timeout in seconds
            client: Preconfigured httpx client (tests inject a mock transport)
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "CheckApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client if this object created it."""
        if self._owns_client:
            await self._client.aclose()

    async def list_vehicles(self) -> List[Vehicle]:
        """Fetch every selectable vehicle."""
        response = await self._request("GET", "/vehicles")
        body = self._json_body(response)
        if not isinstance(body, list):
            raise CheckApiError("Malformed vehicle list response", status_code=response.status_code)

        try:
            return [Vehicle.from_dict(item) for item in body]
        except (KeyError, TypeError, ValueError) as e:
            raise CheckApiError(
                f"Malformed vehicle record: {e}", status_code=response.status_code
            ) from e

    async def create_check(self, payload: CreateCheckPayload) -> None:
        """Record a completed check."""
        await self._request("POST", "/checks", json=payload.to_wire())

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.base_url}{path}"
        headers = {"X-Correlation-ID": get_correlation_id() or generate_correlation_id()}
        start_time = time.time()

        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            duration_ms = (time.time() - start_time) * 1000
            log_api_call(logger, method, url, None, duration_ms, error=str(e), error_type=type(e).__name__)
            raise CheckApiError(f"Request to {url} failed: {e}") from e

        duration_ms = (time.time() - start_time) * 1000
        log_api_call(logger, method, url, response.status_code, duration_ms)

        if response.is_error:
            details = parse_error_details(self._json_body(response, strict=False))
            raise CheckApiError(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code,
                details=details
            )
        return response

    @staticmethod
    def _json_body(response: httpx.Response, strict: bool = True) -> Any:
        try:
            return response.json()
        except ValueError as e:
            if not strict:
                return None
            raise CheckApiError(
                "Response body is not valid JSON", status_code=response.status_code
            ) from e
