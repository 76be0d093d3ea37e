"""Integration tests for the check API HTTP adapter."""

import json
import math

import httpx
import pytest

from src.vehicle_check.application.errors import CheckApiError
from src.vehicle_check.application.services.check_payload import CreateCheckPayload
from src.vehicle_check.domain.value_objects.checklist import default_checklist
from src.vehicle_check.domain.value_objects.field_error import FieldError
from src.vehicle_check.infrastructure.http_client import CheckApiClient, parse_error_details
from src.vehicle_check.infrastructure.logging import clear_correlation_id, set_correlation_id

BASE_URL = "http://backend/api/v1"


def make_client(handler):
    transport = httpx.MockTransport(handler)
    return CheckApiClient(BASE_URL, client=httpx.AsyncClient(transport=transport))


def make_payload(odometer_km=12000.0, note=None):
    return CreateCheckPayload(
        vehicle_id="v1",
        odometer_km=odometer_km,
        items=default_checklist(),
        note=note
    )


class TestParseErrorDetails:
    """Test cases for parse_error_details."""

    def test_details_parsed_in_order(self):
        """Test field/reason pairs are extracted."""
        body = {"error": {"details": [
            {"field": "vehicleId", "reason": "required"},
            {"field": "odometerKm", "reason": "must be a positive number"},
        ]}}

        assert parse_error_details(body) == [
            FieldError("vehicleId", "required"),
            FieldError("odometerKm", "must be a positive number"),
        ]

    @pytest.mark.parametrize("body", [
        None,
        "oops",
        {},
        {"error": "bad"},
        {"error": {"message": "no details"}},
        {"error": {"details": "not a list"}},
        {"error": {"details": [{"field": "vehicleId"}]}},
    ])
    def test_missing_or_malformed_details(self, body):
        """Test bodies without usable details yield None."""
        assert parse_error_details(body) is None


class TestCheckApiClient:
    """Test cases for CheckApiClient."""

    @pytest.mark.asyncio
    async def test_list_vehicles(self):
        """Test vehicles are fetched and parsed."""
        def handler(request):
            assert request.method == "GET"
            assert str(request.url) == f"{BASE_URL}/vehicles"
            return httpx.Response(200, json=[
                {"id": "v1", "registration": "ABC123", "make": "Ford", "model": "Focus", "year": 2019}
            ])

        async with make_client(handler) as client:
            vehicles = await client.list_vehicles()

        assert [vehicle.display_label for vehicle in vehicles] == ["ABC123 - Ford Focus (2019)"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [
        httpx.Response(200, json={"vehicles": []}),
        httpx.Response(200, json=[{"id": "v1"}]),
        httpx.Response(200, text="<html>"),
    ])
    async def test_malformed_vehicle_list(self, response):
        """Test malformed vehicle responses raise CheckApiError."""
        async with make_client(lambda request: response) as client:
            with pytest.raises(CheckApiError) as exc_info:
                await client.list_vehicles()

        assert exc_info.value.details is None

    @pytest.mark.asyncio
    async def test_create_check_body(self):
        """Test the create-check request body and headers."""
        captured = {}

        def handler(request):
            captured["url"] = str(request.url)
            captured["body"] = json.loads(request.content)
            captured["correlation_id"] = request.headers.get("X-Correlation-ID")
            return httpx.Response(201, json={"id": "c1"})

        set_correlation_id("corr-42")
        try:
            async with make_client(handler) as client:
                await client.create_check(make_payload(note="Wipers worn"))
        finally:
            clear_correlation_id()

        assert captured["url"] == f"{BASE_URL}/checks"
        assert captured["correlation_id"] == "corr-42"
        assert captured["body"] == {
            "vehicleId": "v1",
            "odometerKm": 12000.0,
            "items": [
                {"key": "TYRES", "status": "OK"},
                {"key": "BRAKES", "status": "OK"},
                {"key": "LIGHTS", "status": "OK"},
            ],
            "note": "Wipers worn",
        }

    @pytest.mark.asyncio
    async def test_nan_odometer_sent_as_null(self):
        """Test NaN readings are serialized as null."""
        captured = {}

        def handler(request):
            captured["body"] = json.loads(request.content)
            captured["correlation_id"] = request.headers.get("X-Correlation-ID")
            return httpx.Response(201, json={})

        async with make_client(handler) as client:
            await client.create_check(make_payload(odometer_km=math.nan))

        assert captured["body"]["odometerKm"] is None
        assert "note" not in captured["body"]
        assert captured["correlation_id"]

    @pytest.mark.asyncio
    async def test_validation_failure_carries_details(self):
        """Test a 400 with details raises a validation CheckApiError."""
        def handler(request):
            return httpx.Response(400, json={"error": {
                "code": "VALIDATION_ERROR",
                "message": "Check validation failed",
                "details": [{"field": "vehicleId", "reason": "required"}],
            }})

        async with make_client(handler) as client:
            with pytest.raises(CheckApiError) as exc_info:
                await client.create_check(make_payload())

        error = exc_info.value
        assert error.status_code == 400
        assert error.is_validation_error is True
        assert error.field_messages() == ["vehicleId: required"]

    @pytest.mark.asyncio
    async def test_empty_details_list_is_validation_failure(self):
        """Test a present but empty details list still marks a validation error."""
        def handler(request):
            return httpx.Response(400, json={"error": {"code": "VALIDATION_ERROR", "details": []}})

        async with make_client(handler) as client:
            with pytest.raises(CheckApiError) as exc_info:
                await client.create_check(make_payload())

        assert exc_info.value.details == []
        assert exc_info.value.is_validation_error is True
        assert exc_info.value.field_messages() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [
        httpx.Response(500, json={"error": {"code": "INTERNAL_ERROR", "message": "boom"}}),
        httpx.Response(502, text="Bad Gateway"),
        httpx.Response(400, json={"detail": "not our envelope"}),
    ])
    async def test_generic_http_failure(self, response):
        """Test error responses without details raise a generic CheckApiError."""
        async with make_client(lambda request: response) as client:
            with pytest.raises(CheckApiError) as exc_info:
                await client.create_check(make_payload())

        assert exc_info.value.status_code == response.status_code
        assert exc_info.value.is_validation_error is False

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        """Test transport errors are wrapped in CheckApiError."""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(CheckApiError) as exc_info:
                await client.create_check(make_payload())

        assert exc_info.value.status_code is None
        assert exc_info.value.details is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_injected_client_not_closed(self):
        """Test a caller supplied httpx client stays open."""
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])))
        client = CheckApiClient(BASE_URL, client=http_client)

        await client.close()

        assert http_client.is_closed is False
        await http_client.aclose()
