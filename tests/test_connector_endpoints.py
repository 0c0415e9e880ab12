"""
Tests end-to-end de la API HTTP del conector contra el proveedor en memoria.
"""

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from octo_connector.api.dependencies import build_use_cases, get_use_cases
from octo_connector.config import Settings, get_settings
from octo_connector.domain.errors import SupplierError
from octo_connector.infrastructure.in_memory.octo_supplier import BIKE_RENTAL_PRODUCT_ID
from octo_connector.main import app

from tests.conftest import TEST_API_KEY

TOKEN = {"apiKey": TEST_API_KEY}


@pytest.fixture
async def client(settings, supplier):
    app.dependency_overrides[get_use_cases] = lambda: build_use_cases(settings, supplier_gateway=supplier)
    app.dependency_overrides[get_settings] = lambda: settings
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def test_token_template(client):
    resp = await client.get("/api/v1/token-template")

    assert resp.status_code == 200
    field = resp.json()["apiKey"]
    assert field["type"] == "text"
    assert field["regExp"].startswith("^[a-f0-9]{8}")


async def test_validate_token(client):
    resp = await client.post("/api/v1/validate-token", json={"token": TOKEN})
    assert resp.json() == {"valid": True}

    resp = await client.post("/api/v1/validate-token", json={"token": {"apiKey": "bad"}})
    assert resp.json() == {"valid": False}


async def test_products_search_with_wildcard(client):
    resp = await client.post(
        "/api/v1/products/search", json={"token": TOKEN, "payload": {"productName": "*Kayak*"}}
    )

    assert resp.status_code == 200
    assert [p["productId"] for p in resp.json()["products"]] == ["av_kayak01"]


async def test_quote_search_is_empty(client):
    resp = await client.post("/api/v1/quotes/search", json={"token": TOKEN, "payload": {}})

    assert resp.status_code == 200
    assert resp.json() == {"quote": []}


async def test_book_and_cancel_over_http(client, bike_availability_payload, holder_payload):
    resp = await client.post(
        "/api/v1/availability/search", json={"token": TOKEN, "payload": bike_availability_payload}
    )
    assert resp.status_code == 200
    key = resp.json()["availability"][0][0]["key"]

    resp = await client.post(
        "/api/v1/bookings",
        json={
            "token": TOKEN,
            "payload": {"availabilityKey": key, "holder": holder_payload, "reference": "HOST-REF-HTTP"},
        },
    )
    assert resp.status_code == 201
    booking = resp.json()["booking"]
    assert booking["status"] == "CONFIRMED"
    assert booking["cancellable"] is True
    assert booking["option"]["optionId"] == BIKE_RENTAL_PRODUCT_ID

    resp = await client.post(
        "/api/v1/bookings/search", json={"token": TOKEN, "payload": {"bookingId": "HOST-REF-HTTP"}}
    )
    assert [b["id"] for b in resp.json()["bookings"]] == [booking["id"]]

    resp = await client.post(
        "/api/v1/bookings/cancel",
        json={"token": TOKEN, "payload": {"bookingId": booking["id"], "reason": "Weather"}},
    )
    assert resp.status_code == 200
    assert resp.json()["cancellation"]["cancellable"] is False


async def test_availability_calendar(client, bike_availability_payload):
    resp = await client.post(
        "/api/v1/availability/calendar", json={"token": TOKEN, "payload": bike_availability_payload}
    )

    assert resp.status_code == 200
    assert [day["dateTimeStart"] for day in resp.json()["availability"][0]] == ["2026-12-01", "2026-12-02"]


async def test_validation_error_maps_to_400(client, bike_availability_payload):
    bike_availability_payload["optionIds"] = []

    resp = await client.post(
        "/api/v1/availability/search", json={"token": TOKEN, "payload": bike_availability_payload}
    )

    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"


async def test_invalid_availability_key_maps_to_400(client, holder_payload):
    resp = await client.post(
        "/api/v1/bookings",
        json={"token": TOKEN, "payload": {"availabilityKey": "not-a-key", "holder": holder_payload}},
    )

    assert resp.status_code == 400
    assert resp.json()["code"] == "INVALID_AVAILABILITY_KEY"


async def test_supplier_error_keeps_status_and_code(client):
    resp = await client.post(
        "/api/v1/products/search", json={"token": TOKEN, "payload": {"productId": "nope"}}
    )

    assert resp.status_code == 400
    assert resp.json()["supplier_error"] == "INVALID_PRODUCT_ID"


async def test_supplier_unauthorized(client):
    resp = await client.post("/api/v1/products/search", json={"token": {"apiKey": "bad"}, "payload": {}})

    assert resp.status_code == 401
    assert resp.json()["supplier_error"] == "UNAUTHORIZED"


async def test_supplier_5xx_maps_to_bad_gateway(client, supplier):
    supplier.failures["list_products"] = SupplierError("Supplier responded 500: boom", status_code=500)

    resp = await client.post("/api/v1/products/search", json={"token": TOKEN, "payload": {}})

    assert resp.status_code == 502


async def test_request_shape_is_validated(client):
    resp = await client.post(
        "/api/v1/availability/search",
        json={"token": TOKEN, "payload": {"productIds": [BIKE_RENTAL_PRODUCT_ID]}},
    )

    assert resp.status_code == 422


async def test_units_require_unit_id(client):
    resp = await client.post(
        "/api/v1/availability/search",
        json={
            "token": TOKEN,
            "payload": {
                "productIds": [BIKE_RENTAL_PRODUCT_ID],
                "optionIds": [BIKE_RENTAL_PRODUCT_ID],
                "units": [[{"quantity": 1}]],
                "startDate": "2026-12-01",
                "endDate": "2026-12-01",
            },
        },
    )

    assert resp.status_code == 422


class TestHealthChecks:
    def test_basic_health_endpoint(self):
        with TestClient(app) as client:
            response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_liveness_probe(self):
        with TestClient(app) as client:
            response = client.get("/health/live")
        assert response.status_code == 200

    def test_ready_when_signing_secret_configured(self, settings):
        app.dependency_overrides[get_settings] = lambda: settings
        try:
            with TestClient(app) as client:
                response = client.get("/health/ready")
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 200
        assert response.json()["checks"]["jwt_key"] == "configured"

    def test_not_ready_without_signing_secret(self):
        app.dependency_overrides[get_settings] = lambda: Settings(jwt_key=None, use_in_memory=True)
        try:
            with TestClient(app) as client:
                response = client.get("/health/ready")
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"
