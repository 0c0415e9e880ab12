from typing import Any
from urllib.parse import quote

from octo_connector.application.interfaces.octo_supplier_gateway import OctoSupplierGateway
from octo_connector.infrastructure.gateways.octo_http_client import OctoHttpClient


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class OctoSupplierGatewayHTTP(OctoSupplierGateway):
    """
    Gateway para proveedores OCTO (Peek Pro).

    Recursos:
    - GET    /products[/{id}]
    - POST   /availability, /availability/calendar
    - POST   /bookings, /bookings/{uuid}/confirm
    - DELETE /bookings/{uuid}
    - GET    /bookings/{uuid}, /bookings?resellerReference|supplierReference|localDateStart&localDateEnd
    """

    def __init__(self, client: OctoHttpClient) -> None:
        self._client = client

    async def list_products(self, api_key: str | None) -> list[dict[str, Any]]:
        return await self._client.request("GET", "/products", api_key)

    async def get_product(self, api_key: str | None, product_id: str) -> dict[str, Any]:
        return await self._client.request("GET", f"/products/{_segment(product_id)}", api_key)

    async def availability(self, api_key: str | None, body: dict[str, Any]) -> list[dict[str, Any]]:
        return await self._client.request("POST", "/availability", api_key, json=body)

    async def availability_calendar(
        self, api_key: str | None, body: dict[str, Any]
    ) -> list[dict[str, Any]]:
        return await self._client.request("POST", "/availability/calendar", api_key, json=body)

    async def create_booking(self, api_key: str | None, body: dict[str, Any]) -> dict[str, Any]:
        return await self._client.request("POST", "/bookings", api_key, json=body)

    async def confirm_booking(
        self, api_key: str | None, booking_uuid: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._client.request(
            "POST", f"/bookings/{_segment(booking_uuid)}/confirm", api_key, json=body
        )

    async def cancel_booking(
        self, api_key: str | None, booking_uuid: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._client.request(
            "DELETE", f"/bookings/{_segment(booking_uuid)}", api_key, json=body
        )

    async def get_booking(self, api_key: str | None, booking_uuid: str) -> dict[str, Any]:
        return await self._client.request("GET", f"/bookings/{_segment(booking_uuid)}", api_key)

    async def list_bookings(
        self, api_key: str | None, params: dict[str, str]
    ) -> list[dict[str, Any]]:
        return await self._client.request("GET", "/bookings", api_key, params=params)
