from abc import ABC, abstractmethod
from typing import Any


class OctoSupplierGateway(ABC):
    """
    Puerto hacia la API OCTO del proveedor.

    Todas las operaciones devuelven el JSON decodificado del proveedor, sin
    traducir. Las fallas se reportan con ``SupplierError``.
    """

    @abstractmethod
    async def list_products(self, api_key: str | None) -> list[dict[str, Any]]:
        pass

    @abstractmethod
    async def get_product(self, api_key: str | None, product_id: str) -> dict[str, Any]:
        pass

    @abstractmethod
    async def availability(self, api_key: str | None, body: dict[str, Any]) -> list[dict[str, Any]]:
        pass

    @abstractmethod
    async def availability_calendar(
        self, api_key: str | None, body: dict[str, Any]
    ) -> list[dict[str, Any]]:
        pass

    @abstractmethod
    async def create_booking(self, api_key: str | None, body: dict[str, Any]) -> dict[str, Any]:
        """Crea la reserva en estado ON_HOLD."""
        pass

    @abstractmethod
    async def confirm_booking(
        self, api_key: str | None, booking_uuid: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        pass

    @abstractmethod
    async def cancel_booking(
        self, api_key: str | None, booking_uuid: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        pass

    @abstractmethod
    async def get_booking(self, api_key: str | None, booking_uuid: str) -> dict[str, Any]:
        pass

    @abstractmethod
    async def list_bookings(
        self, api_key: str | None, params: dict[str, str]
    ) -> list[dict[str, Any]]:
        """Busca reservas por ``resellerReference``, ``supplierReference`` o rango de fechas."""
        pass
