import logging
from typing import Any

from octo_connector.application.dtos.booking_dto import CancelBookingDTO
from octo_connector.application.interfaces.octo_supplier_gateway import OctoSupplierGateway
from octo_connector.application.use_cases.booking_enrichment import BookingEnricher
from octo_connector.domain.errors import ValidationError
from octo_connector.domain.value_objects.credential import Credential


class CancelBookingUseCase:
    def __init__(
        self,
        supplier_gateway: OctoSupplierGateway,
        enricher: BookingEnricher,
    ) -> None:
        self._supplier_gateway = supplier_gateway
        self._enricher = enricher
        self._logger = logging.getLogger(__name__)

    async def execute(self, credential: Credential, command: CancelBookingDTO) -> dict[str, Any]:
        booking_id = command.target_id
        if not booking_id:
            raise ValidationError("bookingId", "Invalid booking id")

        booking = await self._supplier_gateway.cancel_booking(
            credential.api_key, booking_id, {"reason": command.reason}
        )
        self._logger.info(
            "Supplier booking cancelled",
            extra={"booking_uuid": booking.get("uuid") or booking_id, "status": booking.get("status")},
        )
        return {"cancellation": await self._enricher.enrich(credential, booking)}
