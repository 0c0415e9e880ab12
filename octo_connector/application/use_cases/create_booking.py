import logging
from typing import Any

from octo_connector.application.dtos.booking_dto import CreateBookingDTO
from octo_connector.application.interfaces.octo_supplier_gateway import OctoSupplierGateway
from octo_connector.application.use_cases.booking_enrichment import BookingEnricher
from octo_connector.domain.errors import SupplierError, ValidationError
from octo_connector.domain.value_objects.credential import Credential
from octo_connector.infrastructure.security.availability_key import (
    booking_claims,
    decode_availability_key,
)


class CreateBookingUseCase:
    """
    Redeems an availability key: create (ON_HOLD) -> confirm -> enrich.

    Each step is a separate supplier call. A failed step stops the flow;
    a booking confirmed remotely whose product can no longer be resolved is
    reported as an error, never returned half filled.
    """

    def __init__(
        self,
        supplier_gateway: OctoSupplierGateway,
        enricher: BookingEnricher,
        jwt_key: str | None,
    ) -> None:
        self._supplier_gateway = supplier_gateway
        self._enricher = enricher
        self._jwt_key = jwt_key
        self._logger = logging.getLogger(__name__)

    def _validate(self, command: CreateBookingDTO) -> None:
        if not self._jwt_key:
            raise ValidationError("jwtKey", "JWT secret should be set")
        if not command.availability_key:
            raise ValidationError("availabilityKey", "an availability code is required")
        if not command.holder.name:
            raise ValidationError("holder.name", "a holder's first name is required")
        if not command.holder.surname:
            raise ValidationError("holder.surname", "a holder's surname is required")

    async def execute(self, credential: Credential, command: CreateBookingDTO) -> dict[str, Any]:
        self._validate(command)
        claims = decode_availability_key(command.availability_key, self._jwt_key)

        booking = await self._supplier_gateway.create_booking(
            credential.api_key,
            {**booking_claims(claims), "notes": command.notes},
        )
        self._logger.info(
            "Supplier booking created on hold",
            extra={"booking_uuid": booking.get("uuid"), "product_id": claims.get("productId")},
        )

        try:
            booking = await self._supplier_gateway.confirm_booking(
                credential.api_key,
                booking["uuid"],
                {
                    "contact": command.holder.to_octo_contact(),
                    "resellerReference": command.reference,
                },
            )
        except SupplierError:
            self._logger.error(
                "Supplier booking confirmation failed, booking left on hold",
                extra={"booking_uuid": booking.get("uuid"), "reseller_reference": command.reference},
            )
            raise

        self._logger.info(
            "Supplier booking confirmed",
            extra={
                "booking_uuid": booking.get("uuid"),
                "supplier_reference": booking.get("supplierReference"),
            },
        )
        enriched = await self._enricher.enrich(
            credential,
            booking,
            product_id=claims.get("productId"),
            option_id=claims.get("optionId"),
        )
        return {"booking": enriched}
