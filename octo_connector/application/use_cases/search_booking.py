import asyncio
import logging
from typing import Any, Awaitable

from octo_connector.application.dtos.booking_dto import SearchBookingDTO
from octo_connector.application.interfaces.octo_supplier_gateway import OctoSupplierGateway
from octo_connector.application.use_cases.booking_enrichment import BookingEnricher
from octo_connector.domain.errors import DomainError, SupplierError, ValidationError
from octo_connector.domain.value_objects.credential import Credential
from octo_connector.domain.value_objects.local_date import to_local_date


def _flatten(results: list[Any]) -> list[dict[str, Any]]:
    bookings: list[dict[str, Any]] = []
    for result in results:
        if isinstance(result, list):
            bookings.extend(result)
        elif result:
            bookings.append(result)
    return bookings


class SearchBookingUseCase:
    """
    Finds bookings by identifier or by travel date range.

    An identifier is tried three ways at once (booking uuid, reseller
    reference, supplier reference); a lookup the supplier rejects counts as
    "nothing found". Every booking is then enriched on its own, so one
    product that cannot be resolved does not hide the others.
    """

    def __init__(
        self,
        supplier_gateway: OctoSupplierGateway,
        enricher: BookingEnricher,
    ) -> None:
        self._supplier_gateway = supplier_gateway
        self._enricher = enricher
        self._logger = logging.getLogger(__name__)

    async def _or_empty(self, strategy: str, lookup: Awaitable[Any]) -> Any:
        try:
            return await lookup
        except SupplierError as exc:
            self._logger.warning(
                "Booking lookup returned nothing",
                extra={"strategy": strategy, "status": exc.status_code, "error_code": exc.code},
            )
            return []

    async def _find_by_id(self, api_key: str | None, booking_id: str) -> list[dict[str, Any]]:
        results = await asyncio.gather(
            self._or_empty("uuid", self._supplier_gateway.get_booking(api_key, booking_id)),
            self._or_empty(
                "resellerReference",
                self._supplier_gateway.list_bookings(api_key, {"resellerReference": booking_id}),
            ),
            self._or_empty(
                "supplierReference",
                self._supplier_gateway.list_bookings(api_key, {"supplierReference": booking_id}),
            ),
        )
        return _flatten(list(results))

    async def _find_by_travel_date(
        self, api_key: str | None, query: SearchBookingDTO
    ) -> list[dict[str, Any]]:
        params = {
            "localDateStart": to_local_date(query.travel_date_start, query.date_format, "travelDateStart"),
            "localDateEnd": to_local_date(query.travel_date_end, query.date_format, "travelDateEnd"),
        }
        return _flatten([await self._supplier_gateway.list_bookings(api_key, params)])

    async def execute(self, credential: Credential, query: SearchBookingDTO) -> dict[str, Any]:
        if query.booking_id:
            bookings = await self._find_by_id(credential.api_key, query.booking_id)
        elif query.travel_date_start and query.travel_date_end:
            bookings = await self._find_by_travel_date(credential.api_key, query)
        else:
            raise ValidationError(
                "bookingId", "a booking id or a complete travel date range is required"
            )

        results = await asyncio.gather(
            *(self._enricher.enrich(credential, booking) for booking in bookings),
            return_exceptions=True,
        )
        enriched = []
        for booking, result in zip(bookings, results):
            if isinstance(result, DomainError):
                self._logger.warning(
                    "Booking enrichment failed, returning booking without product",
                    extra={"booking_uuid": booking.get("uuid"), "error_code": result.code},
                )
                enriched.append(self._enricher.translate(booking, None, None))
            elif isinstance(result, BaseException):
                raise result
            else:
                enriched.append(result)
        return {"bookings": enriched}
