import asyncio
import logging
from typing import Any

from octo_connector.application.dtos.availability_dto import AvailabilityQueryDTO, AvailabilityRowDTO
from octo_connector.application.interfaces.octo_supplier_gateway import OctoSupplierGateway
from octo_connector.application.interfaces.translator import TranslationSchemas, Translator
from octo_connector.application.use_cases.search_availability import (
    DEFAULT_CONCURRENCY,
    build_availability_rows,
)
from octo_connector.domain.value_objects.credential import Credential


class AvailabilityCalendarUseCase:
    """
    Per-day availability for each row.

    Calendar days are informational: they are not bookable, so no
    availability key is minted. Units are always sent because the supplier
    only totals a day's price when it knows the quantities.
    """

    def __init__(
        self,
        supplier_gateway: OctoSupplierGateway,
        translator: Translator,
        schemas: TranslationSchemas,
        jwt_key: str | None,
        concurrency: int = DEFAULT_CONCURRENCY,
    ) -> None:
        self._supplier_gateway = supplier_gateway
        self._translator = translator
        self._schemas = schemas
        self._jwt_key = jwt_key
        self._concurrency = max(1, concurrency)
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        credential: Credential,
        query: AvailabilityQueryDTO,
    ) -> dict[str, list[list[dict[str, Any]]]]:
        rows = build_availability_rows(query, self._jwt_key)
        semaphore = asyncio.Semaphore(self._concurrency)

        async def fetch(row: AvailabilityRowDTO) -> list[dict[str, Any]]:
            async with semaphore:
                days = await self._supplier_gateway.availability_calendar(
                    credential.api_key, row.to_octo(include_units=True)
                )
            return [
                self._translator.translate(
                    root_value=day,
                    type_defs=self._schemas.availability_type_defs,
                    query=self._schemas.availability_query,
                    variables={
                        "productId": row.product_id,
                        "optionId": row.option_id,
                        "currency": query.currency,
                        "unitsWithQuantity": [unit.to_host() for unit in row.units],
                    },
                )
                for day in days or []
            ]

        availability = await asyncio.gather(*(fetch(row) for row in rows))
        return {"availability": list(availability)}
