import asyncio
import logging
from typing import Any, Awaitable, Callable

from octo_connector.application.dtos.availability_dto import AvailabilityQueryDTO, AvailabilityRowDTO
from octo_connector.application.interfaces.octo_supplier_gateway import OctoSupplierGateway
from octo_connector.application.interfaces.translator import TranslationSchemas, Translator
from octo_connector.domain.errors import ValidationError
from octo_connector.domain.value_objects.credential import Credential
from octo_connector.domain.value_objects.local_date import to_local_date

DEFAULT_CONCURRENCY = 3


def build_availability_rows(query: AvailabilityQueryDTO, jwt_key: str | None) -> list[AvailabilityRowDTO]:
    """
    Validate an availability query and turn it into index-aligned rows.

    Raises ValidationError before any supplier call is made.
    """
    if not jwt_key:
        raise ValidationError("jwtKey", "JWT secret should be set")
    if len(query.product_ids) != len(query.option_ids):
        raise ValidationError("optionIds", "mismatched productIds/options length")
    if len(query.option_ids) != len(query.units):
        raise ValidationError("units", "mismatched options/units length")
    if not all(query.product_ids):
        raise ValidationError("productIds", "some invalid productId(s)")
    if not all(query.option_ids):
        raise ValidationError("optionIds", "some invalid optionId(s)")
    if not all(unit.unit_id for row in query.units for unit in row):
        raise ValidationError("units", "some invalid unitId(s)")

    local_date_start = to_local_date(query.start_date, query.date_format, field="startDate")
    local_date_end = to_local_date(query.end_date, query.date_format, field="endDate")
    if local_date_end < local_date_start:
        raise ValidationError("endDate", "endDate is before startDate")

    return [
        AvailabilityRowDTO(
            product_id=product_id,
            option_id=query.option_ids[index],
            units=query.units[index],
            local_date_start=local_date_start,
            local_date_end=local_date_end,
        )
        for index, product_id in enumerate(query.product_ids)
    ]


def merge_unit_pricing(
    with_units: list[dict[str, Any]] | None,
    without_units: list[dict[str, Any]] | None,
) -> list[dict[str, Any]]:
    """Copy ``unitPricing`` from the unitless answer onto the matching (same ``id``) records."""
    unitless_by_id = {record.get("id"): record for record in without_units or []}
    merged = []
    for record in with_units or []:
        match = unitless_by_id.get(record.get("id"))
        if match is None or "unitPricing" not in match:
            merged.append(record)
            continue
        merged.append({**record, "unitPricing": match["unitPricing"]})
    return merged


async def _limited(semaphore: asyncio.Semaphore, call: Callable[[], Awaitable[Any]]) -> Any:
    async with semaphore:
        return await call()


class SearchAvailabilityUseCase:
    """
    Availability engine.

    Fans out one supplier query per (product, option, units) row, at most
    ``concurrency`` supplier calls in flight, and returns the translated
    slots in the same order as the input rows. Every slot carries an
    availability key minted during translation.
    """

    def __init__(
        self,
        supplier_gateway: OctoSupplierGateway,
        translator: Translator,
        schemas: TranslationSchemas,
        jwt_key: str | None,
        concurrency: int = DEFAULT_CONCURRENCY,
        unit_pricing: bool = True,
        key_ttl_seconds: int | None = None,
    ) -> None:
        self._supplier_gateway = supplier_gateway
        self._translator = translator
        self._schemas = schemas
        self._jwt_key = jwt_key
        self._concurrency = max(1, concurrency)
        self._unit_pricing = unit_pricing
        self._key_ttl_seconds = key_ttl_seconds
        self._logger = logging.getLogger(__name__)

    async def _fetch_row(
        self,
        api_key: str | None,
        row: AvailabilityRowDTO,
        semaphore: asyncio.Semaphore,
    ) -> list[dict[str, Any]]:
        with_units = _limited(
            semaphore, lambda: self._supplier_gateway.availability(api_key, row.to_octo(include_units=True))
        )
        if not self._unit_pricing:
            return await with_units or []
        without_units = _limited(
            semaphore, lambda: self._supplier_gateway.availability(api_key, row.to_octo(include_units=False))
        )
        priced, unit_priced = await asyncio.gather(with_units, without_units)
        return merge_unit_pricing(priced, unit_priced)

    def _variables(self, row: AvailabilityRowDTO, currency: str | None) -> dict[str, Any]:
        return {
            "productId": row.product_id,
            "optionId": row.option_id,
            "currency": currency,
            "unitsWithQuantity": [unit.to_host() for unit in row.units],
            "jwtKey": self._jwt_key,
            "jwtTtlSeconds": self._key_ttl_seconds,
        }

    async def execute(
        self,
        credential: Credential,
        query: AvailabilityQueryDTO,
    ) -> dict[str, list[list[dict[str, Any]]]]:
        rows = build_availability_rows(query, self._jwt_key)
        semaphore = asyncio.Semaphore(self._concurrency)
        raw_rows = await asyncio.gather(
            *(self._fetch_row(credential.api_key, row, semaphore) for row in rows)
        )

        availability = [
            [
                self._translator.translate(
                    root_value=record,
                    type_defs=self._schemas.availability_type_defs,
                    query=self._schemas.availability_query,
                    variables=self._variables(row, query.currency),
                )
                for record in records
            ]
            for row, records in zip(rows, raw_rows)
        ]
        self._logger.info(
            "Availability searched",
            extra={"rows": len(rows), "slots": sum(len(slots) for slots in availability)},
        )
        return {"availability": availability}
