import asyncio

import pytest

from octo_connector.application.dtos.availability_dto import AvailabilityQueryDTO
from octo_connector.application.use_cases.search_availability import (
    SearchAvailabilityUseCase,
    merge_unit_pricing,
)
from octo_connector.domain.errors import SupplierError, ValidationError
from octo_connector.infrastructure.in_memory.octo_supplier import (
    BIKE_RENTAL_ADULT_UNIT_ID,
    BIKE_RENTAL_PRODUCT_ID,
    InMemoryOctoSupplier,
)
from octo_connector.infrastructure.security.availability_key import decode_availability_key
from octo_connector.infrastructure.translation import PydanticTranslator, default_translation_schemas

from tests.conftest import TEST_JWT_KEY

KAYAK = "av_kayak01"


def _query(product_ids, units=None, **overrides):
    payload = {
        "productIds": product_ids,
        "optionIds": list(product_ids),
        "units": units
        if units is not None
        else [[{"unitId": _unit_for(p), "quantity": 1}] for p in product_ids],
        "startDate": "2026-12-01",
        "endDate": "2026-12-01",
        "currency": "USD",
    }
    payload.update(overrides)
    return AvailabilityQueryDTO.from_payload(payload)


def _unit_for(product_id):
    return BIKE_RENTAL_ADULT_UNIT_ID if product_id == BIKE_RENTAL_PRODUCT_ID else "kayak-adult"


def _engine(supplier, **kwargs):
    return SearchAvailabilityUseCase(
        supplier_gateway=supplier,
        translator=PydanticTranslator(),
        schemas=default_translation_schemas(),
        jwt_key=kwargs.pop("jwt_key", TEST_JWT_KEY),
        **kwargs,
    )


class SlowFirstSupplier(InMemoryOctoSupplier):
    """El primer producto responde último."""

    async def availability(self, api_key, body):
        if body["productId"] == BIKE_RENTAL_PRODUCT_ID:
            await asyncio.sleep(0.05)
        return await super().availability(api_key, body)


async def test_one_row_per_product_with_bookable_keys(use_cases, credential, bike_availability_payload):
    result = await use_cases["search_availability"].execute(
        credential, AvailabilityQueryDTO.from_payload(bike_availability_payload)
    )

    assert len(result["availability"]) == 1
    slots = result["availability"][0]
    assert [slot["dateTimeStart"] for slot in slots] == [
        "2026-12-01T09:00:00-07:00",
        "2026-12-02T09:00:00-07:00",
    ]
    claims = decode_availability_key(slots[0]["key"], TEST_JWT_KEY)
    assert claims["productId"] == BIKE_RENTAL_PRODUCT_ID
    assert claims["optionId"] == BIKE_RENTAL_PRODUCT_ID
    assert claims["availabilityId"] == "2026-12-01T09:00:00-07:00"
    assert claims["currency"] == "USD"
    assert claims["unitItems"] == [{"unitId": BIKE_RENTAL_ADULT_UNIT_ID}] * 2


async def test_supplier_receives_local_dates_and_units(use_cases, credential, supplier, bike_availability_payload):
    await use_cases["search_availability"].execute(
        credential, AvailabilityQueryDTO.from_payload(bike_availability_payload)
    )

    bodies = [body for name, body in supplier.calls if name == "availability"]
    assert len(bodies) == 2
    with_units = next(body for body in bodies if "units" in body)
    assert with_units["localDateStart"] == "2026-12-01"
    assert with_units["localDateEnd"] == "2026-12-02"
    assert with_units["units"] == [{"id": BIKE_RENTAL_ADULT_UNIT_ID, "quantity": 2}]


async def test_unit_pricing_is_merged_into_each_slot(use_cases, credential, bike_availability_payload):
    result = await use_cases["search_availability"].execute(
        credential, AvailabilityQueryDTO.from_payload(bike_availability_payload)
    )

    slot = result["availability"][0][0]
    assert slot["pricing"]["retail"] == 10000
    assert {price["unitId"] for price in slot["unitPricing"]} == {
        BIKE_RENTAL_ADULT_UNIT_ID,
        "0b4f3a8e-1f2d-4c1e-9d7a-5e6b7c8d9e0f",
    }


async def test_single_query_per_row_when_unit_pricing_disabled(supplier, credential):
    engine = _engine(supplier, unit_pricing=False)

    result = await engine.execute(credential, _query([BIKE_RENTAL_PRODUCT_ID]))

    assert supplier.call_names() == ["availability"]
    assert result["availability"][0][0]["unitPricing"] is None


async def test_rows_stay_aligned_with_input_order(credential):
    supplier = SlowFirstSupplier()
    engine = _engine(supplier)

    result = await engine.execute(credential, _query([BIKE_RENTAL_PRODUCT_ID, KAYAK, BIKE_RENTAL_PRODUCT_ID]))

    product_ids = [
        decode_availability_key(row[0]["key"], TEST_JWT_KEY)["productId"] for row in result["availability"]
    ]
    assert product_ids == [BIKE_RENTAL_PRODUCT_ID, KAYAK, BIKE_RENTAL_PRODUCT_ID]
    assert result["availability"][1][0]["dateTimeStart"] == "2026-12-01T18:00:00-07:00"


async def test_at_most_three_supplier_calls_in_flight(credential):
    supplier = InMemoryOctoSupplier(latency_seconds=0.02)
    engine = _engine(supplier)

    result = await engine.execute(credential, _query([BIKE_RENTAL_PRODUCT_ID, KAYAK] * 4))

    assert len(result["availability"]) == 8
    assert supplier.call_names().count("availability") == 16
    assert supplier.max_in_flight == 3


async def test_concurrency_is_configurable(credential):
    supplier = InMemoryOctoSupplier(latency_seconds=0.01)
    engine = _engine(supplier, concurrency=1, unit_pricing=False)

    await engine.execute(credential, _query([BIKE_RENTAL_PRODUCT_ID, KAYAK, KAYAK]))

    assert supplier.max_in_flight == 1


async def test_empty_query_makes_no_calls(use_cases, credential, supplier):
    result = await use_cases["search_availability"].execute(credential, _query([]))

    assert result == {"availability": []}
    assert supplier.calls == []


@pytest.mark.parametrize(
    "overrides,field",
    [
        ({"optionIds": [BIKE_RENTAL_PRODUCT_ID]}, "optionIds"),
        ({"units": [[{"unitId": BIKE_RENTAL_ADULT_UNIT_ID}]]}, "units"),
        ({"productIds": [BIKE_RENTAL_PRODUCT_ID, ""]}, "productIds"),
        ({"optionIds": [BIKE_RENTAL_PRODUCT_ID, ""]}, "optionIds"),
        ({"units": [[{"unitId": BIKE_RENTAL_ADULT_UNIT_ID}], [{"unitId": ""}]]}, "units"),
        ({"startDate": "not a date"}, "startDate"),
        ({"startDate": "2026-12-05", "endDate": "2026-12-01"}, "endDate"),
    ],
)
async def test_invalid_queries_fail_before_any_supplier_call(use_cases, credential, supplier, overrides, field):
    query = _query([BIKE_RENTAL_PRODUCT_ID, KAYAK], **overrides)

    with pytest.raises(ValidationError) as exc_info:
        await use_cases["search_availability"].execute(credential, query)

    assert exc_info.value.field == field
    assert supplier.calls == []


async def test_missing_signing_secret(supplier, credential):
    engine = _engine(supplier, jwt_key=None)

    with pytest.raises(ValidationError) as exc_info:
        await engine.execute(credential, _query([BIKE_RENTAL_PRODUCT_ID]))

    assert exc_info.value.field == "jwtKey"
    assert supplier.calls == []


async def test_supplier_failure_fails_the_whole_search(use_cases, credential):
    with pytest.raises(SupplierError) as exc_info:
        await use_cases["search_availability"].execute(
            credential, _query(["nope"], units=[[{"unitId": "x"}]])
        )

    assert exc_info.value.supplier_error_code == "INVALID_PRODUCT_ID"


@pytest.mark.parametrize(
    "dates",
    [
        {"startDate": "01/12/2026 10:00", "endDate": "02/12/2026 10:00", "dateFormat": "DD/MM/YYYY"},
        {"startDate": "2026-12-01T00:00:00.000Z", "endDate": "2026-12-02T00:00:00.000Z"},
    ],
)
async def test_dates_with_time_part_are_accepted(use_cases, credential, supplier, dates):
    result = await use_cases["search_availability"].execute(credential, _query([BIKE_RENTAL_PRODUCT_ID], **dates))

    assert len(result["availability"][0]) == 2
    body = supplier.calls[0][1]
    assert (body["localDateStart"], body["localDateEnd"]) == ("2026-12-01", "2026-12-02")


async def test_null_quantity_counts_as_one(use_cases, credential, supplier):
    query = _query([BIKE_RENTAL_PRODUCT_ID], units=[[{"unitId": BIKE_RENTAL_ADULT_UNIT_ID, "quantity": None}]])

    result = await use_cases["search_availability"].execute(credential, query)

    claims = decode_availability_key(result["availability"][0][0]["key"], TEST_JWT_KEY)
    assert claims["unitItems"] == [{"unitId": BIKE_RENTAL_ADULT_UNIT_ID}]


@pytest.mark.parametrize("quantity", ["two", [2], {"n": 2}])
def test_non_numeric_quantity_is_a_validation_error(quantity):
    with pytest.raises(ValidationError) as exc_info:
        _query([BIKE_RENTAL_PRODUCT_ID], units=[[{"unitId": BIKE_RENTAL_ADULT_UNIT_ID, "quantity": quantity}]])

    assert exc_info.value.field == "units"


async def test_key_ttl_adds_expiry(supplier, credential):
    engine = _engine(supplier, key_ttl_seconds=900)

    result = await engine.execute(credential, _query([BIKE_RENTAL_PRODUCT_ID]))

    claims = decode_availability_key(result["availability"][0][0]["key"], TEST_JWT_KEY)
    assert claims["exp"] - claims["iat"] == 900


class TestMergeUnitPricing:
    def test_copies_unit_pricing_by_id(self):
        merged = merge_unit_pricing(
            [{"id": "a", "pricing": {"retail": 1}}, {"id": "b", "pricing": {"retail": 2}}],
            [{"id": "b", "unitPricing": [{"unitId": "u"}]}],
        )

        assert merged == [
            {"id": "a", "pricing": {"retail": 1}},
            {"id": "b", "pricing": {"retail": 2}, "unitPricing": [{"unitId": "u"}]},
        ]

    def test_empty_inputs(self):
        assert merge_unit_pricing(None, None) == []
        assert merge_unit_pricing([{"id": "a"}], None) == [{"id": "a"}]
