import asyncio
import copy
from datetime import date, datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

from octo_connector.application.interfaces.octo_supplier_gateway import OctoSupplierGateway
from octo_connector.domain.errors import SupplierError
from octo_connector.domain.value_objects.credential import Credential

BIKE_RENTAL_PRODUCT_ID = "av_86yvp"
BIKE_RENTAL_ADULT_UNIT_ID = "66d2b836-828d-4c88-a24a-ff42a2e54880"
BIKE_RENTAL_CHILD_UNIT_ID = "0b4f3a8e-1f2d-4c1e-9d7a-5e6b7c8d9e0f"


def default_catalog() -> list[dict[str, Any]]:
    return [
        {
            "id": BIKE_RENTAL_PRODUCT_ID,
            "internalName": "Bike Rental - OCTO",
            "title": "Bike Rental - OCTO",
            "timeZone": "America/Los_Angeles",
            "instantConfirmation": True,
            "availabilityType": "START_TIME",
            "options": [
                {
                    "id": BIKE_RENTAL_PRODUCT_ID,
                    "default": True,
                    "internalName": "Half day",
                    "availabilityLocalStartTimes": ["09:00"],
                    "cancellationCutoff": "24 hours",
                    "units": [
                        {
                            "id": BIKE_RENTAL_ADULT_UNIT_ID,
                            "internalName": "Adult",
                            "type": "ADULT",
                            "restrictions": {"minAge": 18, "maxAge": 99},
                            "retail": 5000,
                        },
                        {
                            "id": BIKE_RENTAL_CHILD_UNIT_ID,
                            "internalName": "Child",
                            "type": "CHILD",
                            "restrictions": {"minAge": 6, "maxAge": 17},
                            "retail": 2500,
                        },
                    ],
                }
            ],
        },
        {
            "id": "av_kayak01",
            "internalName": "Kayak Tour",
            "title": "Sunset Kayak Tour",
            "timeZone": "America/Los_Angeles",
            "instantConfirmation": True,
            "availabilityType": "START_TIME",
            "options": [
                {
                    "id": "av_kayak01",
                    "default": True,
                    "internalName": "Standard",
                    "availabilityLocalStartTimes": ["18:00"],
                    "units": [
                        {"id": "kayak-adult", "internalName": "Adult", "type": "ADULT", "retail": 8900},
                    ],
                }
            ],
        },
    ]


def _not_found(error: str, message: str, status_code: int = 400) -> SupplierError:
    return SupplierError.from_response_body(
        status_code, {"error": error, "errorMessage": message}
    )


def _utc_now() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


class InMemoryOctoSupplier(OctoSupplierGateway):
    """
    OCTO supplier simulado en memoria.

    Implementa el mismo contrato que el gateway HTTP: catálogo, disponibilidad
    por día y el ciclo ON_HOLD -> CONFIRMED -> CANCELLED de las reservas.
    Registra cada llamada en ``calls`` y el pico de llamadas simultáneas en
    ``max_in_flight``.
    """

    def __init__(
        self,
        catalog: list[dict[str, Any]] | None = None,
        api_keys: set[str] | None = None,
        latency_seconds: float = 0.0,
        currency: str = "USD",
    ) -> None:
        self.products: dict[str, dict[str, Any]] = {
            product["id"]: product for product in (catalog or default_catalog())
        }
        self.bookings: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, Any]] = []
        self.failures: dict[str, Exception] = {}
        self.in_flight = 0
        self.max_in_flight = 0
        self._api_keys = api_keys
        self._latency = latency_seconds
        self._currency = currency

    async def _enter(self, operation: str, api_key: str | None, argument: Any = None) -> None:
        self.calls.append((operation, copy.deepcopy(argument)))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self._latency:
                await asyncio.sleep(self._latency)
            if not Credential(api_key).is_well_formed() or (
                self._api_keys is not None and api_key not in self._api_keys
            ):
                raise _not_found("UNAUTHORIZED", "The API key is invalid", status_code=401)
            if operation in self.failures:
                raise self.failures[operation]
        finally:
            self.in_flight -= 1

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    # === Catálogo ===

    def _product(self, product_id: str) -> dict[str, Any]:
        product = self.products.get(product_id)
        if not product:
            raise _not_found("INVALID_PRODUCT_ID", f"The productId was not recognised: {product_id}")
        return product

    def _option(self, product: dict[str, Any], option_id: str) -> dict[str, Any]:
        for option in product["options"]:
            if option["id"] == option_id:
                return option
        raise _not_found("INVALID_OPTION_ID", f"The optionId was not recognised: {option_id}")

    def _unit(self, option: dict[str, Any], unit_id: str) -> dict[str, Any]:
        for unit in option["units"]:
            if unit["id"] == unit_id:
                return unit
        raise _not_found("INVALID_UNIT_ID", f"The unitId was not recognised: {unit_id}")

    def _price(self, amount: int) -> dict[str, Any]:
        return {
            "original": amount,
            "retail": amount,
            "net": int(amount * 0.8),
            "currency": self._currency,
            "currencyPrecision": 2,
        }

    async def list_products(self, api_key: str | None) -> list[dict[str, Any]]:
        await self._enter("list_products", api_key)
        return copy.deepcopy(list(self.products.values()))

    async def get_product(self, api_key: str | None, product_id: str) -> dict[str, Any]:
        await self._enter("get_product", api_key, product_id)
        return copy.deepcopy(self._product(product_id))

    # === Disponibilidad ===

    def _days(self, body: dict[str, Any]) -> list[date]:
        start = date.fromisoformat(body["localDateStart"])
        end = date.fromisoformat(body["localDateEnd"])
        return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]

    def _pricing(self, option: dict[str, Any], units: list[dict[str, Any]] | None) -> dict[str, Any]:
        if units is None:
            return {
                "unitPricing": [
                    {"unitId": unit["id"], **self._price(unit["retail"])} for unit in option["units"]
                ]
            }
        total = sum(self._unit(option, u["id"])["retail"] * int(u.get("quantity", 1)) for u in units)
        return {"pricing": self._price(total)}

    async def availability(self, api_key: str | None, body: dict[str, Any]) -> list[dict[str, Any]]:
        await self._enter("availability", api_key, body)
        option = self._option(self._product(body["productId"]), body["optionId"])
        start_time = (option.get("availabilityLocalStartTimes") or ["09:00"])[0]
        slots = []
        for day in self._days(body):
            slot_start = f"{day.isoformat()}T{start_time}:00-07:00"
            slots.append(
                {
                    "id": slot_start,
                    "localDateTimeStart": slot_start,
                    "localDateTimeEnd": f"{day.isoformat()}T23:00:00-07:00",
                    "allDay": False,
                    "available": True,
                    "status": "AVAILABLE",
                    "vacancies": 20,
                    "capacity": 20,
                    "maxUnits": 10,
                    **self._pricing(option, body.get("units")),
                }
            )
        return slots

    async def availability_calendar(
        self, api_key: str | None, body: dict[str, Any]
    ) -> list[dict[str, Any]]:
        await self._enter("availability_calendar", api_key, body)
        option = self._option(self._product(body["productId"]), body["optionId"])
        pricing = self._pricing(option, body.get("units"))
        return [
            {
                "localDate": day.isoformat(),
                "available": True,
                "status": "AVAILABLE",
                "vacancies": 20,
                "capacity": 20,
                "pricingFrom": pricing.get("pricing"),
                "unitPricingFrom": pricing.get("unitPricing"),
            }
            for day in self._days(body)
        ]

    # === Reservas ===

    def _booking(self, booking_uuid: str) -> dict[str, Any]:
        booking = self.bookings.get(booking_uuid)
        if not booking:
            raise _not_found(
                "INVALID_BOOKING_UUID", f"The booking uuid was not recognised: {booking_uuid}", 404
            )
        return booking

    async def create_booking(self, api_key: str | None, body: dict[str, Any]) -> dict[str, Any]:
        await self._enter("create_booking", api_key, body)
        product = self._product(body.get("productId"))
        option = self._option(product, body.get("optionId"))
        availability_id = body.get("availabilityId")
        try:
            slot_start = datetime.fromisoformat(availability_id)
        except (TypeError, ValueError) as exc:
            raise _not_found(
                "INVALID_AVAILABILITY_ID", f"The availabilityId was not recognised: {availability_id}"
            ) from exc
        items = []
        total = 0
        for item in body.get("unitItems") or []:
            unit = self._unit(option, item["unitId"])
            total += unit["retail"]
            items.append(
                {
                    "uuid": str(uuid4()),
                    "unitId": unit["id"],
                    "supplierReference": uuid4().hex[:8].upper(),
                    "status": "ON_HOLD",
                }
            )
        booking_uuid = str(uuid4())
        booking = {
            "id": booking_uuid,
            "uuid": booking_uuid,
            "testMode": True,
            "resellerReference": None,
            "supplierReference": f"PK-{uuid4().hex[:8].upper()}",
            "status": "ON_HOLD",
            "utcCreatedAt": _utc_now(),
            "productId": product["id"],
            "optionId": option["id"],
            "cancellable": True,
            "cancellation": None,
            "availabilityId": availability_id,
            "availability": {
                "id": availability_id,
                "localDateTimeStart": availability_id,
                "localDateTimeEnd": slot_start.replace(hour=23, minute=0).isoformat(),
                "allDay": False,
            },
            "contact": {},
            "notes": body.get("notes"),
            "unitItems": items,
            "pricing": self._price(total),
        }
        self.bookings[booking_uuid] = booking
        return copy.deepcopy(booking)

    async def confirm_booking(
        self, api_key: str | None, booking_uuid: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        await self._enter("confirm_booking", api_key, {"uuid": booking_uuid, **body})
        booking = self._booking(booking_uuid)
        if booking["status"] == "CANCELLED":
            raise _not_found("INVALID_BOOKING_UUID", "The booking has been cancelled")
        booking["status"] = "CONFIRMED"
        booking["utcConfirmedAt"] = _utc_now()
        booking["contact"] = dict(body.get("contact") or {})
        booking["resellerReference"] = body.get("resellerReference")
        for item in booking["unitItems"]:
            item["status"] = "CONFIRMED"
        return copy.deepcopy(booking)

    async def cancel_booking(
        self, api_key: str | None, booking_uuid: str, body: dict[str, Any]
    ) -> dict[str, Any]:
        await self._enter("cancel_booking", api_key, {"uuid": booking_uuid, **body})
        booking = self._booking(booking_uuid)
        booking["status"] = "CANCELLED"
        booking["cancellable"] = False
        booking["cancellation"] = {
            "refund": "FULL",
            "reason": body.get("reason"),
            "utcCancelledAt": _utc_now(),
        }
        for item in booking["unitItems"]:
            item["status"] = "CANCELLED"
        return copy.deepcopy(booking)

    async def get_booking(self, api_key: str | None, booking_uuid: str) -> dict[str, Any]:
        await self._enter("get_booking", api_key, booking_uuid)
        return copy.deepcopy(self._booking(booking_uuid))

    async def list_bookings(
        self, api_key: str | None, params: dict[str, str]
    ) -> list[dict[str, Any]]:
        await self._enter("list_bookings", api_key, params)
        results = []
        for booking in self.bookings.values():
            if "resellerReference" in params and booking["resellerReference"] != params["resellerReference"]:
                continue
            if "supplierReference" in params and booking["supplierReference"] != params["supplierReference"]:
                continue
            travel_date = booking["availability"]["localDateTimeStart"][:10]
            if "localDateStart" in params and travel_date < params["localDateStart"]:
                continue
            if "localDateEnd" in params and travel_date > params["localDateEnd"]:
                continue
            results.append(copy.deepcopy(booking))
        return results
