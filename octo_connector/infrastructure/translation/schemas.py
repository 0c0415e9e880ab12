"""
Default OCTO -> host schemas.

Each model accepts either the supplier's raw OCTO JSON or an already
translated (host shaped) dict, and dumps camelCase host fields.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator
from pydantic.alias_generators import to_camel

from octo_connector.infrastructure.security.availability_key import (
    encode_availability_key,
    unit_items,
)

AVAILABLE_STATUSES = {"AVAILABLE", "FREESALE", "LIMITED"}


def _name(data: dict[str, Any]) -> str | None:
    return data.get("title") or data.get("internalName") or data.get("reference")


class HostSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class UnitSchema(HostSchema):
    unit_id: str
    unit_name: str | None = None
    type: str | None = None
    subtitle: str | None = None
    restrictions: dict[str, Any] | None = None
    pricing: list[dict[str, Any]] | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_octo(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "unitId" in data:
            return data
        return {
            "unitId": data.get("id"),
            "unitName": _name(data),
            "type": data.get("type"),
            "subtitle": data.get("subtitle"),
            "restrictions": data.get("restrictions"),
            "pricing": data.get("pricingFrom") or data.get("pricing"),
        }


class OptionSchema(HostSchema):
    option_id: str
    option_name: str | None = None
    default: bool = False
    units: list[UnitSchema] = Field(default_factory=list)
    start_times: list[str] = Field(default_factory=list)
    cancellation_cutoff: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_octo(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "optionId" in data:
            return data
        return {
            "optionId": data.get("id"),
            "optionName": _name(data),
            "default": bool(data.get("default")),
            "units": data.get("units") or [],
            "startTimes": data.get("availabilityLocalStartTimes") or [],
            "cancellationCutoff": data.get("cancellationCutoff"),
        }


class ProductSchema(HostSchema):
    product_id: str
    product_name: str | None = None
    time_zone: str | None = None
    instant_confirmation: bool | None = None
    availability_type: str | None = None
    options: list[OptionSchema] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _from_octo(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "productId" in data:
            return data
        return {
            "productId": data.get("id"),
            "productName": _name(data),
            "timeZone": data.get("timeZone"),
            "instantConfirmation": data.get("instantConfirmation"),
            "availabilityType": data.get("availabilityType"),
            "options": data.get("options") or [],
        }


class AvailabilitySchema(HostSchema):
    """
    Availability slot (or calendar day).

    When the translation variables carry a ``jwtKey`` the slot gets a
    ``key``: the availability key the host later hands to create-booking.
    """

    key: str | None = None
    date_time_start: str | None = None
    date_time_end: str | None = None
    all_day: bool = False
    available: bool = False
    status: str | None = None
    vacancies: int | None = None
    capacity: int | None = None
    max_units: int | None = None
    utc_cutoff_at: str | None = None
    unit_pricing: list[dict[str, Any]] | None = None
    pricing: dict[str, Any] | None = None
    pickup_available: bool = False
    pickup_required: bool = False
    pickup_points: list[dict[str, Any]] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _from_octo(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict) or "dateTimeStart" in data:
            return data
        context = info.context or {}
        key = None
        if context.get("jwtKey") and data.get("id"):
            key = encode_availability_key(
                {
                    "productId": context.get("productId"),
                    "optionId": context.get("optionId"),
                    "availabilityId": data["id"],
                    "currency": context.get("currency"),
                    "unitItems": unit_items(context.get("unitsWithQuantity")),
                },
                context["jwtKey"],
                context.get("jwtTtlSeconds"),
            )
        status = data.get("status")
        return {
            "key": key,
            "dateTimeStart": data.get("localDateTimeStart") or data.get("localDate"),
            "dateTimeEnd": data.get("localDateTimeEnd") or data.get("localDate"),
            "allDay": bool(data.get("allDay", "localDate" in data)),
            "available": bool(data.get("available", status in AVAILABLE_STATUSES)),
            "status": status,
            "vacancies": data.get("vacancies"),
            "capacity": data.get("capacity"),
            "maxUnits": data.get("maxUnits"),
            "utcCutoffAt": data.get("utcCutoffAt"),
            "unitPricing": data.get("unitPricing") or data.get("unitPricingFrom"),
            "pricing": data.get("pricing") or data.get("pricingFrom"),
            "pickupAvailable": bool(data.get("pickupAvailable")),
            "pickupRequired": bool(data.get("pickupRequired")),
            "pickupPoints": data.get("pickupPoints") or [],
        }


class HolderSchema(HostSchema):
    name: str | None = None
    surname: str | None = None
    full_name: str | None = None
    email_address: str | None = None
    phone_number: str | None = None
    locales: list[str] | None = None
    country: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_octo(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "surname" in data:
            return data
        full_name = data.get("fullName") or ""
        parts = full_name.split()
        return {
            "name": data.get("firstName") or (parts[0] if parts else None),
            "surname": data.get("lastName") or (" ".join(parts[1:]) if len(parts) > 1 else None),
            "fullName": full_name or None,
            "emailAddress": data.get("emailAddress"),
            "phoneNumber": data.get("phoneNumber"),
            "locales": data.get("locales"),
            "country": data.get("country"),
        }


class BookingSchema(HostSchema):
    """Booking or cancellation, enriched with the host-shaped product and option."""

    id: str | None = None
    booking_id: str | None = None
    order_id: str | None = None
    supplier_booking_id: str | None = None
    reseller_reference: str | None = None
    status: str | None = None
    cancellable: bool = False
    test_mode: bool = False
    holder: HolderSchema | None = None
    notes: str | None = None
    start: str | None = None
    end: str | None = None
    all_day: bool = False
    price: dict[str, Any] | None = None
    unit_items: list[dict[str, Any]] = Field(default_factory=list)
    cancellation: dict[str, Any] | None = None
    product_id: str | None = None
    option_id: str | None = None
    product: dict[str, Any] | None = None
    option: dict[str, Any] | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_octo(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "supplierBookingId" in data:
            return data
        availability = data.get("availability") or {}
        return {
            "id": data.get("uuid") or data.get("id"),
            "bookingId": data.get("uuid") or data.get("id"),
            "orderId": data.get("orderReference") or data.get("orderId"),
            "supplierBookingId": data.get("supplierReference"),
            "resellerReference": data.get("resellerReference"),
            "status": data.get("status"),
            "cancellable": bool(data.get("cancellable")),
            "testMode": bool(data.get("testMode")),
            "holder": data.get("contact"),
            "notes": data.get("notes"),
            "start": availability.get("localDateTimeStart"),
            "end": availability.get("localDateTimeEnd"),
            "allDay": bool(availability.get("allDay")),
            "price": data.get("pricing"),
            "unitItems": [
                {
                    "unitItemId": item.get("uuid"),
                    "unitId": item.get("unitId"),
                    "supplierReference": item.get("supplierReference"),
                    "status": item.get("status"),
                }
                for item in data.get("unitItems") or []
            ],
            "cancellation": data.get("cancellation"),
            "productId": data.get("productId"),
            "optionId": data.get("optionId"),
            "product": data.get("product"),
            "option": data.get("option"),
        }
