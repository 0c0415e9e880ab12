from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class TokenIn(CamelModel):
    api_key: str | None = None


class UnitSelectionIn(CamelModel):
    unit_id: str
    quantity: int = Field(default=1, ge=0)


class AvailabilityPayload(CamelModel):
    product_ids: list[str] = Field(default_factory=list)
    option_ids: list[str] = Field(default_factory=list)
    units: list[list[UnitSelectionIn]] = Field(default_factory=list)
    start_date: str
    end_date: str
    date_format: str | None = None
    currency: str | None = None


class HolderIn(CamelModel):
    name: str | None = None
    surname: str | None = None
    email_address: str | None = None
    phone_number: str | None = None
    locales: list[str] | None = None
    country: str | None = None


class CreateBookingPayload(CamelModel):
    availability_key: str | None = None
    holder: HolderIn | None = None
    notes: str | None = None
    reference: str | None = None


class CancelBookingPayload(CamelModel):
    booking_id: str | None = None
    id: str | None = None
    reason: str | None = None


class SearchBookingPayload(CamelModel):
    booking_id: str | None = None
    travel_date_start: str | None = None
    travel_date_end: str | None = None
    date_format: str | None = None


# === Requests: credential + payload ===


class TokenRequest(CamelModel):
    token: TokenIn = Field(default_factory=TokenIn)


class ProductSearchRequest(TokenRequest):
    payload: dict[str, Any] = Field(default_factory=dict)


class QuoteRequest(TokenRequest):
    payload: dict[str, Any] = Field(default_factory=dict)


class AvailabilityRequest(TokenRequest):
    payload: AvailabilityPayload


class CreateBookingRequest(TokenRequest):
    payload: CreateBookingPayload


class CancelBookingRequest(TokenRequest):
    payload: CancelBookingPayload


class SearchBookingRequest(TokenRequest):
    payload: SearchBookingPayload


# === Responses ===


class ValidateTokenResponse(BaseModel):
    valid: bool


class TokenTemplateField(BaseModel):
    type: str
    regExp: str
    description: str


class ProductsResponse(BaseModel):
    products: list[dict[str, Any]]


class QuoteResponse(BaseModel):
    quote: list[dict[str, Any]]


class AvailabilityResponse(BaseModel):
    availability: list[list[dict[str, Any]]]


class BookingResponse(BaseModel):
    booking: dict[str, Any]


class CancellationResponse(BaseModel):
    cancellation: dict[str, Any]


class BookingsResponse(BaseModel):
    bookings: list[dict[str, Any]]
