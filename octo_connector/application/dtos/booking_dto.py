"""DTOs para el ciclo de vida de reservas."""

from dataclasses import dataclass
from typing import Any


@dataclass
class HolderDTO:
    """Titular de la reserva tal como lo envía el host."""

    name: str | None = None
    surname: str | None = None
    email_address: str | None = None
    phone_number: str | None = None
    locales: list[str] | None = None
    country: str | None = None

    @property
    def full_name(self) -> str:
        """Retorna el nombre completo."""
        return f"{self.name} {self.surname}"

    def to_octo_contact(self) -> dict[str, Any]:
        return {
            "fullName": self.full_name,
            "emailAddress": self.email_address,
            "phoneNumber": self.phone_number or "",
            "locales": self.locales,
            "country": self.country or "",
        }

    @classmethod
    def from_payload(cls, holder: dict[str, Any] | None) -> "HolderDTO":
        holder = holder or {}
        return cls(
            name=holder.get("name"),
            surname=holder.get("surname"),
            email_address=holder.get("emailAddress"),
            phone_number=holder.get("phoneNumber"),
            locales=holder.get("locales"),
            country=holder.get("country"),
        )


@dataclass
class CreateBookingDTO:
    availability_key: str | None
    holder: HolderDTO
    notes: str | None = None
    reference: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "CreateBookingDTO":
        return cls(
            availability_key=payload.get("availabilityKey"),
            holder=HolderDTO.from_payload(payload.get("holder")),
            notes=payload.get("notes"),
            reference=payload.get("reference"),
        )


@dataclass
class CancelBookingDTO:
    booking_id: str | None = None
    id: str | None = None
    reason: str | None = None

    @property
    def target_id(self) -> str | None:
        return self.booking_id or self.id

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "CancelBookingDTO":
        return cls(
            booking_id=payload.get("bookingId"),
            id=payload.get("id"),
            reason=payload.get("reason"),
        )


@dataclass
class SearchBookingDTO:
    booking_id: str | None = None
    travel_date_start: str | None = None
    travel_date_end: str | None = None
    date_format: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "SearchBookingDTO":
        return cls(
            booking_id=payload.get("bookingId"),
            travel_date_start=payload.get("travelDateStart"),
            travel_date_end=payload.get("travelDateEnd"),
            date_format=payload.get("dateFormat"),
        )
