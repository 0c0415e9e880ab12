"""DTOs (Data Transfer Objects) de la capa de aplicación."""

from octo_connector.application.dtos.availability_dto import (
    AvailabilityQueryDTO,
    AvailabilityRowDTO,
    UnitSelectionDTO,
)
from octo_connector.application.dtos.booking_dto import (
    CancelBookingDTO,
    CreateBookingDTO,
    HolderDTO,
    SearchBookingDTO,
)

__all__ = [
    # Availability DTOs
    "AvailabilityQueryDTO",
    "AvailabilityRowDTO",
    "UnitSelectionDTO",
    # Booking DTOs
    "CancelBookingDTO",
    "CreateBookingDTO",
    "HolderDTO",
    "SearchBookingDTO",
]
