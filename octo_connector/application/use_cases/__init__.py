"""Casos de uso del conector, uno por operación expuesta al host."""

from octo_connector.application.use_cases.availability_calendar import AvailabilityCalendarUseCase
from octo_connector.application.use_cases.booking_enrichment import BookingEnricher, find_option
from octo_connector.application.use_cases.cancel_booking import CancelBookingUseCase
from octo_connector.application.use_cases.create_booking import CreateBookingUseCase
from octo_connector.application.use_cases.search_availability import (
    SearchAvailabilityUseCase,
    build_availability_rows,
    merge_unit_pricing,
)
from octo_connector.application.use_cases.search_booking import SearchBookingUseCase
from octo_connector.application.use_cases.search_products import SearchProductsUseCase
from octo_connector.application.use_cases.search_quote import SearchQuoteUseCase
from octo_connector.application.use_cases.validate_credential import ValidateCredentialUseCase

__all__ = [
    "AvailabilityCalendarUseCase",
    "BookingEnricher",
    "CancelBookingUseCase",
    "CreateBookingUseCase",
    "SearchAvailabilityUseCase",
    "SearchBookingUseCase",
    "SearchProductsUseCase",
    "SearchQuoteUseCase",
    "ValidateCredentialUseCase",
    "build_availability_rows",
    "find_option",
    "merge_unit_pricing",
]
