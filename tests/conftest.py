"""
Pytest configuration and shared fixtures.

Todos los tests corren contra el proveedor OCTO en memoria; ninguno
sale a la red.
"""

from typing import Any

import pytest

from octo_connector.api.dependencies import build_use_cases
from octo_connector.application.dtos.availability_dto import AvailabilityQueryDTO
from octo_connector.application.dtos.booking_dto import CreateBookingDTO
from octo_connector.config import Settings
from octo_connector.domain.value_objects.credential import Credential
from octo_connector.infrastructure.in_memory.octo_supplier import (
    BIKE_RENTAL_ADULT_UNIT_ID,
    BIKE_RENTAL_PRODUCT_ID,
    InMemoryOctoSupplier,
)

TEST_API_KEY = "5d3c1b2a-9f8e-4d7c-8b6a-1e2f3a4b5c6d"
TEST_JWT_KEY = "test-availability-key-secret-0123456789"


# ============================================================================
# FIXTURES DE CONFIGURACIÓN
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_key=TEST_JWT_KEY, use_in_memory=True, log_supplier_events=False)


@pytest.fixture
def credential() -> Credential:
    return Credential(api_key=TEST_API_KEY)


@pytest.fixture
def supplier() -> InMemoryOctoSupplier:
    """Proveedor OCTO en memoria, nuevo para cada test."""
    return InMemoryOctoSupplier()


@pytest.fixture
def use_cases(settings: Settings, supplier: InMemoryOctoSupplier) -> dict[str, Any]:
    return build_use_cases(settings, supplier_gateway=supplier)


# ============================================================================
# FIXTURES DE DATOS DE PRUEBA
# ============================================================================

@pytest.fixture
def bike_availability_payload() -> dict[str, Any]:
    """Dos adultos en la bici, ventana de dos días."""
    return {
        "productIds": [BIKE_RENTAL_PRODUCT_ID],
        "optionIds": [BIKE_RENTAL_PRODUCT_ID],
        "units": [[{"unitId": BIKE_RENTAL_ADULT_UNIT_ID, "quantity": 2}]],
        "startDate": "01/12/2026",
        "endDate": "02/12/2026",
        "dateFormat": "DD/MM/YYYY",
        "currency": "USD",
    }


@pytest.fixture
def holder_payload() -> dict[str, Any]:
    return {
        "name": "Ana",
        "surname": "Lopez",
        "emailAddress": "ana.lopez@example.com",
        "phoneNumber": "+15551234567",
        "locales": ["en"],
        "country": "US",
    }


@pytest.fixture
async def availability_key(use_cases, credential, bike_availability_payload) -> str:
    """Availability key del primer slot de la bici."""
    result = await use_cases["search_availability"].execute(
        credential, AvailabilityQueryDTO.from_payload(bike_availability_payload)
    )
    return result["availability"][0][0]["key"]


@pytest.fixture
async def confirmed_booking(use_cases, credential, availability_key, holder_payload) -> dict[str, Any]:
    result = await use_cases["create_booking"].execute(
        credential,
        CreateBookingDTO.from_payload(
            {
                "availabilityKey": availability_key,
                "holder": holder_payload,
                "notes": "Arrive 15 minutes early",
                "reference": "HOST-REF-0001",
            }
        ),
    )
    return result["booking"]
