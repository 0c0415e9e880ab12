"""Implementaciones in-memory para testing y ejecución local."""

from octo_connector.infrastructure.in_memory.octo_supplier import (
    BIKE_RENTAL_ADULT_UNIT_ID,
    BIKE_RENTAL_PRODUCT_ID,
    InMemoryOctoSupplier,
    default_catalog,
)

__all__ = [
    "BIKE_RENTAL_ADULT_UNIT_ID",
    "BIKE_RENTAL_PRODUCT_ID",
    "InMemoryOctoSupplier",
    "default_catalog",
]
