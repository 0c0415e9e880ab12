"""
Capa de Dominio - Conector OCTO.

Lógica pura del conector, sin dependencias de frameworks ni de red.

Estructura:
- value_objects/: Credential, conversión de fechas locales, matcher de comodines
- errors.py: Excepciones específicas del dominio
"""

from octo_connector.domain.errors import (
    DomainError,
    InvalidAvailabilityKeyError,
    ProductNotFoundError,
    SupplierError,
    SupplierTimeoutError,
    ValidationError,
)
from octo_connector.domain.value_objects import (
    API_KEY_PATTERN,
    Credential,
    parse_host_date,
    to_local_date,
    token_template,
    wildcard_match,
)

__all__ = [
    # Value Objects
    "API_KEY_PATTERN",
    "Credential",
    "parse_host_date",
    "to_local_date",
    "token_template",
    "wildcard_match",
    # Errors
    "DomainError",
    "ValidationError",
    "InvalidAvailabilityKeyError",
    "SupplierError",
    "SupplierTimeoutError",
    "ProductNotFoundError",
]
