"""Excepciones de dominio para el conector OCTO."""

from typing import Any


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Errores de Validación ===


class ValidationError(DomainError):
    """Entrada del llamador mal formada o inconsistente. Se lanza antes de llamar al proveedor."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Validation failed on '{field}': {message}",
            code="VALIDATION_ERROR",
        )
        self.field = field


# === Errores de Availability Key ===


class InvalidAvailabilityKeyError(DomainError):
    """La availability key fue alterada, está corrupta, expiró o se firmó con otro secreto."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid availability key: {reason}",
            code="INVALID_AVAILABILITY_KEY",
        )
        self.reason = reason


# === Errores de Supplier ===


class SupplierError(DomainError):
    """
    Respuesta no exitosa del proveedor OCTO.

    Conserva el cuerpo de error del proveedor (``error``, ``errorMessage``)
    cuando viene en la respuesta.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: str | None = None,
        payload: Any = None,
        code: str = "SUPPLIER_ERROR",
    ):
        super().__init__(message=message, code=code)
        self.status_code = status_code
        self.supplier_error_code = error_code
        self.payload = payload

    @classmethod
    def from_response_body(cls, status_code: int, body: Any, fallback_text: str = "") -> "SupplierError":
        if isinstance(body, dict) and (body.get("error") or body.get("errorMessage")):
            error_code = body.get("error")
            message = body.get("errorMessage") or error_code
            return cls(
                message=f"Supplier responded {status_code}: {message}",
                status_code=status_code,
                error_code=error_code,
                payload=body,
            )
        return cls(
            message=f"Supplier responded {status_code}: {fallback_text or 'no details'}",
            status_code=status_code,
            payload=body if body is not None else fallback_text,
        )


class SupplierTimeoutError(SupplierError):
    """Timeout en la comunicación con el proveedor."""

    def __init__(self, url: str, timeout_seconds: float):
        super().__init__(
            message=f"Timeout of {timeout_seconds}s calling supplier at {url}",
            code="SUPPLIER_TIMEOUT",
        )
        self.url = url
        self.timeout_seconds = timeout_seconds


# === Errores de Catálogo ===


class ProductNotFoundError(DomainError):
    """El producto ya no existe en el catálogo del proveedor."""

    def __init__(self, product_id: str):
        super().__init__(
            message=f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
        )
        self.product_id = product_id
