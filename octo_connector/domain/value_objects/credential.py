"""Value Object Credential - API key del proveedor OCTO."""

import re
from dataclasses import dataclass
from typing import Any

API_KEY_PATTERN = re.compile(
    r"^[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}$"
)


@dataclass(frozen=True)
class Credential:
    """
    Credencial entregada por el host en cada llamada.

    No se persiste; el formato se valida contra ``API_KEY_PATTERN`` solo
    cuando el llamador lo pide (``is_well_formed``), el proveedor es quien
    decide si la key es válida.
    """

    api_key: str | None

    def is_well_formed(self) -> bool:
        return bool(self.api_key) and bool(API_KEY_PATTERN.match(self.api_key))

    @classmethod
    def from_token(cls, token: dict[str, Any] | None) -> "Credential":
        """Crea la credencial desde el dict ``{"apiKey": ...}`` del host."""
        return cls(api_key=(token or {}).get("apiKey"))


def token_template() -> dict[str, dict[str, Any]]:
    """Plantilla de credenciales que el host usa para pintar/validar el formulario."""
    return {
        "apiKey": {
            "type": "text",
            "regExp": API_KEY_PATTERN,
            "description": "the Api Key generated from your Peek Pro account, should be in uuid format",
        },
    }
