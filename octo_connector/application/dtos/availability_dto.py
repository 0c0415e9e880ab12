"""DTOs para consultas de disponibilidad."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from octo_connector.domain.errors import ValidationError


def _quantity(value: Any) -> int:
    """Cantidad pedida; ausente o ``None`` cuenta como 1."""
    if value is None:
        return 1
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError("units", f"invalid quantity '{value}'") from exc


@dataclass
class UnitSelectionDTO:
    """Unidad pedida para un producto (``{unitId, quantity}`` en el host)."""

    unit_id: str
    quantity: int = 1

    def to_octo(self) -> dict[str, Any]:
        return {"id": self.unit_id, "quantity": self.quantity}

    def to_host(self) -> dict[str, Any]:
        return {"unitId": self.unit_id, "quantity": self.quantity}


@dataclass
class AvailabilityQueryDTO:
    """
    Consulta de disponibilidad para N tripletas (producto, opción, unidades).

    Los tres arreglos van alineados por posición: ``product_ids[i]``,
    ``option_ids[i]`` y ``units[i]`` describen la misma fila.
    """

    product_ids: list[str]
    option_ids: list[str]
    units: list[list[UnitSelectionDTO]]
    start_date: str | date
    end_date: str | date
    date_format: str | None = None
    currency: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "AvailabilityQueryDTO":
        """Construye la consulta desde el payload camelCase del host."""
        return cls(
            product_ids=list(payload.get("productIds") or []),
            option_ids=list(payload.get("optionIds") or []),
            units=[
                [
                    UnitSelectionDTO(unit_id=u.get("unitId"), quantity=_quantity(u.get("quantity")))
                    for u in (row or [])
                ]
                for row in (payload.get("units") or [])
            ],
            start_date=payload.get("startDate"),
            end_date=payload.get("endDate"),
            date_format=payload.get("dateFormat"),
            currency=payload.get("currency"),
        )


@dataclass
class AvailabilityRowDTO:
    """Una fila ya validada, con las fechas en formato local OCTO."""

    product_id: str
    option_id: str
    units: list[UnitSelectionDTO] = field(default_factory=list)
    local_date_start: str = ""
    local_date_end: str = ""

    def to_octo(self, include_units: bool = True) -> dict[str, Any]:
        body: dict[str, Any] = {
            "productId": self.product_id,
            "optionId": self.option_id,
            "localDateStart": self.local_date_start,
            "localDateEnd": self.local_date_end,
        }
        if include_units:
            body["units"] = [unit.to_octo() for unit in self.units]
        return body
