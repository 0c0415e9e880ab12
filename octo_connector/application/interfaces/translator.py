from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class Translator(ABC):
    """
    Traduce un payload crudo del proveedor a la forma que espera el host.

    ``type_defs`` y ``query`` los inyecta el host; el conector solo depende
    de esta firma, no de cómo se evalúan.
    """

    @abstractmethod
    def translate(
        self,
        root_value: Any,
        type_defs: Any,
        query: Any = None,
        variables: dict[str, Any] | None = None,
    ) -> Any:
        pass


@dataclass
class TranslationSchemas:
    """Pares (type_defs, query) por tipo de recurso."""

    product_type_defs: Any
    availability_type_defs: Any
    booking_type_defs: Any
    product_query: Any = None
    availability_query: Any = None
    booking_query: Any = None
