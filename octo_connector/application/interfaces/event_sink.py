"""Interface SupplierEventSink - Puerto para observar las llamadas al proveedor."""

from abc import ABC, abstractmethod
from typing import Any


class SupplierEventSink(ABC):
    """
    Recibe un evento antes y después de cada llamada al proveedor.

    El cliente HTTP lo invoca de forma síncrona; los eventos son dicts
    serializables a JSON.
    """

    @abstractmethod
    def on_request(self, event: dict[str, Any]) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_response(self, event: dict[str, Any]) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_error(self, event: dict[str, Any]) -> None:
        raise NotImplementedError


class NullEventSink(SupplierEventSink):
    """Implementación por defecto: descarta todos los eventos."""

    def on_request(self, event: dict[str, Any]) -> None:
        return None

    def on_response(self, event: dict[str, Any]) -> None:
        return None

    def on_error(self, event: dict[str, Any]) -> None:
        return None


class RecordingEventSink(SupplierEventSink):
    """Implementación para testing: guarda los eventos en orden."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def on_request(self, event: dict[str, Any]) -> None:
        self.events.append(("request", event))

    def on_response(self, event: dict[str, Any]) -> None:
        self.events.append(("response", event))

    def on_error(self, event: dict[str, Any]) -> None:
        self.events.append(("error", event))

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.events]
