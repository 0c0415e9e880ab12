"""Interfaces (Puertos) de la capa de aplicación."""

from octo_connector.application.interfaces.event_sink import (
    NullEventSink,
    RecordingEventSink,
    SupplierEventSink,
)
from octo_connector.application.interfaces.octo_supplier_gateway import OctoSupplierGateway
from octo_connector.application.interfaces.translator import TranslationSchemas, Translator

__all__ = [
    # Gateways
    "OctoSupplierGateway",
    # Translation
    "Translator",
    "TranslationSchemas",
    # Observability
    "SupplierEventSink",
    "NullEventSink",
    "RecordingEventSink",
]
