from functools import lru_cache
from typing import Any

from fastapi import Depends

from octo_connector.application.interfaces.event_sink import NullEventSink, SupplierEventSink
from octo_connector.application.interfaces.octo_supplier_gateway import OctoSupplierGateway
from octo_connector.application.interfaces.translator import TranslationSchemas, Translator
from octo_connector.application.use_cases.availability_calendar import AvailabilityCalendarUseCase
from octo_connector.application.use_cases.booking_enrichment import BookingEnricher
from octo_connector.application.use_cases.cancel_booking import CancelBookingUseCase
from octo_connector.application.use_cases.create_booking import CreateBookingUseCase
from octo_connector.application.use_cases.search_availability import SearchAvailabilityUseCase
from octo_connector.application.use_cases.search_booking import SearchBookingUseCase
from octo_connector.application.use_cases.search_products import SearchProductsUseCase
from octo_connector.application.use_cases.search_quote import SearchQuoteUseCase
from octo_connector.application.use_cases.validate_credential import ValidateCredentialUseCase
from octo_connector.config import Settings, get_settings
from octo_connector.infrastructure.gateways.octo_http_client import OctoHttpClient
from octo_connector.infrastructure.gateways.octo_supplier_gateway_http import OctoSupplierGatewayHTTP
from octo_connector.infrastructure.in_memory.octo_supplier import InMemoryOctoSupplier
from octo_connector.infrastructure.observability.logging_event_sink import LoggingEventSink
from octo_connector.infrastructure.translation import PydanticTranslator, default_translation_schemas


@lru_cache(maxsize=1)
def _in_memory_supplier() -> InMemoryOctoSupplier:
    return InMemoryOctoSupplier()


def build_supplier_gateway(
    settings: Settings,
    event_sink: SupplierEventSink | None = None,
) -> OctoSupplierGateway:
    if settings.use_in_memory:
        return _in_memory_supplier()
    if event_sink is None:
        event_sink = LoggingEventSink() if settings.log_supplier_events else NullEventSink()
    client = OctoHttpClient(
        endpoint=settings.octo_endpoint,
        timeout_seconds=settings.supplier_timeout_seconds,
        capabilities=settings.octo_capabilities,
        event_sink=event_sink,
    )
    return OctoSupplierGatewayHTTP(client)


def build_use_cases(
    settings: Settings,
    supplier_gateway: OctoSupplierGateway | None = None,
    translator: Translator | None = None,
    schemas: TranslationSchemas | None = None,
) -> dict[str, Any]:
    """Wire every host operation against one supplier gateway and one set of translation schemas."""
    supplier_gateway = supplier_gateway or build_supplier_gateway(settings)
    translator = translator or PydanticTranslator()
    schemas = schemas or default_translation_schemas()

    catalog = SearchProductsUseCase(
        supplier_gateway=supplier_gateway,
        translator=translator,
        schemas=schemas,
    )
    enricher = BookingEnricher(catalog=catalog, translator=translator, schemas=schemas)
    return {
        "validate_credential": ValidateCredentialUseCase(supplier_gateway=supplier_gateway),
        "search_products": catalog,
        "search_quote": SearchQuoteUseCase(),
        "search_availability": SearchAvailabilityUseCase(
            supplier_gateway=supplier_gateway,
            translator=translator,
            schemas=schemas,
            jwt_key=settings.jwt_key,
            concurrency=settings.availability_concurrency,
            unit_pricing=settings.availability_unit_pricing,
            key_ttl_seconds=settings.availability_key_ttl_seconds,
        ),
        "availability_calendar": AvailabilityCalendarUseCase(
            supplier_gateway=supplier_gateway,
            translator=translator,
            schemas=schemas,
            jwt_key=settings.jwt_key,
            concurrency=settings.availability_concurrency,
        ),
        "create_booking": CreateBookingUseCase(
            supplier_gateway=supplier_gateway,
            enricher=enricher,
            jwt_key=settings.jwt_key,
        ),
        "cancel_booking": CancelBookingUseCase(supplier_gateway=supplier_gateway, enricher=enricher),
        "search_booking": SearchBookingUseCase(supplier_gateway=supplier_gateway, enricher=enricher),
    }


def get_use_cases(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    return build_use_cases(settings)
