from octo_connector.application.interfaces.translator import TranslationSchemas
from octo_connector.infrastructure.translation.pydantic_translator import PydanticTranslator, project
from octo_connector.infrastructure.translation.schemas import (
    AvailabilitySchema,
    BookingSchema,
    ProductSchema,
)


def default_translation_schemas() -> TranslationSchemas:
    return TranslationSchemas(
        product_type_defs=ProductSchema,
        availability_type_defs=AvailabilitySchema,
        booking_type_defs=BookingSchema,
    )


__all__ = [
    "AvailabilitySchema",
    "BookingSchema",
    "ProductSchema",
    "PydanticTranslator",
    "default_translation_schemas",
    "project",
]
