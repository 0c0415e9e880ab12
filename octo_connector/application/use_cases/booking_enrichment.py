from typing import Any

from octo_connector.application.interfaces.translator import TranslationSchemas, Translator
from octo_connector.application.use_cases.search_products import SearchProductsUseCase
from octo_connector.domain.value_objects.credential import Credential


def find_option(product: dict[str, Any] | None, option_id: str | None) -> dict[str, Any] | None:
    """Match on the translated option's primary identifier (``optionId``)."""
    if not product or not option_id:
        return None
    return next(
        (option for option in product.get("options") or [] if option.get("optionId") == option_id),
        None,
    )


class BookingEnricher:
    """Attaches the booking's product and option, re-fetched from the catalog, and translates it."""

    def __init__(
        self,
        catalog: SearchProductsUseCase,
        translator: Translator,
        schemas: TranslationSchemas,
    ) -> None:
        self._catalog = catalog
        self._translator = translator
        self._schemas = schemas

    def translate(
        self,
        booking: dict[str, Any],
        product: dict[str, Any] | None,
        option: dict[str, Any] | None,
    ) -> dict[str, Any]:
        return self._translator.translate(
            root_value={**booking, "product": product, "option": option},
            type_defs=self._schemas.booking_type_defs,
            query=self._schemas.booking_query,
        )

    async def enrich(
        self,
        credential: Credential,
        booking: dict[str, Any],
        product_id: str | None = None,
        option_id: str | None = None,
    ) -> dict[str, Any]:
        product_id = product_id or booking.get("productId")
        option_id = option_id or booking.get("optionId")
        product = await self._catalog.get_product_for_booking(credential, product_id)
        return self.translate(booking, product, find_option(product, option_id))
