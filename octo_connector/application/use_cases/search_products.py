import logging
from typing import Any

from octo_connector.application.interfaces.octo_supplier_gateway import OctoSupplierGateway
from octo_connector.application.interfaces.translator import TranslationSchemas, Translator
from octo_connector.domain.errors import ProductNotFoundError
from octo_connector.domain.value_objects.credential import Credential
from octo_connector.domain.value_objects.wildcard import wildcard_match


def _passes_filter(product: dict[str, Any], field: str, expected: Any) -> bool:
    # Only string filters are applied; any other value lets the product through.
    if isinstance(expected, str):
        return wildcard_match(expected, product.get(field))
    return True


class SearchProductsUseCase:
    """Catalog resolver: lists, searches and looks up supplier products."""

    def __init__(
        self,
        supplier_gateway: OctoSupplierGateway,
        translator: Translator,
        schemas: TranslationSchemas,
    ) -> None:
        self._supplier_gateway = supplier_gateway
        self._translator = translator
        self._schemas = schemas
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        credential: Credential,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, list[dict[str, Any]]]:
        payload = payload or {}
        product_id = payload.get("productId")
        if product_id:
            results = await self._supplier_gateway.get_product(credential.api_key, product_id)
        else:
            results = await self._supplier_gateway.list_products(credential.api_key)
        if results is None:
            results = []
        if not isinstance(results, list):
            results = [results]

        products = [
            self._translator.translate(
                root_value=product,
                type_defs=self._schemas.product_type_defs,
                query=self._schemas.product_query,
            )
            for product in results
        ]

        extra_filters = {key: value for key, value in payload.items() if key != "productId"}
        if extra_filters:
            products = [
                product
                for product in products
                if all(_passes_filter(product, key, value) for key, value in extra_filters.items())
            ]
            self._logger.debug(
                "Products filtered",
                extra={"filters": list(extra_filters), "matched": len(products), "fetched": len(results)},
            )
        return {"products": products}

    async def get_product_for_booking(self, credential: Credential, product_id: str) -> dict[str, Any]:
        """
        Fetch the single product a booking belongs to.

        Supplier failures (including "product not found") propagate unchanged.
        """
        if not product_id:
            raise ProductNotFoundError(str(product_id))
        products = (await self.execute(credential, {"productId": product_id}))["products"]
        if not products:
            raise ProductNotFoundError(product_id)
        return products[0]
