import logging

from octo_connector.application.interfaces.octo_supplier_gateway import OctoSupplierGateway
from octo_connector.domain.errors import SupplierError
from octo_connector.domain.value_objects.credential import Credential


class ValidateCredentialUseCase:
    """A credential is valid when the supplier lists at least one product with it."""

    def __init__(self, supplier_gateway: OctoSupplierGateway) -> None:
        self._supplier_gateway = supplier_gateway
        self._logger = logging.getLogger(__name__)

    async def execute(self, credential: Credential) -> bool:
        if not credential.api_key:
            return False
        try:
            products = await self._supplier_gateway.list_products(credential.api_key)
        except SupplierError as exc:
            self._logger.info(
                "Credential rejected by supplier",
                extra={"status": exc.status_code, "error_code": exc.code},
            )
            return False
        return isinstance(products, list) and len(products) > 0
