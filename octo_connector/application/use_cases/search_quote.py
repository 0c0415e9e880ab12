import logging
from typing import Any

from octo_connector.domain.value_objects.credential import Credential


class SearchQuoteUseCase:
    """
    Quotes are not implemented for OCTO suppliers.

    The operation exists so the host's contract is complete; it always
    answers with an empty quote list and never calls the supplier.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def execute(self, credential: Credential, payload: dict[str, Any] | None = None) -> dict[str, list]:
        self._logger.debug(
            "Quote search is not implemented, returning empty quote",
            extra={"product_ids": (payload or {}).get("productIds")},
        )
        return {"quote": []}
