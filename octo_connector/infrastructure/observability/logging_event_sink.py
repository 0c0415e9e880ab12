import logging
from typing import Any

from octo_connector.application.interfaces.event_sink import SupplierEventSink


class LoggingEventSink(SupplierEventSink):
    """Writes supplier call events to the application log."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("octo_connector.supplier")

    def on_request(self, event: dict[str, Any]) -> None:
        self._logger.debug(
            "Supplier request",
            extra={"method": event.get("method"), "url": event.get("url"), "params": event.get("params")},
        )

    def on_response(self, event: dict[str, Any]) -> None:
        self._logger.info(
            "Supplier response",
            extra={"method": event.get("method"), "url": event.get("url"), "status": event.get("status")},
        )

    def on_error(self, event: dict[str, Any]) -> None:
        self._logger.warning(
            "Supplier error",
            extra={
                "method": event.get("method"),
                "url": event.get("url"),
                "status": event.get("status"),
                "error_message": event.get("message"),
            },
        )
