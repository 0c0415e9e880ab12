import json
import logging
from typing import Any

import httpx

from octo_connector.application.interfaces.event_sink import NullEventSink, SupplierEventSink
from octo_connector.config import DEFAULT_OCTO_CAPABILITIES
from octo_connector.domain.errors import SupplierError, SupplierTimeoutError

logger = logging.getLogger(__name__)


def build_headers(api_key: str | None, capabilities: str = DEFAULT_OCTO_CAPABILITIES) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "Octo-Capabilities": capabilities,
    }


def _masked(headers: dict[str, str]) -> dict[str, str]:
    masked = dict(headers)
    if "Authorization" in masked:
        masked["Authorization"] = "Bearer ***"
    return masked


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, ValueError):
        return None


class OctoHttpClient:
    def __init__(
        self,
        endpoint: str,
        timeout_seconds: float = 30.0,
        capabilities: str = DEFAULT_OCTO_CAPABILITIES,
        event_sink: SupplierEventSink | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Authenticated JSON client for an OCTO supplier endpoint.

        Args:
            endpoint: Base URL of the OCTO API (e.g. .../integrations/octo)
            timeout_seconds: Per-call timeout, a hung supplier call fails with SupplierTimeoutError
            capabilities: Value of the Octo-Capabilities header sent on every call
            event_sink: Receives request/response/error events, no-op when omitted
            transport: Optional httpx transport (tests, proxies)
        """
        self._endpoint = endpoint.rstrip("/")
        self._timeout = timeout_seconds
        self._capabilities = capabilities
        self._event_sink = event_sink or NullEventSink()
        self._transport = transport

    def url_for(self, path: str) -> str:
        return f"{self._endpoint}/{path.lstrip('/')}"

    def _emit(self, kind: str, event: dict[str, Any]) -> None:
        handler = getattr(self._event_sink, f"on_{kind}")
        try:
            handler(event)
        except Exception:
            logger.exception("Supplier event sink failed", extra={"event_kind": kind})

    async def request(
        self,
        method: str,
        path: str,
        api_key: str | None,
        json: Any = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """
        Issue one call against the supplier and return its decoded JSON body.

        Raises:
            SupplierTimeoutError: the call exceeded the configured timeout
            SupplierError: transport failure or non-2xx answer, carrying the
                supplier's error body when it sent one
        """
        url = self.url_for(path)
        headers = build_headers(api_key, self._capabilities)
        method = method.upper()
        self._emit(
            "request",
            {"method": method, "url": url, "params": params, "headers": _masked(headers), "body": json},
        )

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.request(method, url, json=json, params=params, headers=headers)
        except httpx.TimeoutException as exc:
            self._emit("error", {"method": method, "url": url, "message": str(exc) or "timeout"})
            raise SupplierTimeoutError(url=url, timeout_seconds=self._timeout) from exc
        except httpx.HTTPError as exc:
            self._emit("error", {"method": method, "url": url, "message": str(exc)})
            raise SupplierError(message=f"Supplier transport error: {exc}") from exc

        body = _decode(response)
        if not 200 <= response.status_code < 300:
            self._emit(
                "error",
                {
                    "method": method,
                    "url": url,
                    "status": response.status_code,
                    "headers": dict(response.headers),
                    "body": body if body is not None else response.text,
                },
            )
            raise SupplierError.from_response_body(response.status_code, body, response.text)

        self._emit(
            "response",
            {
                "method": method,
                "url": url,
                "status": response.status_code,
                "headers": dict(response.headers),
                "body": body,
            },
        )
        return body
