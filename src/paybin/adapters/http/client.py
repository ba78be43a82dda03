"""HTTP adapter – HttpxTransport."""
from __future__ import annotations

from typing import Any, Mapping

import httpx

from paybin.kernel.errors import GatewayTimeoutError, TransportError


class HttpxTransport:
    """Thin async httpx wrapper that maps network failures to ``TransportError``.

    HTTP error statuses are *not* raised here: the gateway puts its error
    envelope in 4xx/5xx bodies, and the client needs to read it.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30.0,
        headers: Mapping[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=dict(headers or {}),
            **kwargs,
        )

    async def __aenter__(self) -> "HttpxTransport":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def post(self, url: str, *, content: bytes, headers: Mapping[str, str] | None = None) -> httpx.Response:
        """POST *content* verbatim; the bytes sent are exactly the bytes given."""
        return await self._request("POST", url, content=content, headers=dict(headers or {}))

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            raise GatewayTimeoutError(f"HTTP request timed out: {method} {url}", endpoint=url, cause=exc) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"No response received from server: {exc}", endpoint=url, cause=exc) from exc


__all__ = ["HttpxTransport"]
