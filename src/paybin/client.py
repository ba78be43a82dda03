"""PaybinClient – the request orchestrator.

Builds on the pure pieces in :mod:`paybin.security`: bodies arrive with
their ``Hash`` already computed, get serialized exactly once, are signed
over those bytes when a signing key is configured, and are posted with the
signature in ``X-Signature``. The response envelope is unwrapped and any
``code != 200`` becomes :class:`UpstreamApplicationError`.
"""
from __future__ import annotations

import dataclasses
import json
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping

import httpx

from paybin.adapters.http import HttpxTransport, TransportRetryPolicy
from paybin.api._wire import require_wire_exact
from paybin.kernel.errors import TransportError, UpstreamApplicationError
from paybin.kernel.types import SUCCESS_CODE, ApiResponse, Environment
from paybin.observability.logging import get_logger
from paybin.security.keys import SigningKeyConfig, resolve_signing_key
from paybin.security.signer import RequestSigner

if TYPE_CHECKING:
    from paybin.config.settings import PaybinSettings

__all__ = ["Credentials", "PaybinClient", "SignedRequest", "serialize_body"]

logger = get_logger(__name__)

API_KEY_HEADER = "X-Api-Key"
SIGNATURE_HEADER = "X-Signature"


@dataclasses.dataclass(frozen=True)
class Credentials:
    public_key: str
    secret_key: str = dataclasses.field(repr=False)


@dataclasses.dataclass(frozen=True)
class SignedRequest:
    """A serialized body and the signature bound to exactly those bytes."""

    body: bytes
    signature: str | None = None

    @property
    def headers(self) -> dict[str, str]:
        return {SIGNATURE_HEADER: self.signature} if self.signature is not None else {}


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        require_wire_exact(value)
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_body(body: Mapping[str, Any]) -> bytes:
    """Compact JSON, UTF-8. The result is what gets signed and what gets sent."""
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False, default=_json_default).encode("utf-8")


class PaybinClient:
    """Low-level gateway client shared by the endpoint groups.

    Parameters
    ----------
    public_key, secret_key:
        Merchant credentials. The secret key travels only as the
        ``X-Api-Key`` header and inside request hashes.
    environment:
        ``"sandbox"`` (default) or ``"production"``; selects the base URL.
    base_url:
        Explicit base URL, overriding ``environment``.
    signing:
        Where to find the RSA key for ``X-Signature``. ``None`` disables
        signing. Resolved once, here.
    read_retry_attempts:
        Attempts for read-only calls on transport failures. Writes are
        never retried.
    """

    def __init__(
        self,
        public_key: str,
        secret_key: str,
        *,
        environment: Environment | str = Environment.SANDBOX,
        base_url: str | None = None,
        timeout: float = 30.0,
        signing: SigningKeyConfig | None = None,
        read_retry_attempts: int = 1,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._credentials = Credentials(public_key=public_key, secret_key=secret_key)
        self._environment = Environment(environment)
        self._base_url = (base_url or self._environment.base_url).rstrip("/")

        private_key = resolve_signing_key(signing)
        self._signer = RequestSigner(private_key) if private_key else None

        headers = {"Content-Type": "application/json", API_KEY_HEADER: secret_key}
        if http_client is not None:
            http_client.headers.update(headers)
            if not str(http_client.base_url):
                http_client.base_url = self._base_url
        self._transport = HttpxTransport(
            base_url=self._base_url,
            timeout=timeout,
            headers=headers,
            client=http_client,
        )
        self._read_retry = TransportRetryPolicy(max_attempts=read_retry_attempts)

    @classmethod
    def from_settings(cls, settings: "PaybinSettings", **kwargs: Any) -> "PaybinClient":
        return cls(
            settings.public_key,
            settings.secret_key,
            environment=settings.env,
            base_url=settings.base_url,
            timeout=settings.timeout,
            signing=settings.signing_config(),
            read_retry_attempts=settings.read_retry_attempts,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def public_key(self) -> str:
        return self._credentials.public_key

    @property
    def secret_key(self) -> str:
        return self._credentials.secret_key

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def signing_enabled(self) -> bool:
        return self._signer is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "PaybinClient":
        await self._transport.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._transport.__aexit__(*args)

    async def aclose(self) -> None:
        await self._transport.aclose()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def prepare(self, body: Mapping[str, Any]) -> SignedRequest:
        """Serialize *body* once and sign the resulting bytes if signing is on."""
        raw = serialize_body(body)
        if self._signer is None:
            return SignedRequest(body=raw)
        return SignedRequest(body=raw, signature=self._signer.sign(raw))

    async def post(self, endpoint: str, body: Mapping[str, Any], *, idempotent: bool = False) -> ApiResponse[Any]:
        """POST *body* to *endpoint* and return the unwrapped envelope.

        ``idempotent=True`` lets transport failures be retried according to
        ``read_retry_attempts``.

        Raises:
            UpstreamApplicationError: the envelope code is not 200.
            TransportError: no response was received.
        """
        request = self.prepare(body)
        if idempotent:
            return await self._read_retry.execute_async(lambda: self._send(endpoint, request))
        return await self._send(endpoint, request)

    async def _send(self, endpoint: str, request: SignedRequest) -> ApiResponse[Any]:
        log = logger.bind(endpoint=endpoint)
        log.debug("paybin_request", signed=request.signature is not None, size=len(request.body))
        try:
            response = await self._transport.post(endpoint, content=request.body, headers=request.headers)
        except TransportError as exc:
            log.warning("paybin_transport_error", error=exc.code)
            raise
        envelope = self._decode(endpoint, response)
        log.info("paybin_response", code=envelope.code, http_status=response.status_code)
        return envelope

    def _decode(self, endpoint: str, response: httpx.Response) -> ApiResponse[Any]:
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not isinstance(payload, Mapping):
            failed = response.is_error
            raise self._application_error(
                endpoint,
                message="An error occurred" if failed else "Malformed response envelope",
                gateway_code=response.status_code if failed else 0,
                http_status=response.status_code,
                response=None,
            )

        envelope = ApiResponse.from_dict(payload)
        if envelope.code != SUCCESS_CODE or response.is_error:
            code = payload.get("code")
            raise self._application_error(
                endpoint,
                message=envelope.message or "An error occurred",
                gateway_code=code if code not in (None, SUCCESS_CODE) else response.status_code,
                http_status=response.status_code,
                response=dict(payload),
            )
        return envelope

    @staticmethod
    def _application_error(
        endpoint: str,
        *,
        message: str,
        gateway_code: int | str,
        http_status: int,
        response: dict[str, Any] | None,
    ) -> UpstreamApplicationError:
        logger.warning(
            "paybin_application_error",
            endpoint=endpoint,
            gateway_code=gateway_code,
            http_status=http_status,
            message=message,
        )
        return UpstreamApplicationError(
            message,
            gateway_code=gateway_code,
            http_status=http_status,
            endpoint=endpoint,
            response=response,
        )

    def __repr__(self) -> str:
        return (
            f"PaybinClient(public_key={self.public_key!r}, base_url={self._base_url!r}, "
            f"signing_enabled={self.signing_enabled})"
        )
