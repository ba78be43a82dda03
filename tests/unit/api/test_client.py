"""Unit tests – PaybinClient request orchestration."""
from __future__ import annotations

import asyncio
import base64
import json
from decimal import Decimal
from typing import Any

import httpx
import pytest
import respx
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from paybin import Paybin, PaybinClient, PaybinSettings
from paybin.client import SignedRequest, serialize_body
from paybin.kernel.errors import (
    GatewayTimeoutError,
    KeyLoadError,
    MissingEnvironmentKeyError,
    TransportError,
    UpstreamApplicationError,
)
from paybin.kernel.types import CryptoSymbol, Environment, ErrorCode, NetworkId
from paybin.security.keys import DEFAULT_KEY_ENV, SigningKeyConfig

BASE = "https://sandbox.paybin.io"


def _ok(data: Any = None) -> httpx.Response:
    return httpx.Response(200, json={"apiVersion": "1.0", "data": data, "code": 200, "message": "Success"})


def _client(**kwargs: Any) -> PaybinClient:
    return PaybinClient("pub", "sec", **kwargs)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_sandbox_is_default(self) -> None:
        client = _client()
        assert client.environment is Environment.SANDBOX
        assert client.base_url == BASE

    def test_production_url(self) -> None:
        assert _client(environment="production").base_url == "https://gateway.paybin.io"

    def test_explicit_base_url_wins(self) -> None:
        assert _client(environment="production", base_url="http://localhost:8080/").base_url == "http://localhost:8080"

    def test_unknown_environment_rejected(self) -> None:
        with pytest.raises(ValueError):
            _client(environment="staging")

    def test_signing_disabled_without_config(self) -> None:
        assert not _client().signing_enabled

    def test_signing_from_inline_key(self, private_key_pem: str) -> None:
        assert _client(signing=SigningKeyConfig(key=private_key_pem)).signing_enabled

    def test_default_env_key_enables_signing(self, monkeypatch: pytest.MonkeyPatch, private_key_pem: str) -> None:
        monkeypatch.setenv(DEFAULT_KEY_ENV, private_key_pem)
        assert _client(signing=SigningKeyConfig()).signing_enabled

    def test_default_env_unset_leaves_signing_off(self) -> None:
        assert not _client(signing=SigningKeyConfig()).signing_enabled

    def test_explicit_env_unset_fails_construction(self) -> None:
        with pytest.raises(MissingEnvironmentKeyError):
            _client(signing=SigningKeyConfig(env="PAYBIN_TEST_UNSET_KEY"))

    def test_unreadable_key_file_fails_construction(self, tmp_path) -> None:
        with pytest.raises(KeyLoadError):
            _client(signing=SigningKeyConfig(path=str(tmp_path / "missing.pem")))

    def test_invalid_inline_key_fails_construction(self) -> None:
        with pytest.raises(KeyLoadError):
            _client(signing=SigningKeyConfig(key="garbage"))

    def test_repr_hides_secret(self) -> None:
        assert "very-secret-value" not in repr(PaybinClient("pub", "very-secret-value"))

    def test_from_settings(self, private_key_pem: str) -> None:
        settings = PaybinSettings(
            public_key="pub",
            secret_key="sec",
            environment="production",
            signature_key=private_key_pem,
            read_retry_attempts=2,
        )
        client = PaybinClient.from_settings(settings)
        assert client.base_url == "https://gateway.paybin.io"
        assert client.signing_enabled
        assert client.public_key == "pub"


# ---------------------------------------------------------------------------
# Serialization and signing
# ---------------------------------------------------------------------------


class TestPrepare:
    def test_serialize_is_compact(self) -> None:
        assert serialize_body({"A": 1, "B": "x"}) == b'{"A":1,"B":"x"}'

    def test_serialize_enums_and_decimals(self) -> None:
        body = {"Symbol": CryptoSymbol.ETH, "NetworkId": NetworkId.TronMainnet, "Amount": Decimal("0.5"), "N": Decimal("2")}
        assert json.loads(serialize_body(body)) == {"Symbol": "ETH", "NetworkId": 6, "Amount": 0.5, "N": 2}

    def test_unsigned_request_has_no_header(self) -> None:
        request = _client().prepare({"A": 1})
        assert request.signature is None
        assert request.headers == {}

    def test_signature_covers_exact_body(self, rsa_key, private_key_pem: str) -> None:
        request = _client(signing=SigningKeyConfig(key=private_key_pem)).prepare({"PublicKey": "pub", "Amount": 0.1})
        rsa_key.public_key().verify(
            base64.b64decode(request.signature), request.body, padding.PKCS1v15(), hashes.SHA512()
        )
        assert request.headers == {"X-Signature": request.signature}

    def test_signed_request_is_immutable(self) -> None:
        request = SignedRequest(body=b"{}", signature="s")
        with pytest.raises(AttributeError):
            request.body = b"[]"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Transmission
# ---------------------------------------------------------------------------


class TestPost:
    @respx.mock
    def test_sends_body_and_headers(self, rsa_key, private_key_pem: str) -> None:
        route = respx.post(f"{BASE}/v1/test").mock(return_value=_ok({"x": 1}))

        async def run() -> Any:
            async with _client(signing=SigningKeyConfig(key=private_key_pem)) as client:
                return await client.post("/v1/test", {"PublicKey": "pub", "Hash": "h"})

        envelope = asyncio.run(run())
        assert envelope.ok
        assert envelope.data == {"x": 1}
        assert envelope.api_version == "1.0"

        sent = route.calls.last.request
        assert sent.content == b'{"PublicKey":"pub","Hash":"h"}'
        assert sent.headers["X-Api-Key"] == "sec"
        assert sent.headers["Content-Type"] == "application/json"
        rsa_key.public_key().verify(
            base64.b64decode(sent.headers["X-Signature"]), sent.content, padding.PKCS1v15(), hashes.SHA512()
        )

    @respx.mock
    def test_unsigned_client_sends_no_signature(self) -> None:
        route = respx.post(f"{BASE}/v1/test").mock(return_value=_ok())

        async def run() -> None:
            async with _client() as client:
                await client.post("/v1/test", {})

        asyncio.run(run())
        assert "X-Signature" not in route.calls.last.request.headers

    @respx.mock
    def test_envelope_error_raises_application_error(self) -> None:
        respx.post(f"{BASE}/v1/test").mock(
            return_value=httpx.Response(200, json={"apiVersion": "1.0", "data": None, "code": "Z204", "message": "Invalid hash"})
        )

        async def run() -> None:
            async with _client() as client:
                await client.post("/v1/test", {})

        with pytest.raises(UpstreamApplicationError) as exc_info:
            asyncio.run(run())
        err = exc_info.value
        assert err.gateway_code == "Z204"
        assert err.error_code is ErrorCode.Z204
        assert err.http_status == 200
        assert err.message == "Invalid hash"
        assert err.endpoint == "/v1/test"
        assert not err.is_transient

    @respx.mock
    def test_http_error_with_envelope(self) -> None:
        respx.post(f"{BASE}/v1/test").mock(
            return_value=httpx.Response(400, json={"code": "Z600", "message": "Invalid parameters"})
        )

        async def run() -> None:
            async with _client() as client:
                await client.post("/v1/test", {})

        with pytest.raises(UpstreamApplicationError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.gateway_code == "Z600"
        assert exc_info.value.http_status == 400
        assert exc_info.value.response == {"code": "Z600", "message": "Invalid parameters"}

    @respx.mock
    def test_http_error_without_body(self) -> None:
        respx.post(f"{BASE}/v1/test").mock(return_value=httpx.Response(502, text="Bad Gateway"))

        async def run() -> None:
            async with _client() as client:
                await client.post("/v1/test", {})

        with pytest.raises(UpstreamApplicationError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.gateway_code == 502
        assert exc_info.value.message == "An error occurred"

    @respx.mock
    def test_transient_error_code(self) -> None:
        respx.post(f"{BASE}/v1/test").mock(return_value=httpx.Response(200, json={"code": "Z400", "message": "chain down"}))

        async def run() -> None:
            async with _client() as client:
                await client.post("/v1/test", {})

        with pytest.raises(UpstreamApplicationError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.is_transient

    @respx.mock
    def test_transport_error_propagates(self) -> None:
        respx.post(f"{BASE}/v1/test").mock(side_effect=httpx.ConnectError("refused"))

        async def run() -> None:
            async with _client() as client:
                await client.post("/v1/test", {})

        with pytest.raises(TransportError) as exc_info:
            asyncio.run(run())
        assert not isinstance(exc_info.value, UpstreamApplicationError)


# ---------------------------------------------------------------------------
# Retry
# ---------------------------------------------------------------------------


class TestRetry:
    @respx.mock
    def test_idempotent_calls_retry_transport_errors(self) -> None:
        route = respx.post(f"{BASE}/v1/read").mock(
            side_effect=[httpx.ConnectError("refused"), _ok({"ok": True})]
        )
        client = _client(read_retry_attempts=2)
        client._read_retry._wait = lambda state: 0  # noqa: SLF001

        async def run() -> Any:
            async with client:
                return await client.post("/v1/read", {}, idempotent=True)

        assert asyncio.run(run()).data == {"ok": True}
        assert route.call_count == 2

    @respx.mock
    def test_writes_are_never_retried(self) -> None:
        route = respx.post(f"{BASE}/v1/write").mock(side_effect=httpx.ConnectError("refused"))
        client = _client(read_retry_attempts=3)

        async def run() -> None:
            async with client:
                await client.post("/v1/write", {})

        with pytest.raises(TransportError):
            asyncio.run(run())
        assert route.call_count == 1

    @respx.mock
    def test_application_errors_are_not_retried(self) -> None:
        route = respx.post(f"{BASE}/v1/read").mock(return_value=httpx.Response(200, json={"code": "Z100"}))
        client = _client(read_retry_attempts=3)

        async def run() -> None:
            async with client:
                await client.post("/v1/read", {}, idempotent=True)

        with pytest.raises(UpstreamApplicationError):
            asyncio.run(run())
        assert route.call_count == 1

    @respx.mock
    def test_timeout_retried_for_reads(self) -> None:
        route = respx.post(f"{BASE}/v1/read").mock(side_effect=httpx.ReadTimeout("slow"))
        client = _client(read_retry_attempts=2)
        client._read_retry._wait = lambda state: 0  # noqa: SLF001

        async def run() -> None:
            async with client:
                await client.post("/v1/read", {}, idempotent=True)

        with pytest.raises(GatewayTimeoutError):
            asyncio.run(run())
        assert route.call_count == 2


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


class TestPaybinFacade:
    def test_groups_share_one_client(self) -> None:
        sdk = Paybin("pub", "sec", environment="production")
        assert sdk.environment is Environment.PRODUCTION
        assert sdk.deposit._client is sdk.client  # noqa: SLF001
        assert sdk.withdraw._client is sdk.client  # noqa: SLF001
        assert sdk.balance._client is sdk.client  # noqa: SLF001

    def test_from_settings(self) -> None:
        sdk = Paybin.from_settings(PaybinSettings(public_key="pub", secret_key="sec"))
        assert sdk.client.base_url == BASE
