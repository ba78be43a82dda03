"""Withdrawal endpoints – payouts and withdrawal address verification.

Address verification is a two step flow: :meth:`WithdrawAPI.verify_start`
makes the gateway send a small, random amount to the address, and
:meth:`WithdrawAPI.verify_confirm_amount` proves ownership by echoing the
amount that arrived. Verified addresses are listed by
:meth:`WithdrawAPI.get_withdrawable_assets`.

None of the write calls here are retried by the client. Use a fresh
``merchant_transaction_id`` / ``reference_id`` per logical operation and
let the gateway's duplicate detection (``Z502``..``Z504``, ``Z519``) guard
any retry you do yourself.
"""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Mapping

from paybin.api._wire import compact, require_wire_exact, to_decimal, to_enum, wire
from paybin.kernel.types import ApiResponse, CryptoSymbol, NetworkId
from paybin.security.hashing import (
    VerifyConfirmHashInput,
    VerifyStartHashInput,
    WithdrawHashInput,
    compute_request_hash,
)

if TYPE_CHECKING:
    from paybin.client import PaybinClient

__all__ = [
    "VerifyConfirmAmountRequest",
    "VerifyConfirmAmountResponse",
    "VerifyStartRequest",
    "VerifyStartResponse",
    "WithdrawAPI",
    "WithdrawRequest",
    "WithdrawResponse",
    "WithdrawableAsset",
]

WITHDRAW_PATH = "/v1/withdraw/add"
VERIFY_START_PATH = "/v1/verify/start"
VERIFY_CONFIRM_PATH = "/v1/verify/confirmAmount"
WITHDRAWABLE_ASSETS_PATH = "/v1/merchant/withdraw/withdrawableAssets"

Amount = int | float | Decimal


@dataclasses.dataclass(frozen=True)
class WithdrawRequest:
    reference_id: str
    amount: Amount
    symbol: CryptoSymbol | str
    network_id: NetworkId | int
    address: str
    label: str
    merchant_transaction_id: str
    tfa_code: str = dataclasses.field(repr=False)
    email: str

    def __post_init__(self) -> None:
        require_wire_exact(self.amount)

    def hash_input(self) -> WithdrawHashInput:
        return WithdrawHashInput(
            symbol=self.symbol,
            amount=self.amount,
            address=self.address,
            merchant_transaction_id=self.merchant_transaction_id,
        )

    def to_body(self, public_key: str, hash_: str) -> dict[str, Any]:
        return {
            "PublicKey": public_key,
            "ReferenceId": self.reference_id,
            "Amount": self.amount,
            "Symbol": wire(self.symbol),
            "NetworkId": wire(self.network_id),
            "Address": self.address,
            "Label": self.label,
            "MerchantTransactionId": self.merchant_transaction_id,
            "Hash": hash_,
            "TfaCode": self.tfa_code,
            "Email": self.email,
        }


@dataclasses.dataclass(frozen=True)
class VerifyStartRequest:
    reference_id: str
    symbol: CryptoSymbol | str
    network_id: NetworkId | int
    address: str
    label: str

    def hash_input(self) -> VerifyStartHashInput:
        return VerifyStartHashInput(
            symbol=self.symbol,
            network_id=self.network_id,
            address=self.address,
            reference_id=self.reference_id,
        )

    def to_body(self, public_key: str, hash_: str) -> dict[str, Any]:
        return {
            "PublicKey": public_key,
            "ReferenceId": self.reference_id,
            "Symbol": wire(self.symbol),
            "NetworkId": wire(self.network_id),
            "Address": self.address,
            "Label": self.label,
            "Hash": hash_,
        }


@dataclasses.dataclass(frozen=True)
class VerifyConfirmAmountRequest:
    reference_id: str
    symbol: CryptoSymbol | str
    network_id: NetworkId | int
    amount: Amount

    def __post_init__(self) -> None:
        require_wire_exact(self.amount)

    def hash_input(self) -> VerifyConfirmHashInput:
        return VerifyConfirmHashInput(
            symbol=self.symbol,
            network_id=self.network_id,
            amount=self.amount,
            reference_id=self.reference_id,
        )

    def to_body(self, public_key: str, hash_: str) -> dict[str, Any]:
        return {
            "PublicKey": public_key,
            "ReferenceId": self.reference_id,
            "Symbol": wire(self.symbol),
            "NetworkId": wire(self.network_id),
            "Amount": self.amount,
            "Hash": hash_,
        }


@dataclasses.dataclass(frozen=True)
class WithdrawResponse:
    tx_id: str
    explorer_url: str
    success: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WithdrawResponse":
        return cls(
            tx_id=data.get("txId", ""),
            explorer_url=data.get("explorerUrl", ""),
            success=bool(data.get("success", False)),
        )


@dataclasses.dataclass(frozen=True)
class VerifyStartResponse:
    tx_id: str
    amount: Decimal

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VerifyStartResponse":
        return cls(
            tx_id=data.get("txId", ""),
            amount=to_decimal(data.get("amount"), Decimal(0)),
        )


@dataclasses.dataclass(frozen=True)
class VerifyConfirmAmountResponse:
    is_verified: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VerifyConfirmAmountResponse":
        return cls(is_verified=bool(data.get("isVerified", False)))


@dataclasses.dataclass(frozen=True)
class WithdrawableAsset:
    symbol: CryptoSymbol | str
    network_id: NetworkId | int
    reference_id: str
    address: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WithdrawableAsset":
        return cls(
            symbol=to_enum(CryptoSymbol, data.get("symbol", "")),
            network_id=to_enum(NetworkId, data.get("networkId", 0)),
            reference_id=data.get("referenceId", ""),
            address=data.get("address", ""),
        )


def _assets(items: Any) -> list[WithdrawableAsset]:
    """Decode the asset list; anything that is not a list of objects yields no assets."""
    if not isinstance(items, list):
        return []
    return [WithdrawableAsset.from_dict(item) for item in items if isinstance(item, Mapping)]


class WithdrawAPI:
    """Payouts and withdrawal address verification."""

    def __init__(self, client: "PaybinClient") -> None:
        self._client = client

    async def add(
        self,
        *,
        reference_id: str,
        amount: Amount,
        symbol: CryptoSymbol | str,
        network_id: NetworkId | int,
        address: str,
        label: str,
        merchant_transaction_id: str,
        tfa_code: str,
        email: str,
    ) -> ApiResponse[WithdrawResponse]:
        """Submit a withdrawal. Never retried; *merchant_transaction_id* is the idempotency key."""
        request = WithdrawRequest(
            reference_id=reference_id,
            amount=amount,
            symbol=symbol,
            network_id=network_id,
            address=address,
            label=label,
            merchant_transaction_id=merchant_transaction_id,
            tfa_code=tfa_code,
            email=email,
        )
        hash_ = compute_request_hash(request.hash_input(), self._client.secret_key)
        response = await self._client.post(WITHDRAW_PATH, request.to_body(self._client.public_key, hash_))
        return response.map(WithdrawResponse.from_dict)

    async def verify_start(
        self,
        *,
        reference_id: str,
        symbol: CryptoSymbol | str,
        network_id: NetworkId | int,
        address: str,
        label: str,
    ) -> ApiResponse[VerifyStartResponse]:
        request = VerifyStartRequest(
            reference_id=reference_id,
            symbol=symbol,
            network_id=network_id,
            address=address,
            label=label,
        )
        hash_ = compute_request_hash(request.hash_input(), self._client.secret_key)
        response = await self._client.post(VERIFY_START_PATH, request.to_body(self._client.public_key, hash_))
        return response.map(VerifyStartResponse.from_dict)

    async def verify_confirm_amount(
        self,
        *,
        reference_id: str,
        symbol: CryptoSymbol | str,
        network_id: NetworkId | int,
        amount: Amount,
    ) -> ApiResponse[VerifyConfirmAmountResponse]:
        """Confirm the exact amount received during verification (e.g. ``Decimal("0.00004912")``)."""
        request = VerifyConfirmAmountRequest(
            reference_id=reference_id,
            symbol=symbol,
            network_id=network_id,
            amount=amount,
        )
        hash_ = compute_request_hash(request.hash_input(), self._client.secret_key)
        response = await self._client.post(VERIFY_CONFIRM_PATH, request.to_body(self._client.public_key, hash_))
        return response.map(VerifyConfirmAmountResponse.from_dict)

    async def get_withdrawable_assets(self, reference_id: str) -> ApiResponse[list[WithdrawableAsset]]:
        body = compact({"PublicKey": self._client.public_key, "ReferenceId": reference_id})
        response = await self._client.post(WITHDRAWABLE_ASSETS_PATH, body, idempotent=True)
        return response.map(_assets)
