"""Deposit endpoints – address creation and lookup."""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Mapping

from paybin.api._wire import compact, require_wire_exact, to_decimal, to_enum, wire
from paybin.kernel.types import ApiResponse, CryptoSymbol, FiatCurrency, NetworkId
from paybin.security.hashing import DepositHashInput, compute_request_hash

if TYPE_CHECKING:
    from paybin.client import PaybinClient

__all__ = [
    "CreateDepositAddressRequest",
    "CreateDepositAddressResponse",
    "DepositAPI",
    "GetDepositAddressRequest",
    "GetDepositAddressResponse",
    "PriceInfo",
]

CREATE_ADDRESS_PATH = "/v1/deposit/address/create"
GET_ADDRESS_PATH = "/v1/deposit/address/get"


@dataclasses.dataclass(frozen=True)
class CreateDepositAddressRequest:
    symbol: CryptoSymbol | str
    label: str
    reference_id: str
    callback_url: str
    amount: int | float | Decimal | None = None
    currency: FiatCurrency | str | None = None
    redirect_url: str | None = None
    cancel_url: str | None = None

    def __post_init__(self) -> None:
        require_wire_exact(self.amount)

    def hash_input(self, public_key: str) -> DepositHashInput:
        return DepositHashInput(
            public_key=public_key,
            symbol=self.symbol,
            label=self.label,
            reference_id=self.reference_id,
            callback_url=self.callback_url,
        )

    def to_body(self, public_key: str, hash_: str) -> dict[str, Any]:
        return compact(
            {
                "PublicKey": public_key,
                "Symbol": wire(self.symbol),
                "Label": self.label,
                "ReferenceId": self.reference_id,
                "CallbackUrl": self.callback_url,
                "Hash": hash_,
                "Amount": self.amount,
                "Currency": wire(self.currency),
                "RedirectUrl": self.redirect_url,
                "CancelUrl": self.cancel_url,
            }
        )


@dataclasses.dataclass(frozen=True)
class GetDepositAddressRequest:
    member_id: str
    symbol: CryptoSymbol | str
    label: str | None = None
    network_id: NetworkId | int | None = None

    def to_body(self, public_key: str) -> dict[str, Any]:
        return compact(
            {
                "PublicKey": public_key,
                "MemberId": self.member_id,
                "Symbol": wire(self.symbol),
                "Label": self.label,
                "NetworkId": wire(self.network_id),
            }
        )


@dataclasses.dataclass(frozen=True)
class PriceInfo:
    usd: Decimal | None = None
    eur: Decimal | None = None
    try_: Decimal | None = None
    gbp: Decimal | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PriceInfo":
        return cls(
            usd=to_decimal(data.get("usd")),
            eur=to_decimal(data.get("eur")),
            try_=to_decimal(data.get("try")),
            gbp=to_decimal(data.get("gbp")),
        )


@dataclasses.dataclass(frozen=True)
class CreateDepositAddressResponse:
    wallet: str
    request_id: str
    symbol: CryptoSymbol | str
    network: str
    price: PriceInfo | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CreateDepositAddressResponse":
        price = data.get("price")
        return cls(
            wallet=data.get("wallet", ""),
            request_id=data.get("requestId", ""),
            symbol=to_enum(CryptoSymbol, data.get("symbol", "")),
            network=data.get("network", ""),
            price=PriceInfo.from_dict(price) if isinstance(price, Mapping) else None,
        )


@dataclasses.dataclass(frozen=True)
class GetDepositAddressResponse:
    member_wallet_id: int
    address: str
    symbol: CryptoSymbol | str
    network: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GetDepositAddressResponse":
        return cls(
            member_wallet_id=int(data.get("memberWalletId") or 0),
            address=data.get("address", ""),
            symbol=to_enum(CryptoSymbol, data.get("symbol", "")),
            network=data.get("network", ""),
        )


class DepositAPI:
    """Deposit address management."""

    def __init__(self, client: "PaybinClient") -> None:
        self._client = client

    async def create_address(
        self,
        *,
        symbol: CryptoSymbol | str,
        label: str,
        reference_id: str,
        callback_url: str,
        amount: int | float | Decimal | None = None,
        currency: FiatCurrency | str | None = None,
        redirect_url: str | None = None,
        cancel_url: str | None = None,
    ) -> ApiResponse[CreateDepositAddressResponse]:
        """Create a deposit address; status updates are posted to *callback_url*.

        Example::

            deposit = await paybin.deposit.create_address(
                symbol=CryptoSymbol.ETH,
                label="User 12345",
                reference_id="ORDER-12345",
                callback_url="https://example.com/webhook",
                amount=100,
                currency=FiatCurrency.USD,
            )
            print(deposit.data.wallet)
        """
        request = CreateDepositAddressRequest(
            symbol=symbol,
            label=label,
            reference_id=reference_id,
            callback_url=callback_url,
            amount=amount,
            currency=currency,
            redirect_url=redirect_url,
            cancel_url=cancel_url,
        )
        public_key = self._client.public_key
        hash_ = compute_request_hash(request.hash_input(public_key), self._client.secret_key)
        response = await self._client.post(CREATE_ADDRESS_PATH, request.to_body(public_key, hash_))
        return response.map(CreateDepositAddressResponse.from_dict)

    async def get_address(
        self,
        *,
        member_id: str,
        symbol: CryptoSymbol | str,
        label: str | None = None,
        network_id: NetworkId | int | None = None,
    ) -> ApiResponse[GetDepositAddressResponse]:
        """Look up an existing deposit address for a member."""
        request = GetDepositAddressRequest(
            member_id=member_id,
            symbol=symbol,
            label=label,
            network_id=network_id,
        )
        response = await self._client.post(
            GET_ADDRESS_PATH,
            request.to_body(self._client.public_key),
            idempotent=True,
        )
        return response.map(GetDepositAddressResponse.from_dict)
