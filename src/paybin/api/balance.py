"""Balance endpoint – merchant balances per asset."""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Mapping

from paybin.api._wire import to_decimal
from paybin.kernel.types import ApiResponse

if TYPE_CHECKING:
    from paybin.client import PaybinClient

__all__ = ["BALANCE_SYMBOLS", "BalanceAPI", "BalanceResponse"]

BALANCES_PATH = "/v1/merchant/balances"

BALANCE_SYMBOLS: tuple[str, ...] = (
    "btc",
    "eth",
    "ltc",
    "bnb",
    "usdt",
    "bscusd",
    "trx",
    "trxusd",
    "optusd",
    "opteth",
    "ethusdc",
    "bscusdc",
)

_ZERO = Decimal(0)


@dataclasses.dataclass(frozen=True)
class BalanceResponse:
    btc_balance: Decimal = _ZERO
    eth_balance: Decimal = _ZERO
    ltc_balance: Decimal = _ZERO
    bnb_balance: Decimal = _ZERO
    usdt_balance: Decimal = _ZERO
    bscusd_balance: Decimal = _ZERO
    trx_balance: Decimal = _ZERO
    trxusd_balance: Decimal = _ZERO
    optusd_balance: Decimal = _ZERO
    opteth_balance: Decimal = _ZERO
    ethusdc_balance: Decimal = _ZERO
    bscusdc_balance: Decimal = _ZERO

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BalanceResponse":
        return cls(**{f"{s}_balance": to_decimal(data.get(f"{s}Balance"), _ZERO) for s in BALANCE_SYMBOLS})

    def for_symbol(self, symbol: str) -> Decimal:
        key = symbol.lower()
        if key not in BALANCE_SYMBOLS:
            raise ValueError(f"Unknown balance symbol {symbol!r}; expected one of {', '.join(BALANCE_SYMBOLS)}")
        return getattr(self, f"{key}_balance")


class BalanceAPI:
    def __init__(self, client: "PaybinClient") -> None:
        self._client = client

    async def get(self) -> ApiResponse[BalanceResponse]:
        response = await self._client.post(BALANCES_PATH, {"PublicKey": self._client.public_key}, idempotent=True)
        return response.map(BalanceResponse.from_dict)

    async def get_by_symbol(self, symbol: str) -> Decimal:
        """Balance of one asset (``"btc"``, ``"usdt"``, ``"bscusdc"``, ...); zero when not reported."""
        if symbol.lower() not in BALANCE_SYMBOLS:
            raise ValueError(f"Unknown balance symbol {symbol!r}")
        response = await self.get()
        if response.data is None:
            return _ZERO
        return response.data.for_symbol(symbol)
