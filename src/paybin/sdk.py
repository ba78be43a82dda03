"""Paybin – the SDK entry point.

Example::

    from paybin import CryptoSymbol, Paybin

    async with Paybin(public_key="...", secret_key="...", environment="sandbox") as paybin:
        deposit = await paybin.deposit.create_address(
            symbol=CryptoSymbol.ETH,
            label="User Payment",
            reference_id="ORDER-12345",
            callback_url="https://example.com/webhook",
        )
        balances = await paybin.balance.get()
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from paybin.api import BalanceAPI, DepositAPI, WithdrawAPI
from paybin.client import PaybinClient
from paybin.kernel.types import Environment

if TYPE_CHECKING:
    from paybin.config.settings import PaybinSettings

__all__ = ["Paybin"]


class Paybin:
    """Owns one :class:`PaybinClient` and exposes the endpoint groups on it.

    Keyword arguments are forwarded to :class:`PaybinClient`.
    """

    def __init__(self, public_key: str, secret_key: str, **kwargs: Any) -> None:
        self._init_groups(PaybinClient(public_key, secret_key, **kwargs))

    def _init_groups(self, client: PaybinClient) -> None:
        self.client = client
        self.deposit = DepositAPI(client)
        self.withdraw = WithdrawAPI(client)
        self.balance = BalanceAPI(client)

    @classmethod
    def from_client(cls, client: PaybinClient) -> "Paybin":
        sdk = cls.__new__(cls)
        sdk._init_groups(client)
        return sdk

    @classmethod
    def from_settings(cls, settings: "PaybinSettings", **kwargs: Any) -> "Paybin":
        return cls.from_client(PaybinClient.from_settings(settings, **kwargs))

    @property
    def environment(self) -> Environment:
        return self.client.environment

    async def __aenter__(self) -> "Paybin":
        await self.client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.client.__aexit__(*args)

    async def aclose(self) -> None:
        await self.client.aclose()
