"""Endpoint groups – deposit, withdraw, balance."""
from paybin.api.balance import BALANCE_SYMBOLS, BalanceAPI, BalanceResponse
from paybin.api.deposit import (
    CreateDepositAddressRequest,
    CreateDepositAddressResponse,
    DepositAPI,
    GetDepositAddressRequest,
    GetDepositAddressResponse,
    PriceInfo,
)
from paybin.api.withdraw import (
    VerifyConfirmAmountRequest,
    VerifyConfirmAmountResponse,
    VerifyStartRequest,
    VerifyStartResponse,
    WithdrawAPI,
    WithdrawableAsset,
    WithdrawRequest,
    WithdrawResponse,
)

__all__ = [
    "BALANCE_SYMBOLS",
    "BalanceAPI",
    "BalanceResponse",
    "CreateDepositAddressRequest",
    "CreateDepositAddressResponse",
    "DepositAPI",
    "GetDepositAddressRequest",
    "GetDepositAddressResponse",
    "PriceInfo",
    "VerifyConfirmAmountRequest",
    "VerifyConfirmAmountResponse",
    "VerifyStartRequest",
    "VerifyStartResponse",
    "WithdrawAPI",
    "WithdrawRequest",
    "WithdrawResponse",
    "WithdrawableAsset",
]
