"""Security – per-request integrity hashes.

Every write endpoint of the gateway expects a ``Hash`` field computed as::

    md5(field_1 + field_2 + ... + field_n + secret_key)

The participating fields and their order differ per endpoint and are fixed
by the server; reordering them produces a hash the gateway rejects with
``Z204``/``Z800``. Each endpoint therefore has its own frozen input record
whose ``FIELD_ORDER`` is the contract.

Fields are rendered with :func:`canonical_string` and joined with no
separator. The functions here never validate; an empty address or a NaN
amount still hashes deterministically.
"""
from __future__ import annotations

import dataclasses
import hashlib
import math
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar

from paybin.kernel.types.enums import CryptoSymbol, NetworkId

__all__ = [
    "DepositHashInput",
    "HashInput",
    "VerifyConfirmHashInput",
    "VerifyStartHashInput",
    "WithdrawHashInput",
    "canonical_string",
    "compute_request_hash",
    "generate_deposit_hash",
    "generate_verify_confirm_hash",
    "generate_verify_start_hash",
    "generate_withdraw_hash",
]

Amount = int | float | Decimal


def canonical_string(value: Any) -> str:
    """Render *value* the way the gateway concatenates it.

    Numbers use plain decimal notation: no exponent, no thousands
    separators, no padding zeros (``0.1`` → ``"0.1"``, ``1.0`` → ``"1"``,
    ``4.912e-05`` → ``"0.00004912"``). Enum members render as their value.
    """
    if isinstance(value, Enum):
        return canonical_string(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        # repr() gives the shortest digits that round-trip
        return format(Decimal(repr(value)), "f")
    if isinstance(value, Decimal):
        if value.is_nan():
            return "NaN"
        if value.is_infinite():
            return "Infinity" if value > 0 else "-Infinity"
        return format(value.normalize(), "f")
    return str(value)


@dataclasses.dataclass(frozen=True)
class HashInput:
    """Base for endpoint hash inputs; subclasses declare ``FIELD_ORDER``."""

    FIELD_ORDER: ClassVar[tuple[str, ...]] = ()

    def values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.FIELD_ORDER)

    def concatenate(self, secret_key: str) -> str:
        return "".join(canonical_string(v) for v in self.values()) + secret_key


@dataclasses.dataclass(frozen=True)
class DepositHashInput(HashInput):
    """Deposit address creation: PublicKey + Symbol + Label + ReferenceId + CallbackUrl."""

    FIELD_ORDER: ClassVar[tuple[str, ...]] = (
        "public_key",
        "symbol",
        "label",
        "reference_id",
        "callback_url",
    )

    public_key: str
    symbol: CryptoSymbol | str
    label: str
    reference_id: str
    callback_url: str


@dataclasses.dataclass(frozen=True)
class WithdrawHashInput(HashInput):
    """Withdrawal: Symbol + Amount + Address + MerchantTransactionId."""

    FIELD_ORDER: ClassVar[tuple[str, ...]] = (
        "symbol",
        "amount",
        "address",
        "merchant_transaction_id",
    )

    symbol: CryptoSymbol | str
    amount: Amount
    address: str
    merchant_transaction_id: str


@dataclasses.dataclass(frozen=True)
class VerifyStartHashInput(HashInput):
    """Address verification start: Symbol + NetworkId + Address + ReferenceId."""

    FIELD_ORDER: ClassVar[tuple[str, ...]] = (
        "symbol",
        "network_id",
        "address",
        "reference_id",
    )

    symbol: CryptoSymbol | str
    network_id: NetworkId | int
    address: str
    reference_id: str


@dataclasses.dataclass(frozen=True)
class VerifyConfirmHashInput(HashInput):
    """Verification amount confirmation: Symbol + NetworkId + Amount + ReferenceId."""

    FIELD_ORDER: ClassVar[tuple[str, ...]] = (
        "symbol",
        "network_id",
        "amount",
        "reference_id",
    )

    symbol: CryptoSymbol | str
    network_id: NetworkId | int
    amount: Amount
    reference_id: str


def compute_request_hash(record: HashInput, secret_key: str) -> str:
    """Return the lowercase hex MD5 of *record*'s fields followed by *secret_key*."""
    material = record.concatenate(secret_key)
    return hashlib.md5(material.encode("utf-8"), usedforsecurity=False).hexdigest()


def generate_deposit_hash(record: DepositHashInput, secret_key: str) -> str:
    return compute_request_hash(record, secret_key)


def generate_withdraw_hash(record: WithdrawHashInput, secret_key: str) -> str:
    return compute_request_hash(record, secret_key)


def generate_verify_start_hash(record: VerifyStartHashInput, secret_key: str) -> str:
    return compute_request_hash(record, secret_key)


def generate_verify_confirm_hash(record: VerifyConfirmHashInput, secret_key: str) -> str:
    return compute_request_hash(record, secret_key)
