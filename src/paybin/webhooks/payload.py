"""Webhooks – typed deposit callback payload.

:func:`parse_deposit_webhook` only decodes. It does not authenticate; call
:func:`paybin.webhooks.verify_webhook` on the raw body first and trust the
parsed result only when that returned ``True``.
"""
from __future__ import annotations

import dataclasses
import json
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from paybin.kernel.errors import WebhookPayloadError
from paybin.kernel.types.enums import CryptoSymbol, WebhookStatus

__all__ = ["DepositWebhookPayload", "parse_deposit_webhook"]


def _symbol(value: Any) -> CryptoSymbol | str:
    try:
        return CryptoSymbol(value)
    except ValueError:
        return str(value)


def _decimal(value: Any, field: str) -> Decimal:
    try:
        return value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise WebhookPayloadError(f"Webhook field '{field}' is not a number: {value!r}", cause=exc) from exc


@dataclasses.dataclass(frozen=True)
class DepositWebhookPayload:
    """A deposit status notification pushed by the gateway."""

    request_id: str
    symbol: CryptoSymbol | str
    amount: Decimal
    transaction_id: str
    status: WebhookStatus
    confirmations: int
    timestamp: str
    reference_id: str | None = None

    @property
    def is_confirmed(self) -> bool:
        return self.status is WebhookStatus.CONFIRMED

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DepositWebhookPayload":
        tx_id = data.get("txId", data.get("transactionId"))
        required = {
            "requestId": data.get("requestId"),
            "symbol": data.get("symbol"),
            "amount": data.get("amount"),
            "txId": tx_id,
            "status": data.get("status"),
            "timestamp": data.get("timestamp"),
        }
        missing = sorted(k for k, v in required.items() if v is None)
        if missing:
            raise WebhookPayloadError(
                f"Webhook payload is missing fields: {', '.join(missing)}",
                detail={"missing": missing},
            )
        try:
            status = WebhookStatus(data["status"])
        except ValueError as exc:
            raise WebhookPayloadError(f"Unknown webhook status {data['status']!r}", cause=exc) from exc
        try:
            confirmations = int(data.get("confirmations", 0))
        except (TypeError, ValueError) as exc:
            raise WebhookPayloadError("Webhook field 'confirmations' is not an integer", cause=exc) from exc
        reference_id = data.get("referenceId")
        return cls(
            request_id=str(data["requestId"]),
            symbol=_symbol(data["symbol"]),
            amount=_decimal(data["amount"], "amount"),
            transaction_id=str(tx_id),
            status=status,
            confirmations=confirmations,
            timestamp=str(data["timestamp"]),
            reference_id=str(reference_id) if reference_id is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Wire-shaped dict (camelCase keys, ``referenceId`` only when set)."""
        out: dict[str, Any] = {
            "requestId": self.request_id,
            "symbol": self.symbol.value if isinstance(self.symbol, CryptoSymbol) else self.symbol,
            "amount": self.amount,
            "txId": self.transaction_id,
            "status": self.status.value,
            "confirmations": self.confirmations,
            "timestamp": self.timestamp,
        }
        if self.reference_id is not None:
            out["referenceId"] = self.reference_id
        return out


def parse_deposit_webhook(
    payload: str | bytes | Mapping[str, Any] | DepositWebhookPayload,
) -> DepositWebhookPayload:
    """Normalize a raw body or an already decoded mapping into a payload record.

    Raises:
        WebhookPayloadError: the body is not JSON, not an object, or lacks
            required fields.
    """
    if isinstance(payload, DepositWebhookPayload):
        return payload
    if isinstance(payload, (str, bytes)):
        try:
            decoded = json.loads(payload, parse_float=Decimal)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise WebhookPayloadError("Webhook payload is not valid JSON", cause=exc) from exc
    else:
        decoded = payload
    if not isinstance(decoded, Mapping):
        raise WebhookPayloadError("Webhook payload must be a JSON object")
    return DepositWebhookPayload.from_dict(decoded)
