"""Unit tests – deposit webhook payload decoding."""
from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

import pytest

from paybin.kernel.errors import WebhookPayloadError
from paybin.kernel.types import CryptoSymbol, WebhookStatus
from paybin.webhooks import DepositWebhookPayload, parse_deposit_webhook


def _payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "requestId": "req-1",
        "symbol": "ETH",
        "amount": "0.5",
        "txId": "0xdead",
        "status": "confirmed",
        "confirmations": 12,
        "timestamp": "2024-01-01T00:00:00Z",
    }
    data.update(overrides)
    return data


class TestParseDepositWebhook:
    def test_parses_json_string(self) -> None:
        payload = parse_deposit_webhook(json.dumps(_payload(referenceId="ORDER-1")))
        assert payload.request_id == "req-1"
        assert payload.symbol is CryptoSymbol.ETH
        assert payload.amount == Decimal("0.5")
        assert payload.transaction_id == "0xdead"
        assert payload.status is WebhookStatus.CONFIRMED
        assert payload.confirmations == 12
        assert payload.reference_id == "ORDER-1"
        assert payload.is_confirmed

    def test_parses_bytes(self) -> None:
        assert parse_deposit_webhook(json.dumps(_payload()).encode()).request_id == "req-1"

    def test_json_float_amount_kept_exact(self) -> None:
        payload = parse_deposit_webhook('{"requestId":"r","symbol":"BTC","amount":0.00004912,'
                                        '"txId":"t","status":"pending","timestamp":"t"}')
        assert payload.amount == Decimal("0.00004912")
        assert payload.confirmations == 0
        assert not payload.is_confirmed

    def test_accepts_mapping_and_existing_record(self) -> None:
        record = parse_deposit_webhook(_payload())
        assert parse_deposit_webhook(record) is record

    def test_transaction_id_alias(self) -> None:
        data = _payload()
        del data["txId"]
        data["transactionId"] = "0xbeef"
        assert parse_deposit_webhook(data).transaction_id == "0xbeef"

    def test_unknown_symbol_kept_as_string(self) -> None:
        assert parse_deposit_webhook(_payload(symbol="DOGE")).symbol == "DOGE"

    def test_reference_id_optional(self) -> None:
        assert parse_deposit_webhook(_payload()).reference_id is None


class TestInvalidPayloads:
    def test_not_json(self) -> None:
        with pytest.raises(WebhookPayloadError):
            parse_deposit_webhook("not json")

    def test_not_an_object(self) -> None:
        with pytest.raises(WebhookPayloadError):
            parse_deposit_webhook("[1, 2]")

    def test_missing_fields_listed(self) -> None:
        data = _payload()
        del data["requestId"]
        del data["status"]
        with pytest.raises(WebhookPayloadError) as exc_info:
            parse_deposit_webhook(data)
        assert exc_info.value.detail["missing"] == ["requestId", "status"]

    def test_unknown_status(self) -> None:
        with pytest.raises(WebhookPayloadError):
            parse_deposit_webhook(_payload(status="reversed"))

    def test_non_numeric_amount(self) -> None:
        with pytest.raises(WebhookPayloadError):
            parse_deposit_webhook(_payload(amount="lots"))

    def test_non_integer_confirmations(self) -> None:
        with pytest.raises(WebhookPayloadError):
            parse_deposit_webhook(_payload(confirmations="many"))


class TestToDict:
    def test_wire_shape(self) -> None:
        out = DepositWebhookPayload.from_dict(_payload()).to_dict()
        assert out["symbol"] == "ETH"
        assert out["status"] == "confirmed"
        assert out["txId"] == "0xdead"
        assert "referenceId" not in out

    def test_from_dict_of_to_dict_is_identity(self) -> None:
        record = DepositWebhookPayload.from_dict(_payload(referenceId="R"))
        assert DepositWebhookPayload.from_dict(record.to_dict()) == record
