"""Webhooks – callback signature verification and payload decoding."""
from paybin.webhooks.payload import DepositWebhookPayload, parse_deposit_webhook
from paybin.webhooks.signature import (
    SIGNATURE_HEADER,
    WebhookSigner,
    generate_webhook_signature,
    verify_webhook,
)

__all__ = [
    "DepositWebhookPayload",
    "SIGNATURE_HEADER",
    "WebhookSigner",
    "generate_webhook_signature",
    "parse_deposit_webhook",
    "verify_webhook",
]
