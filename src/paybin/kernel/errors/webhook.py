"""Webhook payload errors."""
from __future__ import annotations

from paybin.kernel.errors.base import PaybinError


class WebhookPayloadError(PaybinError):
    """A webhook body could not be decoded into a deposit payload."""

    default_code = "invalid_webhook_payload"


__all__ = ["WebhookPayloadError"]
