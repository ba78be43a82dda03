"""Webhooks – HMAC-SHA256 callback signatures."""
from __future__ import annotations

import hashlib
import hmac

from paybin.observability.logging import get_logger

__all__ = [
    "SIGNATURE_HEADER",
    "WebhookSigner",
    "generate_webhook_signature",
    "verify_webhook",
]

SIGNATURE_HEADER = "X-Paybin-Signature"

logger = get_logger(__name__)


def _as_bytes(value: bytes | str) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


class WebhookSigner:
    """Signs and verifies deposit callbacks using HMAC-SHA256 over the raw body."""

    @classmethod
    def sign(cls, payload: bytes | str, secret_key: str) -> str:
        """Return the lowercase hex HMAC-SHA256 of *payload* under *secret_key*."""
        return hmac.new(_as_bytes(secret_key), _as_bytes(payload), hashlib.sha256).hexdigest()

    @classmethod
    def verify(cls, payload: bytes | str, signature: object, secret_key: str) -> bool:
        """Return ``True`` iff *signature* equals the expected hex digest exactly.

        Never raises: a missing, empty or non-string signature is a mismatch.
        """
        if not isinstance(signature, str) or not signature:
            logger.warning("webhook_signature_missing")
            return False
        expected = cls.sign(payload, secret_key)
        # TODO: switch to hmac.compare_digest once consumers accept the timing change
        valid = expected == signature
        if not valid:
            logger.warning("webhook_signature_mismatch")
        return valid


def generate_webhook_signature(payload: bytes | str, secret_key: str) -> str:
    return WebhookSigner.sign(payload, secret_key)


def verify_webhook(payload: bytes | str, signature: object, secret_key: str) -> bool:
    """Check a callback body against the value of its ``X-Paybin-Signature`` header."""
    return WebhookSigner.verify(payload, signature, secret_key)
