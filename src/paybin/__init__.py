"""
paybin – Python client for the Paybin cryptocurrency payment gateway.

Import path convention::

    from paybin import Paybin, CryptoSymbol, NetworkId
    from paybin.security import compute_request_hash, SigningKeyConfig
    from paybin.webhooks import verify_webhook, parse_deposit_webhook
    from paybin.adapters.fastapi import PaybinWebhook
"""

from paybin.client import PaybinClient
from paybin.config import PaybinSettings
from paybin.kernel.errors import (
    GatewayError,
    KeyLoadError,
    MissingEnvironmentKeyError,
    PaybinError,
    SigningKeyMissingError,
    TransportError,
    UpstreamApplicationError,
    WebhookPayloadError,
)
from paybin.kernel.types import (
    ApiResponse,
    CryptoSymbol,
    Environment,
    ErrorCode,
    FiatCurrency,
    NetworkId,
    WebhookStatus,
)
from paybin.sdk import Paybin
from paybin.security import SigningKeyConfig
from paybin.webhooks import DepositWebhookPayload, parse_deposit_webhook, verify_webhook

__version__ = "0.1.0"

__all__ = [
    "ApiResponse",
    "CryptoSymbol",
    "DepositWebhookPayload",
    "Environment",
    "ErrorCode",
    "FiatCurrency",
    "GatewayError",
    "KeyLoadError",
    "MissingEnvironmentKeyError",
    "NetworkId",
    "Paybin",
    "PaybinClient",
    "PaybinError",
    "PaybinSettings",
    "SigningKeyConfig",
    "SigningKeyMissingError",
    "TransportError",
    "UpstreamApplicationError",
    "WebhookPayloadError",
    "WebhookStatus",
    "__version__",
    "parse_deposit_webhook",
    "verify_webhook",
]
