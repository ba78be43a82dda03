"""Kernel value types – public re-export surface.

Modules:
  enums.py:    CryptoSymbol, FiatCurrency, NetworkId, WebhookStatus,
               Environment, ErrorCode
  envelope.py: ApiResponse
"""

from paybin.kernel.types.enums import (
    CryptoSymbol,
    Environment,
    ErrorCode,
    FiatCurrency,
    NetworkId,
    WebhookStatus,
)
from paybin.kernel.types.envelope import SUCCESS_CODE, ApiResponse

__all__ = [
    "ApiResponse",
    "CryptoSymbol",
    "Environment",
    "ErrorCode",
    "FiatCurrency",
    "NetworkId",
    "SUCCESS_CODE",
    "WebhookStatus",
]
