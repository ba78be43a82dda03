"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    PaybinError
    ├── ConfigError                  (config.py)
    │   ├── MissingRequiredSettingError
    │   └── InvalidSettingValueError
    ├── SigningError                 (signing.py)
    │   ├── KeyLoadError
    │   ├── MissingEnvironmentKeyError
    │   └── SigningKeyMissingError
    ├── WebhookPayloadError          (webhook.py)
    └── GatewayError                 (gateway.py)
        ├── UpstreamApplicationError
        └── TransportError
            └── GatewayTimeoutError
"""

from paybin.kernel.errors.base import PaybinError
from paybin.kernel.errors.config import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from paybin.kernel.errors.gateway import (
    GatewayError,
    GatewayTimeoutError,
    TransportError,
    UpstreamApplicationError,
)
from paybin.kernel.errors.signing import (
    KeyLoadError,
    MissingEnvironmentKeyError,
    SigningError,
    SigningKeyMissingError,
)
from paybin.kernel.errors.webhook import WebhookPayloadError

__all__ = [
    "ConfigError",
    "GatewayError",
    "GatewayTimeoutError",
    "InvalidSettingValueError",
    "KeyLoadError",
    "MissingEnvironmentKeyError",
    "MissingRequiredSettingError",
    "PaybinError",
    "SigningError",
    "SigningKeyMissingError",
    "TransportError",
    "UpstreamApplicationError",
    "WebhookPayloadError",
]
