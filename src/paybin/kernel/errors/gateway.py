"""Gateway errors – everything that goes wrong between us and the Paybin API.

Application errors (the envelope says ``code != 200``) and transport errors
(no usable response at all) are kept apart so callers can apply different
retry policies to them.
"""

from __future__ import annotations

from typing import Any

from paybin.kernel.errors.base import PaybinError
from paybin.kernel.types.enums import ErrorCode


class GatewayError(PaybinError):
    """Base class for failures talking to the gateway."""

    default_code = "gateway_error"

    @property
    def is_transient(self) -> bool:
        return False


class UpstreamApplicationError(GatewayError):
    """The gateway answered, but its envelope carries a non-200 code."""

    default_code = "upstream_application_error"

    def __init__(
        self,
        message: str,
        *,
        gateway_code: int | str,
        http_status: int,
        endpoint: str | None = None,
        response: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            detail={
                "gateway_code": gateway_code,
                "http_status": http_status,
                "endpoint": endpoint,
            },
            **kwargs,
        )
        self.gateway_code = gateway_code
        self.http_status = http_status
        self.endpoint = endpoint
        self.response = response

    @property
    def error_code(self) -> ErrorCode | None:
        """The documented Z-code, when the gateway returned one we know."""
        return ErrorCode.parse(self.gateway_code)

    @property
    def is_transient(self) -> bool:
        code = self.error_code
        return code is not None and code.transient


class TransportError(GatewayError):
    """No response was received (connection refused, DNS, reset, ...)."""

    default_code = "transport_failure"

    def __init__(self, message: str = "No response received from server", *, endpoint: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, detail={"endpoint": endpoint}, **kwargs)
        self.endpoint = endpoint

    @property
    def is_transient(self) -> bool:
        return True


class GatewayTimeoutError(TransportError):
    """The request exceeded the configured timeout."""

    default_code = "gateway_timeout"


__all__ = [
    "GatewayError",
    "GatewayTimeoutError",
    "TransportError",
    "UpstreamApplicationError",
]
