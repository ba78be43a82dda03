"""Signing errors – private key acquisition and request signing failures.

All of these are fatal: they surface at client construction (or, for
:class:`SigningKeyMissingError`, on a programming error) and are never
retried.
"""

from __future__ import annotations

from typing import Any

from paybin.kernel.errors.base import PaybinError


class SigningError(PaybinError):
    """Request signing could not be set up or performed."""

    default_code = "signing_error"


class KeyLoadError(SigningError):
    """The configured private key file is missing, unreadable or not a valid key."""

    default_code = "key_load_failure"

    def __init__(self, path: str | None, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Failed to read signature private key from path: {path}",
            detail={"path": path} if path else None,
            **kwargs,
        )
        self.path = path


class MissingEnvironmentKeyError(SigningError):
    """An explicitly named environment variable holding the key is not set."""

    default_code = "missing_environment_key"

    def __init__(self, variable: str, **kwargs: Any) -> None:
        super().__init__(
            f"Environment variable {variable} is not set",
            detail={"variable": variable},
            **kwargs,
        )
        self.variable = variable


class SigningKeyMissingError(SigningError):
    """The signer was invoked although no private key was resolved."""

    default_code = "signing_key_missing"

    def __init__(self, message: str = "Signature private key is not configured", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "KeyLoadError",
    "MissingEnvironmentKeyError",
    "SigningError",
    "SigningKeyMissingError",
]
