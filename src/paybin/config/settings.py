"""Config – PaybinSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from paybin.kernel.errors import InvalidSettingValueError
from paybin.kernel.types.enums import Environment
from paybin.security.keys import SigningKeyConfig


@dataclasses.dataclass
class PaybinSettings:
    """Client settings; ``EnvSettingsLoader`` fills them from ``PAYBIN_*`` variables.

    ``base_url`` overrides the URL implied by ``environment``. The three
    ``signature_*`` options map onto :class:`SigningKeyConfig`; leave all of
    them unset to sign only when ``PAYBIN_SIGNATURE_PRIVATE_KEY`` exists.
    """

    _prefix: ClassVar[str] = "PAYBIN"

    public_key: str
    secret_key: str = dataclasses.field(repr=False)
    environment: str = Environment.SANDBOX.value
    base_url: str | None = None
    timeout: float = 30.0
    signature_key: str | None = dataclasses.field(default=None, repr=False)
    signature_key_path: str | None = None
    signature_key_env: str | None = None
    read_retry_attempts: int = 1

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        try:
            Environment(self.environment)
        except ValueError:
            allowed = ", ".join(e.value for e in Environment)
            raise InvalidSettingValueError("environment", self.environment, f"expected one of {allowed}") from None
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        if self.read_retry_attempts < 1:
            raise InvalidSettingValueError("read_retry_attempts", self.read_retry_attempts, "must be >= 1")

    @property
    def env(self) -> Environment:
        return Environment(self.environment)

    def resolved_base_url(self) -> str:
        return (self.base_url or self.env.base_url).rstrip("/")

    def signing_config(self) -> SigningKeyConfig:
        return SigningKeyConfig(
            key=self.signature_key,
            path=self.signature_key_path,
            env=self.signature_key_env,
        )


__all__ = ["PaybinSettings"]
