"""Security – signing key acquisition.

A client may sign its requests with an RSA private key taken from one of
three places, tried in a fixed order:

1. an inline PEM string (``SigningKeyConfig.key``),
2. a file on disk (``SigningKeyConfig.path``),
3. an environment variable (``SigningKeyConfig.env``, or
   :data:`DEFAULT_KEY_ENV` when no name is given).

Each place is a :class:`KeySource`; :func:`resolve_signing_key` walks
:data:`KEY_SOURCES` and stops at the first one that produces a key. A source
that is configured but broken raises instead of falling through.

The default environment variable is special: when nobody asked for signing
by name and it is unset, signing stays disabled instead of failing.
"""
from __future__ import annotations

import abc
import dataclasses
import os
from pathlib import Path
from typing import Mapping

from paybin.kernel.errors import KeyLoadError, MissingEnvironmentKeyError
from paybin.observability.logging import get_logger

__all__ = [
    "DEFAULT_KEY_ENV",
    "EnvironmentKeySource",
    "FileKeySource",
    "InlineKeySource",
    "KEY_SOURCES",
    "KeySource",
    "SigningKeyConfig",
    "resolve_signing_key",
]

DEFAULT_KEY_ENV = "PAYBIN_SIGNATURE_PRIVATE_KEY"

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class SigningKeyConfig:
    """Where to find the request-signing private key."""

    key: str | None = dataclasses.field(default=None, repr=False)
    path: str | os.PathLike[str] | None = None
    env: str | None = None


class KeySource(abc.ABC):
    """One place a private key can come from."""

    name: str = ""

    @abc.abstractmethod
    def resolve(self, config: SigningKeyConfig, environ: Mapping[str, str]) -> str | None:
        """Return the PEM key, ``None`` if this source does not apply, or raise."""


class InlineKeySource(KeySource):
    name = "inline"

    def resolve(self, config: SigningKeyConfig, environ: Mapping[str, str]) -> str | None:  # noqa: ARG002
        return config.key or None


class FileKeySource(KeySource):
    name = "file"

    def resolve(self, config: SigningKeyConfig, environ: Mapping[str, str]) -> str | None:  # noqa: ARG002
        if not config.path:
            return None
        path = Path(config.path)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise KeyLoadError(str(path), cause=exc) from exc


class EnvironmentKeySource(KeySource):
    name = "environment"

    def resolve(self, config: SigningKeyConfig, environ: Mapping[str, str]) -> str | None:
        variable = config.env or DEFAULT_KEY_ENV
        value = environ.get(variable)
        if value:
            return value
        if config.env:
            raise MissingEnvironmentKeyError(variable)
        return None


KEY_SOURCES: tuple[KeySource, ...] = (
    InlineKeySource(),
    FileKeySource(),
    EnvironmentKeySource(),
)


def resolve_signing_key(
    config: SigningKeyConfig | None,
    *,
    sources: tuple[KeySource, ...] = KEY_SOURCES,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Return the private key PEM for *config*, or ``None`` when signing is off.

    Raises:
        KeyLoadError: ``path`` is set but cannot be read.
        MissingEnvironmentKeyError: ``env`` names a variable that is unset.
    """
    if config is None:
        return None
    env = os.environ if environ is None else environ
    for source in sources:
        key = source.resolve(config, env)
        if key is not None:
            logger.info("signing_key_resolved", source=source.name)
            return key
    logger.info("signing_disabled", reason="default environment variable unset")
    return None
