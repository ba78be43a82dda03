"""Security – RSA-SHA512 request signing.

The gateway verifies the ``X-Signature`` header against the raw request
body, so the signature must cover the exact bytes that go on the wire.
Serialize once, sign those bytes, send those bytes.
"""
from __future__ import annotations

import base64

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from paybin.kernel.errors import KeyLoadError, SigningKeyMissingError

__all__ = ["RequestSigner", "sign"]


def _as_bytes(raw_body: bytes | str) -> bytes:
    return raw_body.encode("utf-8") if isinstance(raw_body, str) else raw_body


class RequestSigner:
    """Signs request bodies with a parsed RSA private key.

    The PEM is parsed once at construction; :meth:`sign` is then a pure
    function of the body.
    """

    def __init__(self, private_key_pem: str, password: bytes | None = None) -> None:
        if not private_key_pem:
            raise SigningKeyMissingError()
        try:
            key = serialization.load_pem_private_key(private_key_pem.encode("utf-8"), password=password)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise KeyLoadError(None, "Signature private key is not a valid PEM private key", cause=exc) from exc
        if not isinstance(key, rsa.RSAPrivateKey):
            raise KeyLoadError(None, f"Signature private key must be RSA, got {type(key).__name__}")
        self._key = key

    @property
    def public_key_pem(self) -> str:
        """SubjectPublicKeyInfo PEM of the signing key, for registering with the gateway."""
        return self._key.public_key().public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode("ascii")

    def sign(self, raw_body: bytes | str) -> str:
        """Return the base64 RSA PKCS#1 v1.5 / SHA-512 signature of *raw_body*."""
        signature = self._key.sign(_as_bytes(raw_body), padding.PKCS1v15(), hashes.SHA512())
        return base64.b64encode(signature).decode("ascii")

    def __repr__(self) -> str:
        return f"RequestSigner(key_size={self._key.key_size})"


def sign(raw_body: bytes | str, private_key_pem: str | None) -> str:
    """Sign *raw_body* with *private_key_pem*.

    Raises:
        SigningKeyMissingError: no key was resolved for this client.
    """
    if not private_key_pem:
        raise SigningKeyMissingError()
    return RequestSigner(private_key_pem).sign(raw_body)
