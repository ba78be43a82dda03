"""Security – request hashes, signing key resolution and request signing."""
from paybin.security.hashing import (
    DepositHashInput,
    HashInput,
    VerifyConfirmHashInput,
    VerifyStartHashInput,
    WithdrawHashInput,
    canonical_string,
    compute_request_hash,
    generate_deposit_hash,
    generate_verify_confirm_hash,
    generate_verify_start_hash,
    generate_withdraw_hash,
)
from paybin.security.keys import (
    DEFAULT_KEY_ENV,
    EnvironmentKeySource,
    FileKeySource,
    InlineKeySource,
    KEY_SOURCES,
    KeySource,
    SigningKeyConfig,
    resolve_signing_key,
)
from paybin.security.signer import RequestSigner, sign

__all__ = [
    "DEFAULT_KEY_ENV",
    "DepositHashInput",
    "EnvironmentKeySource",
    "FileKeySource",
    "HashInput",
    "InlineKeySource",
    "KEY_SOURCES",
    "KeySource",
    "RequestSigner",
    "SigningKeyConfig",
    "VerifyConfirmHashInput",
    "VerifyStartHashInput",
    "WithdrawHashInput",
    "canonical_string",
    "compute_request_hash",
    "generate_deposit_hash",
    "generate_verify_confirm_hash",
    "generate_verify_start_hash",
    "generate_withdraw_hash",
    "resolve_signing_key",
    "sign",
]
