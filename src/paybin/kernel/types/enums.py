"""Gateway enumerations – symbols, networks, currencies, status and error codes."""
from __future__ import annotations

from enum import Enum, IntEnum

__all__ = [
    "CryptoSymbol",
    "Environment",
    "ErrorCode",
    "FiatCurrency",
    "NetworkId",
    "WebhookStatus",
]


class CryptoSymbol(str, Enum):
    BTC = "BTC"
    ETH = "ETH"
    LTC = "LTC"
    USDT = "USDT"
    USDC = "USDC"
    BNB = "BNB"
    TRX = "TRX"


class FiatCurrency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    TRY = "TRY"
    GBP = "GBP"


class NetworkId(IntEnum):
    """Blockchain network identifiers as numbered by the gateway."""

    BitcoinMainnet = 1
    LitecoinMainnet = 2
    EthereumMainnet = 3
    BinanceSmartChain = 4
    OptimismMainnet = 5
    TronMainnet = 6


class WebhookStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class Environment(str, Enum):
    """Gateway deployment a client talks to."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def base_url(self) -> str:
        if self is Environment.PRODUCTION:
            return "https://gateway.paybin.io"
        return "https://sandbox.paybin.io"


class ErrorCode(Enum):
    """Application error codes carried in the response envelope.

    Each member knows its documented description and whether the failure
    is worth retrying once the underlying condition clears.
    """

    Z100 = ("Z100", "An error occurred", True)
    Z200 = ("Z200", "Invalid credentials")
    Z202 = ("Z202", "Invalid TFA code")
    Z204 = ("Z204", "Invalid fingerprint/hash")
    Z206 = ("Z206", "Account blocked")
    Z300 = ("Z300", "Invalid symbol")
    Z400 = ("Z400", "Blockchain network error", True)
    Z500 = ("Z500", "No wallet configured")
    Z501 = ("Z501", "Already executed")
    Z502 = ("Z502", "Duplicate reference ID")
    Z503 = ("Z503", "Duplicate reference ID")
    Z504 = ("Z504", "Duplicate reference ID")
    Z507 = ("Z507", "Amount insufficient")
    Z509 = ("Z509", "Awaiting email approval")
    Z511 = ("Z511", "Invalid address")
    Z513 = ("Z513", "Insufficient balance")
    Z514 = ("Z514", "Insufficient balance")
    Z519 = ("Z519", "Duplicate request")
    Z529 = ("Z529", "SMS verification needed")
    Z531 = ("Z531", "Invalid SMS code")
    Z533 = ("Z533", "IP not whitelisted")
    Z540 = ("Z540", "Address limit reached")
    Z600 = ("Z600", "Invalid parameters")
    Z700 = ("Z700", "CAPTCHA required")
    Z800 = ("Z800", "Invalid body hash")
    Z900 = ("Z900", "Token expired")

    def __new__(cls, code: str, description: str, transient: bool = False) -> "ErrorCode":
        member = object.__new__(cls)
        member._value_ = code
        member.description = description
        member.transient = transient
        return member

    @classmethod
    def parse(cls, value: object) -> "ErrorCode | None":
        """Return the member for *value* (e.g. ``"Z204"``) or ``None``."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None
