"""Helpers shared by the request/response records of the endpoint groups."""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar

E = TypeVar("E", bound=Enum)


def compact(body: dict[str, Any]) -> dict[str, Any]:
    """Drop ``None`` values; absent optional fields are omitted, never sent as null."""
    return {k: v for k, v in body.items() if v is not None}


def wire(value: Any) -> Any:
    """Plain JSON value for enums (``CryptoSymbol.ETH`` → ``"ETH"``, ``NetworkId`` → int)."""
    if isinstance(value, Enum):
        return value.value
    return value


def to_decimal(value: Any, default: Decimal | None = None) -> Decimal | None:
    if value is None:
        return default
    return value if isinstance(value, Decimal) else Decimal(str(value))


def to_enum(enum_cls: type[E], value: Any) -> E | Any:
    """Member of *enum_cls* for *value*, or *value* unchanged if the gateway sent something new."""
    try:
        return enum_cls(value)
    except ValueError:
        return value


def require_wire_exact(value: Any, field: str = "Amount") -> None:
    """Reject a ``Decimal`` that would change when sent as a JSON number.

    Amounts travel as JSON numbers, which the gateway reads as doubles, while
    the request hash covers the exact digits. A ``Decimal`` with more
    precision than a double would hash one value and send another.
    """
    if isinstance(value, Decimal) and value.is_finite() and Decimal(repr(float(value))) != value:
        raise ValueError(
            f"{field} {value} has more precision than a JSON number carries; "
            f"round it (the gateway would receive {float(value)!r})"
        )
