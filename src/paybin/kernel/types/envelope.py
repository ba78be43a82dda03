"""Response envelope returned by every gateway endpoint."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Mapping, TypeVar

T = TypeVar("T")
U = TypeVar("U")

SUCCESS_CODE = 200


@dataclasses.dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """``{apiVersion, data, code, message}`` with ``data`` decoded to ``T``."""

    api_version: str
    data: T | None
    code: int | str
    message: str
    raw: Mapping[str, Any] = dataclasses.field(default_factory=dict, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ApiResponse[Any]":
        return cls(
            api_version=str(payload.get("apiVersion", "")),
            data=payload.get("data"),
            code=payload.get("code", 0),
            message=str(payload.get("message", "")),
            raw=dict(payload),
        )

    def map(self, decoder: Callable[[Any], U]) -> "ApiResponse[U]":
        """Return a copy whose ``data`` went through *decoder* (``None`` stays ``None``)."""
        data = decoder(self.data) if self.data is not None else None
        return ApiResponse(
            api_version=self.api_version,
            data=data,
            code=self.code,
            message=self.message,
            raw=self.raw,
        )


__all__ = ["ApiResponse", "SUCCESS_CODE"]
