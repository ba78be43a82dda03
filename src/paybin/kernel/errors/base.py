"""PaybinError – root of every exception the SDK raises."""

from __future__ import annotations

from typing import Any, ClassVar


class PaybinError(Exception):
    """Base for all SDK errors.

    ``code`` is a stable slug to branch on. ``detail`` holds structured
    context that is safe to log; secrets and key material never go there.
    A ``cause`` passed in becomes ``__cause__``, so ``raise ... from exc``
    and ``cause=exc`` are interchangeable.
    """

    default_code: ClassVar[str] = "paybin_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for structured logs: error class, code, message and context."""
        out: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.detail:
            out["detail"] = self.detail
        if self.__cause__ is not None:
            out["cause"] = repr(self.__cause__)
        return out

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"


__all__ = ["PaybinError"]
