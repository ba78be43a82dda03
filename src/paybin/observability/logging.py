"""Observability – structlog setup, secret redaction and ``get_logger``.

The SDK only emits events; it never configures logging on import. Call
:func:`configure_logging` once in the application if you want the SDK's
events rendered as JSON with credentials masked.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

# Compared after lower-casing and dropping ``-`` and ``_``, so ``X-Api-Key``,
# ``x_api_key`` and ``xApiKey`` all match ``xapikey``.
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "secretkey",
        "xapikey",
        "apikey",
        "hash",
        "signature",
        "xsignature",
        "xpaybinsignature",
        "privatekey",
        "signaturekey",
        "tfacode",
        "email",
    }
)

_PEM_MARKER = "PRIVATE KEY-----"


def _normalize(key: str) -> str:
    return key.lower().replace("-", "").replace("_", "")


class SensitiveFieldsFilter:
    """structlog processor masking credentials in event dicts.

    Keys are matched by normalized name at any depth, inside dicts and
    lists. Any string that looks like a PEM private key is masked
    wherever it appears.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS
        self._fields = frozenset(_normalize(f) for f in fields)

    def is_sensitive(self, key: str) -> bool:
        return _normalize(key) in self._fields

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        """Mask top-level keys only."""
        return {k: self.REDACTED if self.is_sensitive(k) else v for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: self.REDACTED if self.is_sensitive(k) else self._scrub(v) for k, v in data.items()}

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_deep(value)
        if isinstance(value, (list, tuple)):
            return type(value)(self._scrub(v) for v in value)
        if isinstance(value, str) and _PEM_MARKER in value:
            return self.REDACTED
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


def configure_logging(
    level: int = logging.INFO,
    *,
    json: bool = True,
    sensitive_fields: frozenset[str] | None = None,
) -> None:
    """Send structlog events through the stdlib root logger.

    Redaction runs right after context variables are merged, so bound
    context is masked too and no renderer or handler sees a secret.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        SensitiveFieldsFilter(sensitive_fields),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """structlog logger for *name*, pre-bound to *initial_values*."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "SensitiveFieldsFilter",
    "configure_logging",
    "get_logger",
]
