"""HTTP adapter – async httpx transport and transport-level retry."""
from paybin.adapters.http.client import HttpxTransport
from paybin.adapters.http.retry import TransportRetryPolicy

__all__ = ["HttpxTransport", "TransportRetryPolicy"]
