"""FastAPI adapter – webhook verification dependency."""
from paybin.adapters.fastapi.webhook import PaybinWebhook

__all__ = ["PaybinWebhook"]
