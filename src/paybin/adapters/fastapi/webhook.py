"""FastAPI adapter – verified deposit webhook dependency.

Usage::

    from fastapi import Depends, FastAPI
    from paybin.adapters.fastapi import PaybinWebhook
    from paybin.webhooks import DepositWebhookPayload

    app = FastAPI()
    verified_webhook = PaybinWebhook(secret_key=settings.secret_key)

    @app.post("/webhook")
    async def deposit_webhook(payload: DepositWebhookPayload = Depends(verified_webhook)):
        ...
        return {"success": True}

Always answer 200 once the payload is accepted; the gateway retries
deliveries that get any other status.
"""

from fastapi import HTTPException, Request, status

from paybin.kernel.errors import WebhookPayloadError
from paybin.observability.logging import get_logger
from paybin.webhooks import SIGNATURE_HEADER, DepositWebhookPayload, parse_deposit_webhook, verify_webhook

__all__ = ["PaybinWebhook"]

logger = get_logger(__name__)


class PaybinWebhook:
    """Dependency that authenticates the raw body and returns the typed payload.

    * missing signature header → 401 ``Missing signature header``
    * signature mismatch → 401 ``Invalid signature``
    * undecodable payload → 400 ``Invalid payload format``
    """

    def __init__(self, secret_key: str, header_name: str = SIGNATURE_HEADER) -> None:
        self._secret_key = secret_key
        self._header_name = header_name

    async def __call__(self, request: Request) -> DepositWebhookPayload:
        signature = request.headers.get(self._header_name)
        if not signature:
            logger.warning("webhook_rejected", reason="missing_signature", path=request.url.path)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing signature header")

        raw = await request.body()
        if not verify_webhook(raw, signature, self._secret_key):
            logger.warning("webhook_rejected", reason="invalid_signature", path=request.url.path)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid signature")

        try:
            payload = parse_deposit_webhook(raw)
        except WebhookPayloadError as exc:
            logger.warning("webhook_rejected", reason="invalid_payload", error=exc.message)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid payload format") from exc

        logger.info(
            "webhook_accepted",
            request_id=payload.request_id,
            status=payload.status.value,
            confirmations=payload.confirmations,
        )
        return payload
