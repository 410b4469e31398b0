"""Endpoint de relay dos webhooks do Alchemy Notify.

Endpoint:
- POST /{topic}: recebe a notificação e publica o corpo bruto no tópico

Fluxo:
1. Header de assinatura ausente -> 401 (corpo nem é lido)
2. Falha ao ler o corpo -> 400
3. HMAC inválido -> 401 (nada é publicado, nem no dead topic)
4. Relay (tópico do path ou dead topic) -> 200 com o message id
5. Falha também no dead topic -> 500 genérico

O 200 não distingue entrega no tópico primário de desvio para o dead
topic; a inspeção do dead topic é o mecanismo de recuperação.
"""

from __future__ import annotations

import html
import logging

from fastapi import APIRouter, Request, Response, status
from starlette.requests import ClientDisconnect

from api.connectors.alchemy.signature import is_valid_signature
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_alchemy_settings
from utils.errors import DeadLetterPublishError

logger = logging.getLogger(__name__)

router = APIRouter()


def _text_response(content: str, status_code: int = status.HTTP_200_OK) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


def _unauthorized(request: Request, reason: str) -> Response:
    logger.warning(
        "webhook_unauthorized",
        extra={
            "reason": reason,
            "path": request.scope["path"],
            "headers": sorted(request.headers.keys()),
            "correlation_id": get_correlation_id(),
        },
    )
    return _text_response("unauthorized\n", status.HTTP_401_UNAUTHORIZED)


@router.post("/{request_path:path}", response_model=None)
async def relay_webhook(request: Request) -> Response:
    """Recebe notificação assinada e publica no tópico do primeiro segmento.

    Returns:
        Response text/plain com o message id, ou erro (401/400/500).
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))

    try:
        settings = get_alchemy_settings()

        signature = request.headers.get(settings.signature_header)
        if not signature:
            return _unauthorized(request, "signature_missing")

        try:
            raw_body = await request.body()
        except ClientDisconnect:
            logger.error(
                "webhook_body_read_failed",
                extra={"path": request.scope["path"], "correlation_id": get_correlation_id()},
            )
            return _text_response("failed to read body\n", status.HTTP_400_BAD_REQUEST)

        if not is_valid_signature(raw_body, signature, request.app.state.signing_key):
            return _unauthorized(request, "signature_invalid")

        use_case = request.app.state.relay_use_case
        try:
            result = await use_case.execute(raw_body, request.scope["path"])
        except DeadLetterPublishError:
            # Detalhes já logados pelo use case; resposta não vaza o erro interno
            return _text_response(
                "failed to publish message\n",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return _text_response(html.escape(f"published message with id: {result.message_id}\n"))

    finally:
        reset_correlation_id(token)
