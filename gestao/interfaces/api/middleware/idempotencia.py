from __future__ import annotations

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from gestao.infrastructure.config import get_settings

HEADER = "Idempotency-Key"


class IdempotenciaMiddleware(BaseHTTPMiddleware):
    """Protecao contra duplo envio de formulario.

    POST com Idempotency-Key ja visto dentro da janela (em andamento ou
    concluido) recebe 409 e nao chega ao store. Resposta de erro (>= 400)
    ou excecao da rota libera a chave para reenvio.
    """

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._chaves: dict[str, float] = {}

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        janela = get_settings().idempotencia_janela_segundos

        # 0 = desligado
        if janela == 0 or request.method != "POST":
            return await call_next(request)

        chave = request.headers.get(HEADER)
        if not chave:
            return await call_next(request)

        agora = time.monotonic()

        # Limpar chaves expiradas
        self._chaves = {k: t for k, t in self._chaves.items() if agora - t < janela}

        if chave in self._chaves:
            return Response(
                content='{"detail": "Requisicao duplicada. Aguarde o processamento anterior."}',
                status_code=409,
                media_type="application/json",
            )

        self._chaves[chave] = agora
        try:
            response = await call_next(request)
        except Exception:
            self._chaves.pop(chave, None)
            raise
        if response.status_code >= 400:
            self._chaves.pop(chave, None)
        return response
