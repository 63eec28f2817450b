from __future__ import annotations

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from gestao.domain.erros import (
    ErroArmazenamento,
    ErroConsultaExterna,
    ErroValidacao,
    RegistroDuplicado,
    RegistroNaoEncontrado,
)
from gestao.log import log


def erro_validacao(err: ValueError) -> HTTPException:
    """ValueError do dominio -> 422. ErroValidacao leva a lista de violacoes."""
    if isinstance(err, ErroValidacao):
        return HTTPException(status_code=422, detail=err.detalhes)
    return HTTPException(status_code=422, detail=str(err))


def registrar_handlers(app: FastAPI) -> None:
    @app.exception_handler(RegistroNaoEncontrado)
    async def _nao_encontrado(request: Request, exc: RegistroNaoEncontrado) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.mensagem})

    @app.exception_handler(RegistroDuplicado)
    async def _duplicado(request: Request, exc: RegistroDuplicado) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": exc.mensagem})

    @app.exception_handler(ErroArmazenamento)
    async def _armazenamento(request: Request, exc: ErroArmazenamento) -> JSONResponse:
        log(f"{request.method} {request.url.path}: {exc.mensagem}", nivel="ERROR")
        return JSONResponse(status_code=502, content={"detail": exc.mensagem})

    @app.exception_handler(ErroConsultaExterna)
    async def _externa(request: Request, exc: ErroConsultaExterna) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})
