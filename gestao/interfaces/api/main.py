from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from gestao.infrastructure.config import get_settings
from gestao.interfaces.api.erros import registrar_handlers
from gestao.interfaces.api.middleware.idempotencia import IdempotenciaMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from gestao.infrastructure.duckdb_connection import get_connection
    get_connection()  # valida conexao e aplica schema no startup
    yield


app = FastAPI(
    title="Gestao Comercial API",
    debug=get_settings().debug,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(IdempotenciaMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)

registrar_handlers(app)

from gestao.interfaces.api.routes.agenda_routes import router as agenda_router  # noqa: E402
from gestao.interfaces.api.routes.cliente_routes import router as cliente_router  # noqa: E402
from gestao.interfaces.api.routes.empresa_routes import router as empresa_router  # noqa: E402
from gestao.interfaces.api.routes.financeiro_routes import router as financeiro_router  # noqa: E402
from gestao.interfaces.api.routes.moeda_routes import router as moeda_router  # noqa: E402
from gestao.interfaces.api.routes.orcamento_routes import router as orcamento_router  # noqa: E402
from gestao.interfaces.api.routes.produto_routes import router as produto_router  # noqa: E402
from gestao.interfaces.api.routes.relatorio_routes import router as relatorio_router  # noqa: E402
from gestao.interfaces.api.routes.venda_routes import router as venda_router  # noqa: E402
from gestao.interfaces.api.routes.vendedor_routes import router as vendedor_router  # noqa: E402

app.include_router(moeda_router, prefix="/api")
app.include_router(venda_router, prefix="/api")
app.include_router(orcamento_router, prefix="/api")
app.include_router(cliente_router, prefix="/api")
app.include_router(produto_router, prefix="/api")
app.include_router(agenda_router, prefix="/api")
app.include_router(vendedor_router, prefix="/api")
app.include_router(financeiro_router, prefix="/api")
app.include_router(relatorio_router, prefix="/api")
app.include_router(empresa_router, prefix="/api")
