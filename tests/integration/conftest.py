# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient

from gestao.infrastructure.duckdb_connection import aplicar_schema

os.environ.setdefault("IDEMPOTENCIA_JANELA_SEGUNDOS", "60")


@pytest.fixture(scope="session")
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com o schema aplicado. Compartilhado pela sessao:
    os testes criam os proprios registros e nao assumem tabelas vazias."""
    conn = duckdb.connect(":memory:")
    aplicar_schema(conn)
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from gestao.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    from gestao.infrastructure.config import get_settings
    get_settings.cache_clear()

    from gestao.interfaces.api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def vendedor_id(client: TestClient) -> str:
    response = client.post("/api/vendedores", json={"nome": "Carla Souza", "taxa_comissao": 5})
    assert response.status_code == 201
    return str(response.json()["id"])
