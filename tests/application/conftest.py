# tests/application/conftest.py
from __future__ import annotations

from collections.abc import Generator

import duckdb
import pytest

from gestao.infrastructure.duckdb_connection import aplicar_schema
from gestao.infrastructure.duckdb_record_store import DuckDBRecordStore


@pytest.fixture()
def conexao() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com o schema aplicado, isolado por teste."""
    conn = duckdb.connect(":memory:")
    aplicar_schema(conn)
    yield conn
    conn.close()


@pytest.fixture()
def store(conexao: duckdb.DuckDBPyConnection) -> DuckDBRecordStore:
    return DuckDBRecordStore(conexao)
