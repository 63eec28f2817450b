from __future__ import annotations

import duckdb

from gestao.infrastructure.duckdb_connection import CONNECTION_LOCK

TABELAS_CONTADAS = (
    "clientes",
    "produtos",
    "servicos",
    "vendas",
    "orcamentos",
    "visitas",
    "manutencoes",
    "vendedores",
    "transacoes_financeiras",
)


class DuckDBStatsRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def obter_stats(self) -> dict[str, int]:
        """Contagem de registros por tabela."""
        return {tabela: self._contar(tabela) for tabela in TABELAS_CONTADAS}

    def _contar(self, tabela: str) -> int:
        # Tabela vem de TABELAS_CONTADAS, nunca de input do usuario
        with CONNECTION_LOCK:
            row = self._conn.execute(f'SELECT count(*) FROM "{tabela}"').fetchone()  # noqa: S608
        return int(row[0]) if row else 0
