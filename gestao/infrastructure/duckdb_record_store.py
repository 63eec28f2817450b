# gestao/infrastructure/duckdb_record_store.py
#
# Implementacao DuckDB do RecordStore.
#
# Design decisions:
#   - Nomes de tabela e coluna vem do chamador; sao validados contra
#     information_schema antes de entrar no SQL. Valores sempre por parametro.
#   - Identificadores entre aspas duplas: colunas como "tipo" ou "status"
#     nunca colidem com palavras reservadas.
#   - Uma conexao compartilhada, serializada por CONNECTION_LOCK: rotas
#     sync do FastAPI rodam em threadpool.
#   - transformar le, aplica a funcao e grava sem soltar o lock. Contadores
#     (total de vendas, comissoes) nunca perdem atualizacao concorrente.
#
# Invariants:
#   - Toda falha do DuckDB sai como ErroArmazenamento (sem retry).
#   - update/delete de id inexistente sai como RegistroNaoEncontrado.
#   - insert sem "id" gera uuid4.
from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping

import duckdb

from gestao.domain.erros import ErroArmazenamento, RegistroNaoEncontrado
from gestao.domain.record_store import Linha
from gestao.infrastructure.duckdb_connection import CONNECTION_LOCK
from gestao.log import log


class DuckDBRecordStore:
    # Compartilhado entre instancias: todas usam a mesma conexao do processo.
    _lock = CONNECTION_LOCK

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn
        self._colunas: dict[str, frozenset[str]] = {}

    def query(
        self,
        tabela: str,
        filtros: Mapping[str, object] | None = None,
        ordenar_por: str | None = None,
        decrescente: bool = True,
    ) -> list[Linha]:
        """SELECT * com igualdade por coluna; None vira IS NULL."""
        self._validar(tabela, list(filtros or {}) + ([ordenar_por] if ordenar_por else []))
        conditions: list[str] = []
        params: list[object] = []
        for coluna, valor in (filtros or {}).items():
            if valor is None:
                conditions.append(f'"{coluna}" IS NULL')
            else:
                conditions.append(f'"{coluna}" = ?')
                params.append(valor)

        where = ""
        if conditions:
            where = "WHERE " + " AND ".join(conditions)
        order = ""
        if ordenar_por:
            order = f'ORDER BY "{ordenar_por}" {"DESC" if decrescente else "ASC"} NULLS LAST'

        sql = f'SELECT * FROM "{tabela}" {where} {order}'  # noqa: S608
        with self._lock:
            try:
                cursor = self._conn.execute(sql, params)
                return self._linhas(cursor)
            except duckdb.Error as exc:
                raise self._falha("consultar", tabela, exc) from exc

    def get(self, tabela: str, registro_id: str) -> Linha | None:
        linhas = self.query(tabela, {"id": registro_id})
        return linhas[0] if linhas else None

    def insert(self, tabela: str, linha: Mapping[str, object]) -> Linha:
        dados = dict(linha)
        if not dados.get("id"):
            dados["id"] = str(uuid.uuid4())
        self._validar(tabela, list(dados))

        nomes = ", ".join(f'"{c}"' for c in dados)
        marcadores = ", ".join("?" for _ in dados)
        sql = f'INSERT INTO "{tabela}" ({nomes}) VALUES ({marcadores}) RETURNING *'  # noqa: S608
        with self._lock:
            try:
                cursor = self._conn.execute(sql, list(dados.values()))
                return self._linhas(cursor)[0]
            except duckdb.Error as exc:
                raise self._falha("inserir", tabela, exc) from exc

    def update(self, tabela: str, registro_id: str, patch: Mapping[str, object]) -> None:
        dados = {k: v for k, v in patch.items() if k != "id"}
        if not dados:
            if self.get(tabela, registro_id) is None:
                raise RegistroNaoEncontrado(tabela, registro_id)
            return
        self._validar(tabela, list(dados))

        atribuicoes = ", ".join(f'"{c}" = ?' for c in dados)
        sql = f'UPDATE "{tabela}" SET {atribuicoes} WHERE "id" = ? RETURNING "id"'  # noqa: S608
        with self._lock:
            try:
                afetados = self._conn.execute(sql, [*dados.values(), registro_id]).fetchall()
            except duckdb.Error as exc:
                raise self._falha("atualizar", tabela, exc) from exc
        if not afetados:
            raise RegistroNaoEncontrado(tabela, registro_id)

    def transformar(
        self,
        tabela: str,
        registro_id: str,
        funcao: Callable[[Linha], Mapping[str, object]],
    ) -> Linha:
        """Leitura, funcao(linha) -> patch e escrita sob o mesmo lock.

        Excecao levantada pela funcao sai sem gravar nada.
        """
        with self._lock:
            linha = self.get(tabela, registro_id)
            if linha is None:
                raise RegistroNaoEncontrado(tabela, registro_id)
            patch = dict(funcao(linha))
            self.update(tabela, registro_id, patch)
        return {**linha, **patch}

    def delete(self, tabela: str, registro_id: str) -> None:
        self._validar(tabela, [])
        sql = f'DELETE FROM "{tabela}" WHERE "id" = ? RETURNING "id"'  # noqa: S608
        with self._lock:
            try:
                afetados = self._conn.execute(sql, [registro_id]).fetchall()
            except duckdb.Error as exc:
                raise self._falha("remover", tabela, exc) from exc
        if not afetados:
            raise RegistroNaoEncontrado(tabela, registro_id)

    def _validar(self, tabela: str, colunas: list[str]) -> frozenset[str]:
        conhecidas = self._colunas.get(tabela)
        if conhecidas is None:
            with self._lock:
                rows = self._conn.execute(
                    "SELECT column_name FROM information_schema.columns WHERE table_name = ?",
                    [tabela],
                ).fetchall()
            if not rows:
                raise ErroArmazenamento(f"Tabela desconhecida: {tabela}", tabela)
            conhecidas = frozenset(str(r[0]) for r in rows)
            self._colunas[tabela] = conhecidas
        desconhecidas = [c for c in colunas if c not in conhecidas]
        if desconhecidas:
            raise ErroArmazenamento(f"Colunas desconhecidas em {tabela}: {', '.join(desconhecidas)}", tabela)
        return conhecidas

    def _linhas(self, cursor: duckdb.DuckDBPyConnection) -> list[Linha]:
        nomes = [d[0] for d in cursor.description or []]
        return [dict(zip(nomes, row, strict=True)) for row in cursor.fetchall()]

    def _falha(self, operacao: str, tabela: str, exc: duckdb.Error) -> ErroArmazenamento:
        log(f"Falha ao {operacao} em {tabela}: {exc}", nivel="ERROR")
        return ErroArmazenamento(f"Erro ao {operacao} registro em {tabela}", tabela)
