from __future__ import annotations

from gestao.domain.financeiro.entities import Transacao
from gestao.domain.financeiro.value_objects import TipoTransacao
from gestao.domain.record_store import Linha, RecordStore

from .conversao import decimal, dinheiro, hidratar_todos, instante, instante_opcional, texto, texto_opcional

TABELA = "transacoes_financeiras"


class StoreTransacaoRepo:
    """Lista plana de lancamentos: append e delete, agregacao na leitura."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def adicionar(self, transacao: Transacao) -> Transacao:
        return self._hidratar(self._store.insert(TABELA, self._linha(transacao)))

    def listar(self) -> list[Transacao]:
        linhas = self._store.query(TABELA, ordenar_por="data_transacao")
        return hidratar_todos(linhas, self._hidratar, TABELA)

    def remover(self, transacao_id: str) -> None:
        self._store.delete(TABELA, transacao_id)

    def _linha(self, transacao: Transacao) -> Linha:
        linha: Linha = {
            "tipo": transacao.tipo.value,
            "categoria": transacao.categoria,
            "descricao": transacao.descricao,
            "valor": decimal(transacao.valor),
            "data_transacao": transacao.data,
            "forma_pagamento": transacao.forma_pagamento,
            "referencia_id": transacao.referencia_id,
            "referencia_tipo": transacao.referencia_tipo,
            "vendedor_id": transacao.vendedor_id,
        }
        if transacao.id:
            linha["id"] = transacao.id
        return linha

    def _hidratar(self, row: Linha) -> Transacao:
        return Transacao(
            id=str(row["id"]),
            tipo=TipoTransacao(row["tipo"]),
            categoria=str(row["categoria"]),
            descricao=texto(row.get("descricao")),
            valor=dinheiro(row["valor"]),
            data=instante(row["data_transacao"]),
            forma_pagamento=texto(row.get("forma_pagamento")),
            referencia_id=texto_opcional(row.get("referencia_id")),
            referencia_tipo=texto_opcional(row.get("referencia_tipo")),
            vendedor_id=texto_opcional(row.get("vendedor_id")),
            criado_em=instante_opcional(row.get("criado_em")),
        )
