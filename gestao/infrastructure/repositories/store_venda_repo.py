from __future__ import annotations

from gestao.domain.record_store import Linha, RecordStore
from gestao.domain.venda.entities import Orcamento, Venda
from gestao.domain.venda.value_objects import StatusOrcamento, StatusVenda

from .conversao import (
    decimal,
    dinheiro,
    dinheiro_ou_zero,
    hidratar_todos,
    hidratar_um,
    instante,
    instante_opcional,
    inteiro,
    itens_de_json,
    itens_para_json,
    texto,
    texto_opcional,
)


class StoreVendaRepo:
    TABELA = "vendas"

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def adicionar(self, venda: Venda) -> Venda:
        return self._hidratar(self._store.insert(self.TABELA, self._linha(venda)))

    def buscar_por_id(self, venda_id: str) -> Venda | None:
        return hidratar_um(self._store.get(self.TABELA, venda_id), self._hidratar, self.TABELA)

    def listar(self, vendedor_id: str | None = None) -> list[Venda]:
        filtros = {"vendedor_id": vendedor_id} if vendedor_id else None
        linhas = self._store.query(self.TABELA, filtros, ordenar_por="data_venda")
        return hidratar_todos(linhas, self._hidratar, self.TABELA)

    def atualizar_status(self, venda_id: str, status: StatusVenda) -> None:
        self._store.update(self.TABELA, venda_id, {"status": status.value})

    def _linha(self, venda: Venda) -> Linha:
        linha: Linha = {
            "cliente_id": venda.cliente_id,
            "vendedor_id": venda.vendedor_id,
            "itens": itens_para_json(venda.itens),
            "subtotal": decimal(venda.subtotal),
            "desconto": decimal(venda.desconto),
            "total": decimal(venda.total),
            "forma_pagamento": venda.forma_pagamento,
            "parcelas": venda.parcelas,
            "observacoes": venda.observacoes,
            "status": venda.status.value,
            "data_venda": venda.data_venda,
        }
        if venda.id:
            linha["id"] = venda.id
        return linha

    def _hidratar(self, row: Linha) -> Venda:
        return Venda(
            id=str(row["id"]),
            cliente_id=str(row["cliente_id"]),
            vendedor_id=texto_opcional(row.get("vendedor_id")),
            itens=itens_de_json(row["itens"]),
            subtotal=dinheiro(row["subtotal"]),
            desconto=dinheiro_ou_zero(row.get("desconto")),
            total=dinheiro(row["total"]),
            forma_pagamento=texto(row.get("forma_pagamento")),
            parcelas=max(inteiro(row.get("parcelas"), 1), 1),
            observacoes=texto(row.get("observacoes")),
            status=StatusVenda(row["status"]),
            data_venda=instante(row["data_venda"]),
            criado_em=instante_opcional(row.get("criado_em")),
        )


class StoreOrcamentoRepo:
    TABELA = "orcamentos"

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def adicionar(self, orcamento: Orcamento) -> Orcamento:
        return self._hidratar(self._store.insert(self.TABELA, self._linha(orcamento)))

    def buscar_por_id(self, orcamento_id: str) -> Orcamento | None:
        return hidratar_um(self._store.get(self.TABELA, orcamento_id), self._hidratar, self.TABELA)

    def listar(self, vendedor_id: str | None = None) -> list[Orcamento]:
        filtros = {"vendedor_id": vendedor_id} if vendedor_id else None
        linhas = self._store.query(self.TABELA, filtros, ordenar_por="criado_em")
        return hidratar_todos(linhas, self._hidratar, self.TABELA)

    def salvar(self, orcamento: Orcamento) -> None:
        self._store.update(self.TABELA, orcamento.id, self._linha(orcamento))

    def remover(self, orcamento_id: str) -> None:
        self._store.delete(self.TABELA, orcamento_id)

    def _linha(self, orcamento: Orcamento) -> Linha:
        linha: Linha = {
            "cliente_id": orcamento.cliente_id,
            "vendedor_id": orcamento.vendedor_id,
            "itens": itens_para_json(orcamento.itens),
            "desconto": decimal(orcamento.desconto),
            "total": decimal(orcamento.total),
            "status": orcamento.status.value,
            "valido_ate": orcamento.valido_ate,
            "observacoes": orcamento.observacoes,
        }
        if orcamento.atualizado_em is not None:
            linha["atualizado_em"] = orcamento.atualizado_em
        if orcamento.id:
            linha["id"] = orcamento.id
        return linha

    def _hidratar(self, row: Linha) -> Orcamento:
        return Orcamento(
            id=str(row["id"]),
            cliente_id=str(row["cliente_id"]),
            vendedor_id=texto_opcional(row.get("vendedor_id")),
            itens=itens_de_json(row["itens"]),
            total=dinheiro(row["total"]),
            status=StatusOrcamento(row["status"]),
            valido_ate=instante(row["valido_ate"]),
            desconto=dinheiro_ou_zero(row.get("desconto")),
            observacoes=texto(row.get("observacoes")),
            criado_em=instante_opcional(row.get("criado_em")),
            atualizado_em=instante_opcional(row.get("atualizado_em")),
        )
