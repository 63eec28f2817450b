from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from gestao.domain.dinheiro.value_objects import ZERO, Dinheiro

from .value_objects import StatusOrcamento, StatusVenda, TipoItem


@dataclass(frozen=True)
class ItemLinha:
    """Produto ou servico dentro de uma venda/orcamento. total e sempre derivado."""

    tipo: TipoItem
    item_id: str
    nome: str
    preco_unitario: Dinheiro
    quantidade: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.quantidade, bool) or not isinstance(self.quantidade, int):
            raise TypeError("Quantidade deve ser inteira")
        if self.quantidade <= 0:
            raise ValueError("Quantidade deve ser positiva")
        if self.preco_unitario.negativo:
            raise ValueError("Preco unitario nao pode ser negativo")

    @property
    def chave(self) -> tuple[TipoItem, str]:
        return (self.tipo, self.item_id)

    @property
    def total(self) -> Dinheiro:
        return self.preco_unitario * self.quantidade


@dataclass(frozen=True)
class Venda:
    id: str
    cliente_id: str
    vendedor_id: str | None
    itens: tuple[ItemLinha, ...]
    subtotal: Dinheiro
    desconto: Dinheiro
    total: Dinheiro
    forma_pagamento: str
    parcelas: int
    observacoes: str
    status: StatusVenda
    data_venda: datetime
    criado_em: datetime | None = None
    cliente_nome: str | None = None

    @property
    def concluida(self) -> bool:
        return self.status == StatusVenda.CONCLUIDA


@dataclass(frozen=True)
class Orcamento:
    id: str
    cliente_id: str
    vendedor_id: str | None
    itens: tuple[ItemLinha, ...]
    total: Dinheiro
    status: StatusOrcamento
    valido_ate: datetime
    desconto: Dinheiro = ZERO
    observacoes: str = ""
    criado_em: datetime | None = None
    atualizado_em: datetime | None = None

    def expirado(self, referencia: datetime) -> bool:
        """Puro: recebe a referencia, nunca chama datetime.now()."""
        return self.valido_ate < referencia
