from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field

from gestao.domain.dinheiro.formatacao import formatar_moeda
from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.venda.carrinho import ResultadoAgregado
from gestao.domain.venda.entities import ItemLinha, Orcamento, Venda
from gestao.domain.venda.value_objects import StatusOrcamento, TipoItem

from .moeda_dto import ValorMonetario, valor_str
from .tempo import InstanteLocal


class ItemLinhaIn(BaseModel):
    tipo: TipoItem
    item_id: str = Field(min_length=1)
    nome: str
    preco_unitario: ValorMonetario
    quantidade: int = Field(default=1, ge=1)

    def to_domain(self) -> ItemLinha:
        return ItemLinha(
            tipo=self.tipo,
            item_id=self.item_id,
            nome=self.nome,
            preco_unitario=Dinheiro.de(self.preco_unitario),
            quantidade=self.quantidade,
        )


class ItemLinhaDTO(BaseModel):
    tipo: str
    item_id: str
    nome: str
    preco_unitario: str
    quantidade: int
    total: str

    @classmethod
    def from_domain(cls, item: ItemLinha) -> ItemLinhaDTO:
        return cls(
            tipo=item.tipo.value,
            item_id=item.item_id,
            nome=item.nome,
            preco_unitario=valor_str(item.preco_unitario),
            quantidade=item.quantidade,
            total=valor_str(item.total),
        )


class CalcularRequest(BaseModel):
    itens: list[ItemLinhaIn]
    desconto: ValorMonetario = Decimal("0")


class AgregadoDTO(BaseModel):
    subtotal: str
    subtotal_formatado: str
    desconto: str
    total: str
    total_formatado: str
    valido: bool
    avisos: list[str]

    @classmethod
    def from_domain(cls, resultado: ResultadoAgregado) -> AgregadoDTO:
        return cls(
            subtotal=valor_str(resultado.subtotal),
            subtotal_formatado=formatar_moeda(resultado.subtotal),
            desconto=valor_str(resultado.desconto),
            total=valor_str(resultado.total),
            total_formatado=formatar_moeda(resultado.total),
            valido=resultado.valido,
            avisos=[a.mensagem for a in resultado.avisos],
        )


class VendaCreateRequest(BaseModel):
    cliente_id: str = Field(min_length=1)
    vendedor_id: str | None = None
    itens: list[ItemLinhaIn] = Field(min_length=1)
    desconto: ValorMonetario = Decimal("0")
    forma_pagamento: str = Field(min_length=1)
    parcelas: int = Field(default=1, ge=1)
    observacoes: str = ""


class VendaDTO(BaseModel):
    id: str
    cliente_id: str
    vendedor_id: str | None
    itens: list[ItemLinhaDTO]
    subtotal: str
    desconto: str
    total: str
    total_formatado: str
    forma_pagamento: str
    parcelas: int
    observacoes: str
    status: str
    data_venda: str

    @classmethod
    def from_domain(cls, venda: Venda) -> VendaDTO:
        return cls(
            id=venda.id,
            cliente_id=venda.cliente_id,
            vendedor_id=venda.vendedor_id,
            itens=[ItemLinhaDTO.from_domain(i) for i in venda.itens],
            subtotal=valor_str(venda.subtotal),
            desconto=valor_str(venda.desconto),
            total=valor_str(venda.total),
            total_formatado=formatar_moeda(venda.total),
            forma_pagamento=venda.forma_pagamento,
            parcelas=venda.parcelas,
            observacoes=venda.observacoes,
            status=venda.status.value,
            data_venda=venda.data_venda.isoformat(),
        )


class TotaisVendasDTO(BaseModel):
    quantidade: int
    receita: str
    receita_formatada: str


class VendaListaDTO(BaseModel):
    vendas: list[VendaDTO]
    totais: TotaisVendasDTO


class OrcamentoCreateRequest(BaseModel):
    cliente_id: str = Field(min_length=1)
    vendedor_id: str | None = None
    itens: list[ItemLinhaIn] = Field(min_length=1)
    desconto: ValorMonetario = Decimal("0")
    status: StatusOrcamento = StatusOrcamento.RASCUNHO
    valido_ate: InstanteLocal | None = None
    observacoes: str = ""


class OrcamentoPatchRequest(BaseModel):
    itens: Annotated[list[ItemLinhaIn], Field(min_length=1)] | None = None
    desconto: ValorMonetario | None = None
    status: StatusOrcamento | None = None
    valido_ate: InstanteLocal | None = None
    observacoes: str | None = None


class OrcamentoDTO(BaseModel):
    id: str
    cliente_id: str
    vendedor_id: str | None
    itens: list[ItemLinhaDTO]
    desconto: str
    total: str
    total_formatado: str
    status: str
    valido_ate: str
    expirado: bool
    observacoes: str

    @classmethod
    def from_domain(cls, orcamento: Orcamento, referencia: datetime) -> OrcamentoDTO:
        return cls(
            id=orcamento.id,
            cliente_id=orcamento.cliente_id,
            vendedor_id=orcamento.vendedor_id,
            itens=[ItemLinhaDTO.from_domain(i) for i in orcamento.itens],
            desconto=valor_str(orcamento.desconto),
            total=valor_str(orcamento.total),
            total_formatado=formatar_moeda(orcamento.total),
            status=orcamento.status.value,
            valido_ate=orcamento.valido_ate.isoformat(),
            expirado=orcamento.expirado(referencia),
            observacoes=orcamento.observacoes,
        )
