from __future__ import annotations

from pydantic import BaseModel, Field

from gestao.domain.dinheiro.formatacao import formatar_moeda
from gestao.domain.financeiro.entities import Transacao
from gestao.domain.financeiro.resumo import ResumoFinanceiro
from gestao.domain.financeiro.value_objects import TipoTransacao

from .moeda_dto import PrecoMonetario, valor_str
from .tempo import InstanteLocal


class TransacaoCreateRequest(BaseModel):
    tipo: TipoTransacao
    categoria: str = Field(min_length=1)
    descricao: str = ""
    valor: PrecoMonetario
    data: InstanteLocal | None = None
    forma_pagamento: str = Field(min_length=1)
    referencia_id: str | None = None
    referencia_tipo: str | None = None
    vendedor_id: str | None = None


class TransacaoDTO(BaseModel):
    id: str
    tipo: str
    categoria: str
    descricao: str
    valor: str
    valor_formatado: str
    data: str
    forma_pagamento: str
    referencia_id: str | None
    referencia_tipo: str | None
    vendedor_id: str | None

    @classmethod
    def from_domain(cls, transacao: Transacao) -> TransacaoDTO:
        return cls(
            id=transacao.id,
            tipo=transacao.tipo.value,
            categoria=transacao.categoria,
            descricao=transacao.descricao,
            valor=valor_str(transacao.valor),
            valor_formatado=formatar_moeda(transacao.valor),
            data=transacao.data.isoformat(),
            forma_pagamento=transacao.forma_pagamento,
            referencia_id=transacao.referencia_id,
            referencia_tipo=transacao.referencia_tipo,
            vendedor_id=transacao.vendedor_id,
        )


class ResumoFinanceiroDTO(BaseModel):
    total_entradas: str
    total_saidas: str
    saldo: str
    saldo_formatado: str
    transacoes_hoje: int
    maiores_entradas: list[TransacaoDTO]
    maiores_saidas: list[TransacaoDTO]

    @classmethod
    def from_domain(cls, resumo: ResumoFinanceiro) -> ResumoFinanceiroDTO:
        return cls(
            total_entradas=valor_str(resumo.total_entradas),
            total_saidas=valor_str(resumo.total_saidas),
            saldo=valor_str(resumo.saldo),
            saldo_formatado=formatar_moeda(resumo.saldo),
            transacoes_hoje=resumo.transacoes_hoje,
            maiores_entradas=[TransacaoDTO.from_domain(t) for t in resumo.maiores_entradas],
            maiores_saidas=[TransacaoDTO.from_domain(t) for t in resumo.maiores_saidas],
        )
