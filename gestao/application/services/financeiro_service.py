from __future__ import annotations

from datetime import date, datetime

from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.financeiro.entities import Transacao
from gestao.domain.financeiro.repository import TransacaoRepository
from gestao.domain.financeiro.resumo import ResumoFinanceiro, calcular_resumo, filtrar_transacoes
from gestao.domain.financeiro.value_objects import TipoTransacao


class FinanceiroService:
    """Caixa: lista plana de lancamentos, agregada na leitura."""

    def __init__(self, repo: TransacaoRepository) -> None:
        self._repo = repo

    def registrar(
        self,
        tipo: TipoTransacao,
        categoria: str,
        valor: Dinheiro,
        forma_pagamento: str,
        descricao: str = "",
        data: datetime | None = None,
        referencia_id: str | None = None,
        referencia_tipo: str | None = None,
        vendedor_id: str | None = None,
    ) -> Transacao:
        return self._repo.adicionar(
            Transacao(
                id="",
                tipo=tipo,
                categoria=categoria.strip(),
                descricao=descricao,
                valor=valor,
                data=data or datetime.now(),
                forma_pagamento=forma_pagamento,
                referencia_id=referencia_id,
                referencia_tipo=referencia_tipo,
                vendedor_id=vendedor_id,
            )
        )

    def listar(
        self,
        inicio: datetime | None = None,
        fim: datetime | None = None,
        tipo: TipoTransacao | None = None,
        categoria: str | None = None,
    ) -> list[Transacao]:
        return filtrar_transacoes(self._repo.listar(), inicio, fim, tipo, categoria)

    def resumo(self, hoje: date | None = None) -> ResumoFinanceiro:
        return calcular_resumo(self._repo.listar(), hoje or date.today())

    def remover(self, transacao_id: str) -> None:
        self._repo.remover(transacao_id)
