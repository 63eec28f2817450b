"""Resumo do caixa. Funcoes puras sobre a lista de transacoes, sem IO."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime

from gestao.domain.dinheiro.value_objects import Dinheiro

from .entities import Transacao
from .value_objects import TipoTransacao

_TOP_N = 5


@dataclass(frozen=True)
class ResumoFinanceiro:
    total_entradas: Dinheiro
    total_saidas: Dinheiro
    transacoes_hoje: int
    maiores_entradas: tuple[Transacao, ...]
    maiores_saidas: tuple[Transacao, ...]

    @property
    def saldo(self) -> Dinheiro:
        return self.total_entradas - self.total_saidas


def calcular_resumo(transacoes: Sequence[Transacao], hoje: date) -> ResumoFinanceiro:
    entradas = [t for t in transacoes if t.tipo == TipoTransacao.ENTRADA]
    saidas = [t for t in transacoes if t.tipo == TipoTransacao.SAIDA]
    return ResumoFinanceiro(
        total_entradas=Dinheiro.somar(t.valor for t in entradas),
        total_saidas=Dinheiro.somar(t.valor for t in saidas),
        transacoes_hoje=sum(1 for t in transacoes if t.data.date() == hoje),
        maiores_entradas=tuple(sorted(entradas, key=lambda t: t.valor, reverse=True)[:_TOP_N]),
        maiores_saidas=tuple(sorted(saidas, key=lambda t: t.valor, reverse=True)[:_TOP_N]),
    )


def filtrar_transacoes(
    transacoes: Sequence[Transacao],
    inicio: datetime | None = None,
    fim: datetime | None = None,
    tipo: TipoTransacao | None = None,
    categoria: str | None = None,
) -> list[Transacao]:
    """Intervalo fechado [inicio, fim]. Filtros None sao ignorados."""
    return [
        t
        for t in transacoes
        if (inicio is None or t.data >= inicio)
        and (fim is None or t.data <= fim)
        and (tipo is None or t.tipo == tipo)
        and (categoria is None or t.categoria == categoria)
    ]
