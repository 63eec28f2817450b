# gestao/application/services/relatorio_service.py
#
# Relatorio de desempenho comercial.
#
# Design decisions:
#   - Agregacao com polars sobre centavos inteiros (Int64): nenhum valor
#     monetario passa por float.
#   - Ticket medio arredondado HALF_UP para o centavo; zero quando nao ha
#     vendas concluidas.
from __future__ import annotations

import polars as pl

from gestao.domain.cliente.repository import ClienteRepository
from gestao.domain.dinheiro.formatacao import formatar_moeda
from gestao.domain.dinheiro.value_objects import ZERO, Dinheiro
from gestao.domain.venda.repository import VendaRepository
from gestao.domain.vendedor.nivel import classificar_nivel
from gestao.domain.vendedor.repository import VendedorRepository
from gestao.domain.visita.repository import VisitaRepository

from ..dtos.moeda_dto import valor_str
from ..dtos.relatorio_dto import DesempenhoDTO, VendedorRankingDTO

TOP_VENDEDORES = 5


class RelatorioService:
    def __init__(
        self,
        venda_repo: VendaRepository,
        vendedor_repo: VendedorRepository,
        cliente_repo: ClienteRepository,
        visita_repo: VisitaRepository,
    ) -> None:
        self._venda_repo = venda_repo
        self._vendedor_repo = vendedor_repo
        self._cliente_repo = cliente_repo
        self._visita_repo = visita_repo

    def desempenho(self) -> DesempenhoDTO:
        vendas = pl.DataFrame(
            {"total_centavos": [v.total.centavos for v in self._venda_repo.listar() if v.concluida]},
            schema={"total_centavos": pl.Int64},
        )
        quantidade = vendas.height
        receita = Dinheiro(int(vendas["total_centavos"].sum() or 0))
        ticket = Dinheiro.de(receita.valor / quantidade) if quantidade else ZERO

        vendedores = self._vendedor_repo.listar()
        ranking = (
            pl.DataFrame(
                {
                    "id": [v.id for v in vendedores],
                    "nome": [v.nome for v in vendedores],
                    "total_centavos": [v.total_vendas.centavos for v in vendedores],
                },
                schema={"id": pl.Utf8, "nome": pl.Utf8, "total_centavos": pl.Int64},
            )
            .sort(["total_centavos", "nome"], descending=[True, False])
            .head(TOP_VENDEDORES)
        )

        visitas = pl.DataFrame(
            {"status": [v.status.value for v in self._visita_repo.listar()]},
            schema={"status": pl.Utf8},
        )
        por_status = visitas.group_by("status").agg(pl.len().alias("quantidade")).sort("status")

        return DesempenhoDTO(
            receita_total=valor_str(receita),
            receita_total_formatada=formatar_moeda(receita),
            quantidade_vendas=quantidade,
            ticket_medio=valor_str(ticket),
            ticket_medio_formatado=formatar_moeda(ticket),
            total_clientes=len(self._cliente_repo.listar()),
            total_visitas=visitas.height,
            top_vendedores=[self._ranking(linha) for linha in ranking.iter_rows(named=True)],
            visitas_por_status={str(r["status"]): int(r["quantidade"]) for r in por_status.iter_rows(named=True)},
        )

    def _ranking(self, linha: dict[str, object]) -> VendedorRankingDTO:
        total = Dinheiro(int(linha["total_centavos"]))  # type: ignore[call-overload]
        nivel = classificar_nivel(total)
        return VendedorRankingDTO(
            id=str(linha["id"]),
            nome=str(linha["nome"]),
            total_vendas=valor_str(total),
            nivel=nivel.value,
            nivel_rotulo=nivel.rotulo,
        )
