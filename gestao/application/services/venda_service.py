# gestao/application/services/venda_service.py
#
# Imperative Shell da venda: valida o agregado (pure core), persiste a venda,
# lanca a entrada no caixa e credita o vendedor.
#
# Design decisions:
#   - O total gravado e sempre recalculado por calcular_agregado; o cliente
#     HTTP nunca informa subtotal/total.
#   - Desconto invalido bloqueia a venda (ErroValidacao), nada e gravado.
#   - Falha ao gravar o lancamento financeiro e logada e NAO desfaz a venda.
#     Nao ha transacao distribuida entre as tabelas.
#   - Vendedor inexistente e checado ANTES de gravar a venda.
#   - Credito do vendedor e uma leitura-e-escrita atomica no store: vendas
#     concorrentes do mesmo vendedor somam, nenhuma sobrescreve a outra.
#   - Lancamento descreve a venda pelo nome do cliente quando ele existe.
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from gestao.domain.cliente.repository import ClienteRepository
from gestao.domain.dinheiro.value_objects import ZERO, Dinheiro
from gestao.domain.erros import ErroArmazenamento, ErroValidacao, RegistroNaoEncontrado
from gestao.domain.financeiro.entities import Transacao
from gestao.domain.financeiro.repository import TransacaoRepository
from gestao.domain.financeiro.value_objects import CATEGORIA_VENDAS, REFERENCIA_VENDA, TipoTransacao
from gestao.domain.venda.carrinho import Carrinho, ResultadoAgregado, calcular_agregado
from gestao.domain.venda.entities import ItemLinha, Venda
from gestao.domain.venda.repository import VendaRepository
from gestao.domain.venda.value_objects import StatusVenda
from gestao.domain.vendedor.repository import VendedorRepository
from gestao.log import log


@dataclass(frozen=True)
class TotaisVendas:
    quantidade: int
    receita: Dinheiro


def calcular_totais(vendas: Sequence[Venda]) -> TotaisVendas:
    """Somente vendas concluidas contam."""
    concluidas = [v for v in vendas if v.concluida]
    return TotaisVendas(quantidade=len(concluidas), receita=Dinheiro.somar(v.total for v in concluidas))


class VendaService:
    def __init__(
        self,
        venda_repo: VendaRepository,
        vendedor_repo: VendedorRepository,
        transacao_repo: TransacaoRepository,
        cliente_repo: ClienteRepository | None = None,
    ) -> None:
        self._venda_repo = venda_repo
        self._vendedor_repo = vendedor_repo
        self._transacao_repo = transacao_repo
        self._cliente_repo = cliente_repo

    def calcular(self, itens: Sequence[ItemLinha], desconto: Dinheiro = ZERO) -> ResultadoAgregado:
        """Preview do carrinho. Linhas repetidas sao consolidadas."""
        return Carrinho(itens, desconto).agregado()

    def registrar(
        self,
        cliente_id: str,
        vendedor_id: str | None,
        itens: Sequence[ItemLinha],
        desconto: Dinheiro,
        forma_pagamento: str,
        parcelas: int = 1,
        observacoes: str = "",
        agora: datetime | None = None,
    ) -> Venda:
        carrinho = Carrinho(itens, desconto)
        if not carrinho.itens:
            raise ErroValidacao(["Adicione pelo menos um item a venda"])
        if parcelas < 1:
            raise ErroValidacao(["Numero de parcelas deve ser pelo menos 1"])
        agregado = calcular_agregado(carrinho.itens, desconto)
        if not agregado.valido:
            raise ErroValidacao([a.mensagem for a in agregado.avisos])

        if vendedor_id and self._vendedor_repo.buscar_por_id(vendedor_id) is None:
            raise RegistroNaoEncontrado("vendedores", vendedor_id)

        instante = agora or datetime.now()
        venda = self._venda_repo.adicionar(
            Venda(
                id="",
                cliente_id=cliente_id,
                vendedor_id=vendedor_id,
                itens=carrinho.itens,
                subtotal=agregado.subtotal,
                desconto=agregado.desconto,
                total=agregado.total,
                forma_pagamento=forma_pagamento,
                parcelas=parcelas,
                observacoes=observacoes,
                status=StatusVenda.CONCLUIDA,
                data_venda=instante,
            )
        )

        self._lancar_entrada(venda)

        if vendedor_id:
            # credito sobre o estado gravado no momento da escrita, nao sobre a leitura acima
            creditado = self._vendedor_repo.atualizar(vendedor_id, lambda v: v.registrar_venda(venda.total))
            if creditado is None:
                log(f"Venda {venda.id}: vendedor {vendedor_id} removido antes do credito", nivel="WARN")

        return venda

    def buscar(self, venda_id: str) -> Venda | None:
        return self._venda_repo.buscar_por_id(venda_id)

    def cancelar(self, venda_id: str) -> Venda | None:
        venda = self._venda_repo.buscar_por_id(venda_id)
        if venda is None:
            return None
        if venda.status != StatusVenda.CANCELADA:
            self._venda_repo.atualizar_status(venda_id, StatusVenda.CANCELADA)
        return self._venda_repo.buscar_por_id(venda_id)

    def listar(
        self,
        vendedor_id: str | None = None,
        inicio: datetime | None = None,
        fim: datetime | None = None,
    ) -> list[Venda]:
        """Mais recentes primeiro. Intervalo fechado [inicio, fim]."""
        return [
            v
            for v in self._venda_repo.listar(vendedor_id)
            if (inicio is None or v.data_venda >= inicio) and (fim is None or v.data_venda <= fim)
        ]

    def _lancar_entrada(self, venda: Venda) -> None:
        if venda.total.centavos <= 0:
            return
        try:
            self._transacao_repo.adicionar(
                Transacao(
                    id="",
                    tipo=TipoTransacao.ENTRADA,
                    categoria=CATEGORIA_VENDAS,
                    descricao=self._descrever(venda),
                    valor=venda.total,
                    data=venda.data_venda,
                    forma_pagamento=venda.forma_pagamento,
                    referencia_id=venda.id,
                    referencia_tipo=REFERENCIA_VENDA,
                    vendedor_id=venda.vendedor_id,
                )
            )
        except ErroArmazenamento as exc:
            log(f"Venda {venda.id} gravada sem lancamento financeiro: {exc.mensagem}", nivel="WARN")

    def _descrever(self, venda: Venda) -> str:
        cliente = self._cliente_repo.buscar_por_id(venda.cliente_id) if self._cliente_repo else None
        if cliente is None:
            return f"Venda {venda.id}"
        return f"Venda para {cliente.nome.valor}"
