from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timedelta

from gestao.domain.dinheiro.value_objects import ZERO, Dinheiro
from gestao.domain.erros import ErroValidacao
from gestao.domain.venda.carrinho import Carrinho, ResultadoAgregado
from gestao.domain.venda.entities import ItemLinha, Orcamento
from gestao.domain.venda.repository import OrcamentoRepository
from gestao.domain.venda.value_objects import StatusOrcamento

VALIDADE_PADRAO = timedelta(days=7)


def _agregar(itens: Sequence[ItemLinha], desconto: Dinheiro) -> tuple[tuple[ItemLinha, ...], ResultadoAgregado]:
    carrinho = Carrinho(itens, desconto)
    if not carrinho.itens:
        raise ErroValidacao(["Adicione pelo menos um item ao orcamento"])
    agregado = carrinho.agregado()
    if not agregado.valido:
        raise ErroValidacao([a.mensagem for a in agregado.avisos])
    return carrinho.itens, agregado


class OrcamentoService:
    def __init__(self, repo: OrcamentoRepository) -> None:
        self._repo = repo

    def criar(
        self,
        cliente_id: str,
        vendedor_id: str | None,
        itens: Sequence[ItemLinha],
        desconto: Dinheiro = ZERO,
        status: StatusOrcamento = StatusOrcamento.RASCUNHO,
        valido_ate: datetime | None = None,
        observacoes: str = "",
        agora: datetime | None = None,
    ) -> Orcamento:
        instante = agora or datetime.now()
        linhas, agregado = _agregar(itens, desconto)
        return self._repo.adicionar(
            Orcamento(
                id="",
                cliente_id=cliente_id,
                vendedor_id=vendedor_id,
                itens=linhas,
                total=agregado.total,
                status=status,
                valido_ate=valido_ate or instante + VALIDADE_PADRAO,
                desconto=agregado.desconto,
                observacoes=observacoes,
                atualizado_em=instante,
            )
        )

    def atualizar(
        self,
        orcamento_id: str,
        itens: Sequence[ItemLinha] | None = None,
        desconto: Dinheiro | None = None,
        status: StatusOrcamento | None = None,
        valido_ate: datetime | None = None,
        observacoes: str | None = None,
        agora: datetime | None = None,
    ) -> Orcamento | None:
        """Campos None ficam como estao. Itens ou desconto novos recalculam o total."""
        atual = self._repo.buscar_por_id(orcamento_id)
        if atual is None:
            return None

        novo = atual
        if itens is not None or desconto is not None:
            linhas, agregado = _agregar(
                itens if itens is not None else atual.itens,
                desconto if desconto is not None else atual.desconto,
            )
            novo = replace(novo, itens=linhas, desconto=agregado.desconto, total=agregado.total)
        if status is not None:
            novo = replace(novo, status=status)
        if valido_ate is not None:
            novo = replace(novo, valido_ate=valido_ate)
        if observacoes is not None:
            novo = replace(novo, observacoes=observacoes)

        novo = replace(novo, atualizado_em=agora or datetime.now())
        self._repo.salvar(novo)
        return self._repo.buscar_por_id(orcamento_id)

    def buscar(self, orcamento_id: str) -> Orcamento | None:
        return self._repo.buscar_por_id(orcamento_id)

    def listar(self, vendedor_id: str | None = None) -> list[Orcamento]:
        return self._repo.listar(vendedor_id)

    def remover(self, orcamento_id: str) -> None:
        self._repo.remover(orcamento_id)
