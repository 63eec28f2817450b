# gestao/domain/venda/carrinho.py
#
# Agregacao de itens de venda/orcamento: subtotal, desconto e total.
#
# Design decisions:
#   - calcular_agregado e uma funcao pura sobre ItemLinha; Carrinho e apenas
#     o estado mutavel de uma edicao (lista ordenada + desconto) que delega
#     o calculo para ela. Os services recalculam com a mesma funcao antes de
#     persistir, entao o total gravado nunca vem do cliente.
#   - Desconto fora de [0, subtotal] NAO e absorvido: o total reportado e
#     limitado a [0, subtotal], mas o resultado carrega ErroDescontoInvalido
#     e valido=False, para a camada de cima bloquear a submissao.
#   - Identidade de linha e (tipo, item_id). Adicionar o mesmo item de novo
#     incrementa a quantidade em vez de duplicar a linha.
#
# Invariants:
#   - subtotal == soma(preco_unitario * quantidade), independente da ordem.
#   - total == subtotal - desconto quando valido.
#   - Ordem das linhas == ordem de insercao.
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from gestao.domain.dinheiro.value_objects import ZERO, Dinheiro
from gestao.domain.erros import ErroDescontoInvalido

from .entities import ItemLinha
from .value_objects import TipoItem


@dataclass(frozen=True)
class ResultadoAgregado:
    subtotal: Dinheiro
    desconto: Dinheiro
    total: Dinheiro
    avisos: tuple[ErroDescontoInvalido, ...] = ()

    @property
    def valido(self) -> bool:
        return not self.avisos


def calcular_agregado(itens: Iterable[ItemLinha], desconto: Dinheiro = ZERO) -> ResultadoAgregado:
    """Funcao pura. Mesma entrada = mesma saida."""
    subtotal = Dinheiro.somar(item.total for item in itens)
    aplicado = min(max(desconto, ZERO), subtotal)
    avisos: tuple[ErroDescontoInvalido, ...] = ()
    if aplicado != desconto:
        avisos = (ErroDescontoInvalido(desconto=desconto, subtotal=subtotal),)
    return ResultadoAgregado(
        subtotal=subtotal,
        desconto=desconto,
        total=subtotal - aplicado,
        avisos=avisos,
    )


class Carrinho:
    """Estado de edicao de uma venda ou orcamento."""

    def __init__(self, itens: Iterable[ItemLinha] = (), desconto: Dinheiro = ZERO) -> None:
        self._itens: list[ItemLinha] = []
        for item in itens:
            self._incluir(item)
        self._desconto = desconto

    @property
    def itens(self) -> tuple[ItemLinha, ...]:
        return tuple(self._itens)

    @property
    def desconto(self) -> Dinheiro:
        return self._desconto

    def adicionar(
        self,
        tipo: TipoItem,
        item_id: str,
        nome: str,
        preco_unitario: Dinheiro,
    ) -> ItemLinha:
        """Mesmo (tipo, item_id) -> quantidade + 1; senao nova linha com quantidade 1."""
        return self._incluir(ItemLinha(tipo=tipo, item_id=item_id, nome=nome, preco_unitario=preco_unitario))

    def definir_quantidade(self, tipo: TipoItem, item_id: str, quantidade: int) -> None:
        """quantidade <= 0 remove a linha (comportamento esperado, nao erro)."""
        if quantidade <= 0:
            self.remover(tipo, item_id)
            return
        indice = self._indice((tipo, item_id))
        if indice is None:
            raise KeyError(f"Item {tipo.value}:{item_id} nao esta no carrinho")
        self._itens[indice] = replace(self._itens[indice], quantidade=quantidade)

    def remover(self, tipo: TipoItem, item_id: str) -> None:
        self._itens = [i for i in self._itens if i.chave != (tipo, item_id)]

    def definir_desconto(self, desconto: Dinheiro) -> ResultadoAgregado:
        self._desconto = desconto
        return self.agregado()

    def agregado(self) -> ResultadoAgregado:
        return calcular_agregado(self._itens, self._desconto)

    def _incluir(self, item: ItemLinha) -> ItemLinha:
        indice = self._indice(item.chave)
        if indice is None:
            self._itens.append(item)
            return item
        existente = self._itens[indice]
        atualizado = replace(existente, quantidade=existente.quantidade + item.quantidade)
        self._itens[indice] = atualizado
        return atualizado

    def _indice(self, chave: tuple[TipoItem, str]) -> int | None:
        for i, item in enumerate(self._itens):
            if item.chave == chave:
                return i
        return None
