from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from gestao.domain.dinheiro.value_objects import ZERO, Dinheiro

from .nivel import NivelVendedor, classificar_nivel


@dataclass(frozen=True)
class TaxaComissao:
    """Percentual em Decimal, entre 0 e 100."""

    percentual: Decimal

    def __post_init__(self) -> None:
        if not Decimal("0") <= self.percentual <= Decimal("100"):
            raise ValueError("Taxa de comissao deve estar entre 0 e 100")


@dataclass(frozen=True)
class Vendedor:
    """Imutavel. Operacoes devolvem uma nova instancia com o nivel recalculado."""

    id: str
    nome: str
    taxa_comissao: TaxaComissao
    telefone: str = ""
    email: str = ""
    endereco: str = ""
    foto_url: str = ""
    total_vendas: Dinheiro = ZERO
    comissoes_recebidas: Dinheiro = ZERO
    comissoes_pendentes: Dinheiro = ZERO
    criado_em: datetime | None = None

    def __post_init__(self) -> None:
        if not self.nome.strip():
            raise ValueError("Nome do vendedor nao pode ser vazio")

    @property
    def nivel(self) -> NivelVendedor:
        return classificar_nivel(self.total_vendas)

    def registrar_venda(self, valor: Dinheiro) -> Vendedor:
        if valor.negativo:
            raise ValueError("Valor de venda nao pode ser negativo")
        return replace(
            self,
            total_vendas=self.total_vendas + valor,
            comissoes_pendentes=self.comissoes_pendentes + valor.aplicar_percentual(self.taxa_comissao.percentual),
        )

    def pagar_comissao(self, valor: Dinheiro) -> Vendedor:
        if valor.centavos <= 0:
            raise ValueError("Valor de pagamento deve ser positivo")
        if valor > self.comissoes_pendentes:
            raise ValueError("Pagamento excede as comissoes pendentes")
        return replace(
            self,
            comissoes_recebidas=self.comissoes_recebidas + valor,
            comissoes_pendentes=self.comissoes_pendentes - valor,
        )
