from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from gestao.domain.dinheiro.value_objects import Dinheiro


class NivelVendedor(StrEnum):
    BRONZE = "bronze"
    PRATA = "silver"
    OURO = "gold"
    DIAMANTE = "diamond"

    @property
    def rank(self) -> int:
        return _RANK[self]

    @property
    def rotulo(self) -> str:
        return _ROTULOS[self]


_RANK: dict[NivelVendedor, int] = {
    NivelVendedor.BRONZE: 0,
    NivelVendedor.PRATA: 1,
    NivelVendedor.OURO: 2,
    NivelVendedor.DIAMANTE: 3,
}

_ROTULOS: dict[NivelVendedor, str] = {
    NivelVendedor.BRONZE: "Bronze",
    NivelVendedor.PRATA: "Prata",
    NivelVendedor.OURO: "Ouro",
    NivelVendedor.DIAMANTE: "Diamante",
}

# ADR: Limiares como constante de modulo, do maior para o menor.
# Limite inferior fechado: exatamente 100000 ja e DIAMANTE.
LIMIARES: tuple[tuple[Dinheiro, NivelVendedor], ...] = (
    (Dinheiro.de(100_000), NivelVendedor.DIAMANTE),
    (Dinheiro.de(50_000), NivelVendedor.OURO),
    (Dinheiro.de(25_000), NivelVendedor.PRATA),
)


def classificar_nivel(vendas_acumuladas: Dinheiro | Decimal | int | str) -> NivelVendedor:
    """Funcao pura e monotonica: mais vendas nunca rebaixam o nivel."""
    valor = Dinheiro.de(vendas_acumuladas)
    for limiar, nivel in LIMIARES:
        if valor >= limiar:
            return nivel
    return NivelVendedor.BRONZE
