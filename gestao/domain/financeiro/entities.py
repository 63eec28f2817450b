from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from gestao.domain.dinheiro.value_objects import Dinheiro

from .value_objects import TipoTransacao


@dataclass(frozen=True)
class Transacao:
    """Lancamento do caixa. Lista plana: sem partidas dobradas, sem conciliacao."""

    id: str
    tipo: TipoTransacao
    categoria: str
    descricao: str
    valor: Dinheiro
    data: datetime
    forma_pagamento: str
    referencia_id: str | None = None
    referencia_tipo: str | None = None
    vendedor_id: str | None = None
    criado_em: datetime | None = None

    def __post_init__(self) -> None:
        if self.valor.centavos <= 0:
            raise ValueError("Valor da transacao deve ser positivo")
        if not self.categoria.strip():
            raise ValueError("Categoria nao pode ser vazia")
