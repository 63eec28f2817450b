from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.venda.value_objects import TipoItem


@dataclass(frozen=True)
class Produto:
    id: str
    nome: str
    preco: Dinheiro
    descricao: str = ""
    estoque: int = 0
    imagem_url: str | None = None
    criado_em: datetime | None = None

    tipo = TipoItem.PRODUTO

    def __post_init__(self) -> None:
        if not self.nome.strip():
            raise ValueError("Nome do produto nao pode ser vazio")
        if self.preco.negativo:
            raise ValueError("Preco nao pode ser negativo")
        if self.estoque < 0:
            raise ValueError("Estoque nao pode ser negativo")


@dataclass(frozen=True)
class Servico:
    id: str
    nome: str
    preco: Dinheiro
    descricao: str = ""
    criado_em: datetime | None = None

    tipo = TipoItem.SERVICO

    def __post_init__(self) -> None:
        if not self.nome.strip():
            raise ValueError("Nome do servico nao pode ser vazio")
        if self.preco.negativo:
            raise ValueError("Preco nao pode ser negativo")
