from __future__ import annotations

from typing import Protocol

from .entities import Orcamento, Venda
from .value_objects import StatusVenda


class VendaRepository(Protocol):
    def adicionar(self, venda: Venda) -> Venda: ...

    def buscar_por_id(self, venda_id: str) -> Venda | None: ...

    def listar(self, vendedor_id: str | None = None) -> list[Venda]: ...

    def atualizar_status(self, venda_id: str, status: StatusVenda) -> None: ...


class OrcamentoRepository(Protocol):
    def adicionar(self, orcamento: Orcamento) -> Orcamento: ...

    def buscar_por_id(self, orcamento_id: str) -> Orcamento | None: ...

    def listar(self, vendedor_id: str | None = None) -> list[Orcamento]: ...

    def salvar(self, orcamento: Orcamento) -> None: ...

    def remover(self, orcamento_id: str) -> None: ...
