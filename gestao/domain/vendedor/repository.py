from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from .entities import Vendedor


class VendedorRepository(Protocol):
    def adicionar(self, vendedor: Vendedor) -> Vendedor: ...

    def buscar_por_id(self, vendedor_id: str) -> Vendedor | None: ...

    def listar(self) -> list[Vendedor]: ...

    def atualizar(self, vendedor_id: str, operacao: Callable[[Vendedor], Vendedor]) -> Vendedor | None: ...

    def remover(self, vendedor_id: str) -> None: ...
