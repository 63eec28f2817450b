from __future__ import annotations

from typing import Protocol

from .entities import Produto, Servico


class ProdutoRepository(Protocol):
    def adicionar(self, produto: Produto) -> Produto: ...

    def buscar_por_id(self, produto_id: str) -> Produto | None: ...

    def listar(self) -> list[Produto]: ...

    def salvar(self, produto: Produto) -> None: ...

    def remover(self, produto_id: str) -> None: ...


class ServicoRepository(Protocol):
    def adicionar(self, servico: Servico) -> Servico: ...

    def buscar_por_id(self, servico_id: str) -> Servico | None: ...

    def listar(self) -> list[Servico]: ...

    def salvar(self, servico: Servico) -> None: ...

    def remover(self, servico_id: str) -> None: ...
