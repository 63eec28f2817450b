from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol

Linha = dict[str, Any]


class RecordStore(Protocol):
    """Persistencia generica por linha. Toda falha sai como ErroArmazenamento;
    update/delete de id inexistente sai como RegistroNaoEncontrado."""

    def query(
        self,
        tabela: str,
        filtros: Mapping[str, object] | None = None,
        ordenar_por: str | None = None,
        decrescente: bool = True,
    ) -> list[Linha]: ...

    def get(self, tabela: str, registro_id: str) -> Linha | None: ...

    def insert(self, tabela: str, linha: Mapping[str, object]) -> Linha: ...

    def update(self, tabela: str, registro_id: str, patch: Mapping[str, object]) -> None: ...

    def transformar(
        self,
        tabela: str,
        registro_id: str,
        funcao: Callable[[Linha], Mapping[str, object]],
    ) -> Linha:
        """Le a linha, aplica funcao e grava o patch devolvido sem intercalar
        com outra escrita. Devolve a linha resultante."""
        ...

    def delete(self, tabela: str, registro_id: str) -> None: ...
