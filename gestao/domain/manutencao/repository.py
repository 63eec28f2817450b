from __future__ import annotations

from typing import Protocol

from .entities import Manutencao


class ManutencaoRepository(Protocol):
    def adicionar(self, manutencao: Manutencao) -> Manutencao: ...

    def buscar_por_id(self, manutencao_id: str) -> Manutencao | None: ...

    def listar(self, vendedor_id: str | None = None) -> list[Manutencao]: ...

    def salvar(self, manutencao: Manutencao) -> None: ...

    def remover(self, manutencao_id: str) -> None: ...
