from __future__ import annotations

from typing import Protocol

from .entities import Visita
from .value_objects import StatusVisita


class VisitaRepository(Protocol):
    def adicionar(self, visita: Visita) -> Visita: ...

    def buscar_por_id(self, visita_id: str) -> Visita | None: ...

    def listar(self, vendedor_id: str | None = None, status: StatusVisita | None = None) -> list[Visita]: ...

    def salvar(self, visita: Visita) -> None: ...

    def remover(self, visita_id: str) -> None: ...
