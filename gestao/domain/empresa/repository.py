from __future__ import annotations

from typing import Protocol

from .entities import DadosEmpresa


class EmpresaRepository(Protocol):
    def obter(self) -> DadosEmpresa | None: ...

    def definir(self, dados: DadosEmpresa) -> DadosEmpresa: ...
