from __future__ import annotations

from typing import Protocol

from .entities import Cliente
from .value_objects import Endereco


class ClienteRepository(Protocol):
    def adicionar(self, cliente: Cliente) -> Cliente: ...

    def buscar_por_id(self, cliente_id: str) -> Cliente | None: ...

    def buscar_por_email(self, email: str) -> Cliente | None: ...

    def listar(self) -> list[Cliente]: ...

    def salvar(self, cliente: Cliente) -> None: ...

    def remover(self, cliente_id: str) -> None: ...


class ConsultaCep(Protocol):
    def buscar(self, cep: str) -> Endereco | None: ...
