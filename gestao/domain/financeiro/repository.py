from __future__ import annotations

from typing import Protocol

from .entities import Transacao


class TransacaoRepository(Protocol):
    def adicionar(self, transacao: Transacao) -> Transacao: ...

    def listar(self) -> list[Transacao]: ...

    def remover(self, transacao_id: str) -> None: ...
