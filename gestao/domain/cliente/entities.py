from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .value_objects import Documento, NomeCliente, TipoDocumento


@dataclass(frozen=True)
class Cliente:
    id: str
    nome: NomeCliente
    email: str | None = None
    telefone: str | None = None
    endereco: str | None = None
    tipo_documento: TipoDocumento = TipoDocumento.CPF
    documento: Documento | None = None
    criado_em: datetime | None = None

    def __post_init__(self) -> None:
        if self.documento is not None and self.documento.tipo != self.tipo_documento:
            raise ValueError("Tipo do documento nao confere com o documento informado")
