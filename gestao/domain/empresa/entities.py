from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from gestao.domain.cliente.value_objects import Documento, TipoDocumento


@dataclass(frozen=True)
class DadosEmpresa:
    """Identificacao da empresa impressa nos orcamentos. Existe no maximo uma."""

    nome: str
    cnpj: Documento | None = None
    endereco: str = ""
    telefone: str = ""
    id: str = ""
    criado_em: datetime | None = None

    def __post_init__(self) -> None:
        if not self.nome.strip():
            raise ValueError("Nome da empresa nao pode ser vazio")
        if self.cnpj is not None and self.cnpj.tipo != TipoDocumento.CNPJ:
            raise ValueError("Empresa precisa de CNPJ, nao CPF")
