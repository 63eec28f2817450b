from __future__ import annotations

from pydantic import BaseModel, Field

from gestao.domain.empresa.entities import DadosEmpresa


class EmpresaRequest(BaseModel):
    nome: str = Field(min_length=1)
    cnpj: str | None = None
    endereco: str = ""
    telefone: str = ""


class EmpresaDTO(BaseModel):
    nome: str
    cnpj: str | None
    endereco: str
    telefone: str

    @classmethod
    def from_domain(cls, dados: DadosEmpresa) -> EmpresaDTO:
        return cls(
            nome=dados.nome,
            cnpj=dados.cnpj.formatado if dados.cnpj else None,
            endereco=dados.endereco,
            telefone=dados.telefone,
        )
