from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from gestao.domain.cliente.entities import Cliente
from gestao.domain.cliente.value_objects import Endereco, TipoDocumento


class ClienteCreateRequest(BaseModel):
    nome: str = Field(min_length=1)
    email: str | None = None
    telefone: str | None = None
    endereco: str | None = None
    tipo_documento: TipoDocumento = TipoDocumento.CPF
    documento: str | None = None


class ClientePatchRequest(BaseModel):
    nome: Annotated[str, Field(min_length=1)] | None = None
    email: str | None = None
    telefone: str | None = None
    endereco: str | None = None
    tipo_documento: TipoDocumento | None = None
    documento: str | None = None


class ClienteDTO(BaseModel):
    id: str
    nome: str
    email: str | None
    telefone: str | None
    endereco: str | None
    tipo_documento: str
    documento: str | None
    criado_em: str | None

    @classmethod
    def from_domain(cls, cliente: Cliente) -> ClienteDTO:
        return cls(
            id=cliente.id,
            nome=cliente.nome.valor,
            email=cliente.email,
            telefone=cliente.telefone,
            endereco=cliente.endereco,
            tipo_documento=cliente.tipo_documento.value,
            documento=cliente.documento.formatado if cliente.documento else None,
            criado_em=cliente.criado_em.isoformat() if cliente.criado_em else None,
        )


class EnderecoDTO(BaseModel):
    cep: str
    logradouro: str
    bairro: str
    cidade: str
    uf: str

    @classmethod
    def from_domain(cls, endereco: Endereco) -> EnderecoDTO:
        return cls(
            cep=endereco.cep,
            logradouro=endereco.logradouro,
            bairro=endereco.bairro,
            cidade=endereco.cidade,
            uf=endereco.uf,
        )
