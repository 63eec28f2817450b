from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field

from gestao.domain.dinheiro.formatacao import formatar_moeda
from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.vendedor.entities import Vendedor
from gestao.domain.vendedor.nivel import NivelVendedor

from .moeda_dto import PrecoMonetario, valor_str


class VendedorCreateRequest(BaseModel):
    nome: str = Field(min_length=1)
    taxa_comissao: Decimal = Field(ge=0, le=100)
    telefone: str = ""
    email: str = ""
    endereco: str = ""
    foto_url: str = ""


class VendedorPatchRequest(BaseModel):
    """Totais e comissoes nao sao editaveis: mudam so por venda ou pagamento."""

    nome: Annotated[str, Field(min_length=1)] | None = None
    taxa_comissao: Annotated[Decimal, Field(ge=0, le=100)] | None = None
    telefone: str | None = None
    email: str | None = None
    endereco: str | None = None
    foto_url: str | None = None


class PagarComissaoRequest(BaseModel):
    valor: PrecoMonetario


class NivelDTO(BaseModel):
    nivel: str
    rotulo: str
    rank: int

    @classmethod
    def from_domain(cls, nivel: NivelVendedor) -> NivelDTO:
        return cls(nivel=nivel.value, rotulo=nivel.rotulo, rank=nivel.rank)


class ClassificacaoDTO(BaseModel):
    valor: str
    valor_formatado: str
    nivel: NivelDTO

    @classmethod
    def from_domain(cls, valor: Dinheiro, nivel: NivelVendedor) -> ClassificacaoDTO:
        return cls(valor=valor_str(valor), valor_formatado=formatar_moeda(valor), nivel=NivelDTO.from_domain(nivel))


class VendedorDTO(BaseModel):
    id: str
    nome: str
    telefone: str
    email: str
    endereco: str
    foto_url: str
    taxa_comissao: str
    total_vendas: str
    total_vendas_formatado: str
    comissoes_recebidas: str
    comissoes_pendentes: str
    nivel: NivelDTO

    @classmethod
    def from_domain(cls, vendedor: Vendedor) -> VendedorDTO:
        return cls(
            id=vendedor.id,
            nome=vendedor.nome,
            telefone=vendedor.telefone,
            email=vendedor.email,
            endereco=vendedor.endereco,
            foto_url=vendedor.foto_url,
            taxa_comissao=str(vendedor.taxa_comissao.percentual),
            total_vendas=valor_str(vendedor.total_vendas),
            total_vendas_formatado=formatar_moeda(vendedor.total_vendas),
            comissoes_recebidas=valor_str(vendedor.comissoes_recebidas),
            comissoes_pendentes=valor_str(vendedor.comissoes_pendentes),
            nivel=NivelDTO.from_domain(vendedor.nivel),
        )
