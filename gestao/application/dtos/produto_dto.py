from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from gestao.domain.dinheiro.formatacao import formatar_moeda
from gestao.domain.produto.entities import Produto, Servico

from .moeda_dto import PrecoMonetario, valor_str


class ProdutoCreateRequest(BaseModel):
    nome: str = Field(min_length=1)
    descricao: str = ""
    preco: PrecoMonetario
    estoque: int = Field(default=0, ge=0)
    imagem_url: str | None = None


class ProdutoPatchRequest(BaseModel):
    nome: Annotated[str, Field(min_length=1)] | None = None
    descricao: str | None = None
    preco: PrecoMonetario | None = None
    estoque: Annotated[int, Field(ge=0)] | None = None
    imagem_url: str | None = None


class ProdutoDTO(BaseModel):
    id: str
    nome: str
    descricao: str
    preco: str
    preco_formatado: str
    estoque: int
    imagem_url: str | None

    @classmethod
    def from_domain(cls, produto: Produto) -> ProdutoDTO:
        return cls(
            id=produto.id,
            nome=produto.nome,
            descricao=produto.descricao,
            preco=valor_str(produto.preco),
            preco_formatado=formatar_moeda(produto.preco),
            estoque=produto.estoque,
            imagem_url=produto.imagem_url,
        )


class ServicoCreateRequest(BaseModel):
    nome: str = Field(min_length=1)
    descricao: str = ""
    preco: PrecoMonetario


class ServicoPatchRequest(BaseModel):
    nome: Annotated[str, Field(min_length=1)] | None = None
    descricao: str | None = None
    preco: PrecoMonetario | None = None


class ServicoDTO(BaseModel):
    id: str
    nome: str
    descricao: str
    preco: str
    preco_formatado: str

    @classmethod
    def from_domain(cls, servico: Servico) -> ServicoDTO:
        return cls(
            id=servico.id,
            nome=servico.nome,
            descricao=servico.descricao,
            preco=valor_str(servico.preco),
            preco_formatado=formatar_moeda(servico.preco),
        )
