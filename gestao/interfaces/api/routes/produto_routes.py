from dataclasses import replace

from fastapi import APIRouter, Depends, HTTPException, Response

from gestao.application.dtos.produto_dto import (
    ProdutoCreateRequest,
    ProdutoDTO,
    ProdutoPatchRequest,
    ServicoCreateRequest,
    ServicoDTO,
    ServicoPatchRequest,
)
from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.produto.entities import Produto, Servico
from gestao.infrastructure.repositories.store_produto_repo import StoreProdutoRepo, StoreServicoRepo
from gestao.interfaces.api.dependencies import get_produto_repo, get_servico_repo
from gestao.interfaces.api.erros import erro_validacao

router = APIRouter()


@router.get("/produtos", response_model=list[ProdutoDTO])
def listar_produtos(
    repo: StoreProdutoRepo = Depends(get_produto_repo),  # noqa: B008
) -> list[ProdutoDTO]:
    return [ProdutoDTO.from_domain(p) for p in repo.listar()]


@router.post("/produtos", response_model=ProdutoDTO, status_code=201)
def criar_produto(
    body: ProdutoCreateRequest,
    repo: StoreProdutoRepo = Depends(get_produto_repo),  # noqa: B008
) -> ProdutoDTO:
    try:
        produto = Produto(
            id="",
            nome=body.nome.strip(),
            preco=Dinheiro.de(body.preco),
            descricao=body.descricao,
            estoque=body.estoque,
            imagem_url=body.imagem_url,
        )
    except ValueError as err:
        raise erro_validacao(err) from err
    return ProdutoDTO.from_domain(repo.adicionar(produto))


@router.patch("/produtos/{produto_id}", response_model=ProdutoDTO)
def atualizar_produto(
    produto_id: str,
    body: ProdutoPatchRequest,
    repo: StoreProdutoRepo = Depends(get_produto_repo),  # noqa: B008
) -> ProdutoDTO:
    atual = repo.buscar_por_id(produto_id)
    if atual is None:
        raise HTTPException(status_code=404, detail="Produto nao encontrado")
    campos = body.model_dump(exclude_none=True)
    if "preco" in campos:
        campos["preco"] = Dinheiro.de(campos["preco"])
    try:
        produto = replace(atual, **campos)
    except ValueError as err:
        raise erro_validacao(err) from err
    repo.salvar(produto)
    return ProdutoDTO.from_domain(produto)


@router.delete("/produtos/{produto_id}", status_code=204)
def remover_produto(
    produto_id: str,
    repo: StoreProdutoRepo = Depends(get_produto_repo),  # noqa: B008
) -> Response:
    repo.remover(produto_id)
    return Response(status_code=204)


@router.get("/servicos", response_model=list[ServicoDTO])
def listar_servicos(
    repo: StoreServicoRepo = Depends(get_servico_repo),  # noqa: B008
) -> list[ServicoDTO]:
    return [ServicoDTO.from_domain(s) for s in repo.listar()]


@router.post("/servicos", response_model=ServicoDTO, status_code=201)
def criar_servico(
    body: ServicoCreateRequest,
    repo: StoreServicoRepo = Depends(get_servico_repo),  # noqa: B008
) -> ServicoDTO:
    try:
        servico = Servico(id="", nome=body.nome.strip(), preco=Dinheiro.de(body.preco), descricao=body.descricao)
    except ValueError as err:
        raise erro_validacao(err) from err
    return ServicoDTO.from_domain(repo.adicionar(servico))


@router.patch("/servicos/{servico_id}", response_model=ServicoDTO)
def atualizar_servico(
    servico_id: str,
    body: ServicoPatchRequest,
    repo: StoreServicoRepo = Depends(get_servico_repo),  # noqa: B008
) -> ServicoDTO:
    atual = repo.buscar_por_id(servico_id)
    if atual is None:
        raise HTTPException(status_code=404, detail="Servico nao encontrado")
    campos = body.model_dump(exclude_none=True)
    if "preco" in campos:
        campos["preco"] = Dinheiro.de(campos["preco"])
    try:
        servico = replace(atual, **campos)
    except ValueError as err:
        raise erro_validacao(err) from err
    repo.salvar(servico)
    return ServicoDTO.from_domain(servico)


@router.delete("/servicos/{servico_id}", status_code=204)
def remover_servico(
    servico_id: str,
    repo: StoreServicoRepo = Depends(get_servico_repo),  # noqa: B008
) -> Response:
    repo.remover(servico_id)
    return Response(status_code=204)
