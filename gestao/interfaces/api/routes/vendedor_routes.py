from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from gestao.application.dtos.moeda_dto import aceitar_formato_brasileiro
from gestao.application.dtos.vendedor_dto import (
    ClassificacaoDTO,
    PagarComissaoRequest,
    VendedorCreateRequest,
    VendedorDTO,
    VendedorPatchRequest,
)
from gestao.application.services.vendedor_service import VendedorService
from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.vendedor.nivel import classificar_nivel
from gestao.interfaces.api.dependencies import get_vendedor_service
from gestao.interfaces.api.erros import erro_validacao

router = APIRouter()


@router.get("/vendedores", response_model=list[VendedorDTO])
def listar_vendedores(
    service: VendedorService = Depends(get_vendedor_service),  # noqa: B008
) -> list[VendedorDTO]:
    return [VendedorDTO.from_domain(v) for v in service.listar()]


@router.post("/vendedores", response_model=VendedorDTO, status_code=201)
def criar_vendedor(
    body: VendedorCreateRequest,
    service: VendedorService = Depends(get_vendedor_service),  # noqa: B008
) -> VendedorDTO:
    try:
        vendedor = service.criar(**body.model_dump())
    except ValueError as err:
        raise erro_validacao(err) from err
    return VendedorDTO.from_domain(vendedor)


# /vendedores/nivel ANTES de /vendedores/{vendedor_id} (path conflict)
@router.get("/vendedores/nivel", response_model=ClassificacaoDTO)
def classificar(valor: str = Query(...)) -> ClassificacaoDTO:
    """Aceita '75000', '75000.50' ou '75.000,50'."""
    try:
        decimal: Decimal = aceitar_formato_brasileiro(valor)
    except ValueError as err:
        raise HTTPException(status_code=422, detail="Valor invalido. Use o formato 1.234,56") from err
    dinheiro = Dinheiro.de(decimal)
    return ClassificacaoDTO.from_domain(dinheiro, classificar_nivel(dinheiro))


@router.get("/vendedores/{vendedor_id}", response_model=VendedorDTO)
def get_vendedor(
    vendedor_id: str,
    service: VendedorService = Depends(get_vendedor_service),  # noqa: B008
) -> VendedorDTO:
    vendedor = service.buscar(vendedor_id)
    if vendedor is None:
        raise HTTPException(status_code=404, detail="Vendedor nao encontrado")
    return VendedorDTO.from_domain(vendedor)


@router.patch("/vendedores/{vendedor_id}", response_model=VendedorDTO)
def atualizar_vendedor(
    vendedor_id: str,
    body: VendedorPatchRequest,
    service: VendedorService = Depends(get_vendedor_service),  # noqa: B008
) -> VendedorDTO:
    try:
        vendedor = service.atualizar(vendedor_id, **body.model_dump())
    except ValueError as err:
        raise erro_validacao(err) from err
    if vendedor is None:
        raise HTTPException(status_code=404, detail="Vendedor nao encontrado")
    return VendedorDTO.from_domain(vendedor)


@router.delete("/vendedores/{vendedor_id}", status_code=204)
def remover_vendedor(
    vendedor_id: str,
    service: VendedorService = Depends(get_vendedor_service),  # noqa: B008
) -> Response:
    service.remover(vendedor_id)
    return Response(status_code=204)


@router.post("/vendedores/{vendedor_id}/comissoes/pagar", response_model=VendedorDTO)
def pagar_comissao(
    vendedor_id: str,
    body: PagarComissaoRequest,
    service: VendedorService = Depends(get_vendedor_service),  # noqa: B008
) -> VendedorDTO:
    try:
        vendedor = service.pagar_comissao(vendedor_id, Dinheiro.de(body.valor))
    except ValueError as err:
        raise erro_validacao(err) from err
    if vendedor is None:
        raise HTTPException(status_code=404, detail="Vendedor nao encontrado")
    return VendedorDTO.from_domain(vendedor)
