from fastapi import APIRouter, Depends, HTTPException, Query

from gestao.application.dtos.tempo import InstanteLocal
from gestao.application.dtos.venda_dto import (
    AgregadoDTO,
    CalcularRequest,
    TotaisVendasDTO,
    VendaCreateRequest,
    VendaDTO,
    VendaListaDTO,
)
from gestao.application.services.venda_service import VendaService, calcular_totais
from gestao.domain.dinheiro.formatacao import formatar_moeda
from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.interfaces.api.dependencies import get_venda_service
from gestao.interfaces.api.erros import erro_validacao

router = APIRouter()


@router.post("/vendas/calcular", response_model=AgregadoDTO)
def calcular_venda(
    body: CalcularRequest,
    service: VendaService = Depends(get_venda_service),  # noqa: B008
) -> AgregadoDTO:
    """Preview do carrinho. Desconto invalido volta com valido=false e avisos."""
    try:
        itens = [i.to_domain() for i in body.itens]
    except ValueError as err:
        raise erro_validacao(err) from err
    return AgregadoDTO.from_domain(service.calcular(itens, Dinheiro.de(body.desconto)))


@router.get("/vendas", response_model=VendaListaDTO)
def listar_vendas(
    vendedor_id: str | None = Query(default=None),
    inicio: InstanteLocal | None = Query(default=None),
    fim: InstanteLocal | None = Query(default=None),
    service: VendaService = Depends(get_venda_service),  # noqa: B008
) -> VendaListaDTO:
    vendas = service.listar(vendedor_id, inicio, fim)
    totais = calcular_totais(vendas)
    return VendaListaDTO(
        vendas=[VendaDTO.from_domain(v) for v in vendas],
        totais=TotaisVendasDTO(
            quantidade=totais.quantidade,
            receita=str(totais.receita.valor),
            receita_formatada=formatar_moeda(totais.receita),
        ),
    )


@router.post("/vendas", response_model=VendaDTO, status_code=201)
def criar_venda(
    body: VendaCreateRequest,
    service: VendaService = Depends(get_venda_service),  # noqa: B008
) -> VendaDTO:
    try:
        venda = service.registrar(
            cliente_id=body.cliente_id,
            vendedor_id=body.vendedor_id,
            itens=[i.to_domain() for i in body.itens],
            desconto=Dinheiro.de(body.desconto),
            forma_pagamento=body.forma_pagamento,
            parcelas=body.parcelas,
            observacoes=body.observacoes,
        )
    except ValueError as err:
        raise erro_validacao(err) from err
    return VendaDTO.from_domain(venda)


@router.get("/vendas/{venda_id}", response_model=VendaDTO)
def get_venda(
    venda_id: str,
    service: VendaService = Depends(get_venda_service),  # noqa: B008
) -> VendaDTO:
    venda = service.buscar(venda_id)
    if venda is None:
        raise HTTPException(status_code=404, detail="Venda nao encontrada")
    return VendaDTO.from_domain(venda)


@router.post("/vendas/{venda_id}/cancelar", response_model=VendaDTO)
def cancelar_venda(
    venda_id: str,
    service: VendaService = Depends(get_venda_service),  # noqa: B008
) -> VendaDTO:
    venda = service.cancelar(venda_id)
    if venda is None:
        raise HTTPException(status_code=404, detail="Venda nao encontrada")
    return VendaDTO.from_domain(venda)
