from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from gestao.application.dtos.venda_dto import OrcamentoCreateRequest, OrcamentoDTO, OrcamentoPatchRequest
from gestao.application.services.orcamento_service import OrcamentoService
from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.interfaces.api.dependencies import get_orcamento_service
from gestao.interfaces.api.erros import erro_validacao

router = APIRouter()


@router.get("/orcamentos", response_model=list[OrcamentoDTO])
def listar_orcamentos(
    vendedor_id: str | None = Query(default=None),
    service: OrcamentoService = Depends(get_orcamento_service),  # noqa: B008
) -> list[OrcamentoDTO]:
    agora = datetime.now()
    return [OrcamentoDTO.from_domain(o, agora) for o in service.listar(vendedor_id)]


@router.post("/orcamentos", response_model=OrcamentoDTO, status_code=201)
def criar_orcamento(
    body: OrcamentoCreateRequest,
    service: OrcamentoService = Depends(get_orcamento_service),  # noqa: B008
) -> OrcamentoDTO:
    agora = datetime.now()
    try:
        orcamento = service.criar(
            cliente_id=body.cliente_id,
            vendedor_id=body.vendedor_id,
            itens=[i.to_domain() for i in body.itens],
            desconto=Dinheiro.de(body.desconto),
            status=body.status,
            valido_ate=body.valido_ate,
            observacoes=body.observacoes,
            agora=agora,
        )
    except ValueError as err:
        raise erro_validacao(err) from err
    return OrcamentoDTO.from_domain(orcamento, agora)


@router.get("/orcamentos/{orcamento_id}", response_model=OrcamentoDTO)
def get_orcamento(
    orcamento_id: str,
    service: OrcamentoService = Depends(get_orcamento_service),  # noqa: B008
) -> OrcamentoDTO:
    orcamento = service.buscar(orcamento_id)
    if orcamento is None:
        raise HTTPException(status_code=404, detail="Orcamento nao encontrado")
    return OrcamentoDTO.from_domain(orcamento, datetime.now())


@router.patch("/orcamentos/{orcamento_id}", response_model=OrcamentoDTO)
def atualizar_orcamento(
    orcamento_id: str,
    body: OrcamentoPatchRequest,
    service: OrcamentoService = Depends(get_orcamento_service),  # noqa: B008
) -> OrcamentoDTO:
    agora = datetime.now()
    try:
        orcamento = service.atualizar(
            orcamento_id,
            itens=[i.to_domain() for i in body.itens] if body.itens is not None else None,
            desconto=Dinheiro.de(body.desconto) if body.desconto is not None else None,
            status=body.status,
            valido_ate=body.valido_ate,
            observacoes=body.observacoes,
            agora=agora,
        )
    except ValueError as err:
        raise erro_validacao(err) from err
    if orcamento is None:
        raise HTTPException(status_code=404, detail="Orcamento nao encontrado")
    return OrcamentoDTO.from_domain(orcamento, agora)


@router.delete("/orcamentos/{orcamento_id}", status_code=204)
def remover_orcamento(
    orcamento_id: str,
    service: OrcamentoService = Depends(get_orcamento_service),  # noqa: B008
) -> Response:
    service.remover(orcamento_id)
    return Response(status_code=204)
