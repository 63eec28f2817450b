from fastapi import APIRouter, Depends, HTTPException, Query, Response

from gestao.application.dtos.agenda_dto import (
    ConcluirManutencaoRequest,
    ManutencaoCreateRequest,
    ManutencaoDTO,
    ManutencaoPatchRequest,
    VisitaCreateRequest,
    VisitaDTO,
    VisitaPatchRequest,
)
from gestao.application.services.agenda_service import ManutencaoService, VisitaService
from gestao.domain.manutencao.entities import Manutencao
from gestao.domain.visita.entities import Visita
from gestao.domain.visita.value_objects import StatusVisita
from gestao.interfaces.api.dependencies import get_manutencao_service, get_visita_service
from gestao.interfaces.api.erros import erro_validacao

router = APIRouter()


@router.get("/visitas", response_model=list[VisitaDTO])
def listar_visitas(
    vendedor_id: str | None = Query(default=None),
    status: StatusVisita | None = Query(default=None),
    proximas: bool = Query(default=False),
    service: VisitaService = Depends(get_visita_service),  # noqa: B008
) -> list[VisitaDTO]:
    if proximas:
        visitas = service.proximas(vendedor_id, status=status)
    else:
        visitas = service.listar(vendedor_id, status)
    return [VisitaDTO.from_domain(v) for v in visitas]


@router.post("/visitas", response_model=VisitaDTO, status_code=201)
def criar_visita(
    body: VisitaCreateRequest,
    service: VisitaService = Depends(get_visita_service),  # noqa: B008
) -> VisitaDTO:
    try:
        visita = service.criar(Visita(id="", **body.model_dump()))
    except ValueError as err:
        raise erro_validacao(err) from err
    return VisitaDTO.from_domain(visita)


@router.patch("/visitas/{visita_id}", response_model=VisitaDTO)
def atualizar_visita(
    visita_id: str,
    body: VisitaPatchRequest,
    service: VisitaService = Depends(get_visita_service),  # noqa: B008
) -> VisitaDTO:
    try:
        visita = service.atualizar(visita_id, **body.model_dump(exclude_none=True))
    except ValueError as err:
        raise erro_validacao(err) from err
    if visita is None:
        raise HTTPException(status_code=404, detail="Visita nao encontrada")
    return VisitaDTO.from_domain(visita)


@router.delete("/visitas/{visita_id}", status_code=204)
def remover_visita(
    visita_id: str,
    service: VisitaService = Depends(get_visita_service),  # noqa: B008
) -> Response:
    service.remover(visita_id)
    return Response(status_code=204)


# /manutencoes/proximas ANTES de /manutencoes/{manutencao_id}
@router.get("/manutencoes/proximas", response_model=list[ManutencaoDTO])
def listar_proximas_manutencoes(
    vendedor_id: str | None = Query(default=None),
    service: ManutencaoService = Depends(get_manutencao_service),  # noqa: B008
) -> list[ManutencaoDTO]:
    return [ManutencaoDTO.from_domain(m) for m in service.proximas(vendedor_id)]


@router.get("/manutencoes", response_model=list[ManutencaoDTO])
def listar_manutencoes(
    vendedor_id: str | None = Query(default=None),
    service: ManutencaoService = Depends(get_manutencao_service),  # noqa: B008
) -> list[ManutencaoDTO]:
    return [ManutencaoDTO.from_domain(m) for m in service.listar(vendedor_id)]


@router.post("/manutencoes", response_model=ManutencaoDTO, status_code=201)
def criar_manutencao(
    body: ManutencaoCreateRequest,
    service: ManutencaoService = Depends(get_manutencao_service),  # noqa: B008
) -> ManutencaoDTO:
    try:
        manutencao = service.criar(Manutencao(id="", **body.model_dump()))
    except ValueError as err:
        raise erro_validacao(err) from err
    return ManutencaoDTO.from_domain(manutencao)


@router.post("/manutencoes/{manutencao_id}/concluir", response_model=ManutencaoDTO)
def concluir_manutencao(
    manutencao_id: str,
    body: ConcluirManutencaoRequest | None = None,
    service: ManutencaoService = Depends(get_manutencao_service),  # noqa: B008
) -> ManutencaoDTO:
    observacoes = body.observacoes if body else None
    manutencao = service.concluir(manutencao_id, observacoes)
    if manutencao is None:
        raise HTTPException(status_code=404, detail="Manutencao nao encontrada")
    return ManutencaoDTO.from_domain(manutencao)


@router.patch("/manutencoes/{manutencao_id}", response_model=ManutencaoDTO)
def atualizar_manutencao(
    manutencao_id: str,
    body: ManutencaoPatchRequest,
    service: ManutencaoService = Depends(get_manutencao_service),  # noqa: B008
) -> ManutencaoDTO:
    try:
        manutencao = service.atualizar(manutencao_id, **body.model_dump())
    except ValueError as err:
        raise erro_validacao(err) from err
    if manutencao is None:
        raise HTTPException(status_code=404, detail="Manutencao nao encontrada")
    return ManutencaoDTO.from_domain(manutencao)


@router.delete("/manutencoes/{manutencao_id}", status_code=204)
def remover_manutencao(
    manutencao_id: str,
    service: ManutencaoService = Depends(get_manutencao_service),  # noqa: B008
) -> Response:
    service.remover(manutencao_id)
    return Response(status_code=204)
