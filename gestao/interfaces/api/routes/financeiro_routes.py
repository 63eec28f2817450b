from fastapi import APIRouter, Depends, Query, Response

from gestao.application.dtos.financeiro_dto import ResumoFinanceiroDTO, TransacaoCreateRequest, TransacaoDTO
from gestao.application.dtos.tempo import InstanteLocal
from gestao.application.services.financeiro_service import FinanceiroService
from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.financeiro.value_objects import TipoTransacao
from gestao.interfaces.api.dependencies import get_financeiro_service
from gestao.interfaces.api.erros import erro_validacao

router = APIRouter()


@router.get("/financeiro/transacoes", response_model=list[TransacaoDTO])
def listar_transacoes(
    inicio: InstanteLocal | None = Query(default=None),
    fim: InstanteLocal | None = Query(default=None),
    tipo: TipoTransacao | None = Query(default=None),
    categoria: str | None = Query(default=None),
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> list[TransacaoDTO]:
    return [TransacaoDTO.from_domain(t) for t in service.listar(inicio, fim, tipo, categoria)]


@router.post("/financeiro/transacoes", response_model=TransacaoDTO, status_code=201)
def criar_transacao(
    body: TransacaoCreateRequest,
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> TransacaoDTO:
    try:
        transacao = service.registrar(
            tipo=body.tipo,
            categoria=body.categoria,
            valor=Dinheiro.de(body.valor),
            forma_pagamento=body.forma_pagamento,
            descricao=body.descricao,
            data=body.data,
            referencia_id=body.referencia_id,
            referencia_tipo=body.referencia_tipo,
            vendedor_id=body.vendedor_id,
        )
    except ValueError as err:
        raise erro_validacao(err) from err
    return TransacaoDTO.from_domain(transacao)


@router.delete("/financeiro/transacoes/{transacao_id}", status_code=204)
def remover_transacao(
    transacao_id: str,
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> Response:
    service.remover(transacao_id)
    return Response(status_code=204)


@router.get("/financeiro/resumo", response_model=ResumoFinanceiroDTO)
def get_resumo(
    service: FinanceiroService = Depends(get_financeiro_service),  # noqa: B008
) -> ResumoFinanceiroDTO:
    return ResumoFinanceiroDTO.from_domain(service.resumo())
