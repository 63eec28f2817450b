from fastapi import APIRouter, Depends, HTTPException

from gestao.application.dtos.empresa_dto import EmpresaDTO, EmpresaRequest
from gestao.application.services.empresa_service import EmpresaService
from gestao.interfaces.api.dependencies import get_empresa_service
from gestao.interfaces.api.erros import erro_validacao

router = APIRouter()


@router.get("/empresa", response_model=EmpresaDTO)
def get_empresa(
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> EmpresaDTO:
    dados = service.obter()
    if dados is None:
        raise HTTPException(status_code=404, detail="Dados da empresa nao cadastrados")
    return EmpresaDTO.from_domain(dados)


@router.put("/empresa", response_model=EmpresaDTO)
def definir_empresa(
    body: EmpresaRequest,
    service: EmpresaService = Depends(get_empresa_service),  # noqa: B008
) -> EmpresaDTO:
    try:
        dados = service.definir(**body.model_dump())
    except ValueError as err:
        raise erro_validacao(err) from err
    return EmpresaDTO.from_domain(dados)
