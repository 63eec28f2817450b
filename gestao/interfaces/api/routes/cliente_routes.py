from fastapi import APIRouter, Depends, HTTPException, Response

from gestao.application.dtos.cliente_dto import ClienteCreateRequest, ClienteDTO, ClientePatchRequest, EnderecoDTO
from gestao.application.services.cliente_service import ClienteService
from gestao.interfaces.api.dependencies import get_cliente_service
from gestao.interfaces.api.erros import erro_validacao

router = APIRouter()


@router.get("/clientes", response_model=list[ClienteDTO])
def listar_clientes(
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
) -> list[ClienteDTO]:
    return [ClienteDTO.from_domain(c) for c in service.listar()]


@router.post("/clientes", response_model=ClienteDTO, status_code=201)
def criar_cliente(
    body: ClienteCreateRequest,
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
) -> ClienteDTO:
    try:
        cliente = service.criar(**body.model_dump())
    except ValueError as err:
        raise erro_validacao(err) from err
    return ClienteDTO.from_domain(cliente)


@router.get("/clientes/{cliente_id}", response_model=ClienteDTO)
def get_cliente(
    cliente_id: str,
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
) -> ClienteDTO:
    cliente = service.buscar(cliente_id)
    if cliente is None:
        raise HTTPException(status_code=404, detail="Cliente nao encontrado")
    return ClienteDTO.from_domain(cliente)


@router.patch("/clientes/{cliente_id}", response_model=ClienteDTO)
def atualizar_cliente(
    cliente_id: str,
    body: ClientePatchRequest,
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
) -> ClienteDTO:
    try:
        cliente = service.atualizar(cliente_id, **body.model_dump())
    except ValueError as err:
        raise erro_validacao(err) from err
    if cliente is None:
        raise HTTPException(status_code=404, detail="Cliente nao encontrado")
    return ClienteDTO.from_domain(cliente)


@router.delete("/clientes/{cliente_id}", status_code=204)
def remover_cliente(
    cliente_id: str,
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
) -> Response:
    service.remover(cliente_id)
    return Response(status_code=204)


@router.get("/cep/{cep}", response_model=EnderecoDTO)
def buscar_cep(
    cep: str,
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
) -> EnderecoDTO:
    try:
        endereco = service.buscar_cep(cep)
    except ValueError as err:
        raise HTTPException(status_code=422, detail="CEP invalido") from err
    if endereco is None:
        raise HTTPException(status_code=404, detail="CEP nao encontrado")
    return EnderecoDTO.from_domain(endereco)
