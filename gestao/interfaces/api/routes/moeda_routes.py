from fastapi import APIRouter, HTTPException

from gestao.application.dtos.moeda_dto import (
    FormatarRequest,
    FormatarResponse,
    MascaraRequest,
    MascaraResponse,
    ParseRequest,
    ParseResponse,
    valor_str,
)
from gestao.domain.dinheiro.formatacao import (
    formatar_moeda,
    formatar_moeda_com_simbolo,
    mascarar_digitacao,
    parse_moeda,
)
from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.erros import ErroParseMoeda

router = APIRouter()


@router.post("/moeda/formatar", response_model=FormatarResponse)
def formatar(body: FormatarRequest) -> FormatarResponse:
    valor = Dinheiro.de(body.valor)  # body.valor ja validado: 2 casas, |valor| < 10^12
    return FormatarResponse(
        valor=valor_str(valor),
        formatado=formatar_moeda(valor),
        com_simbolo=formatar_moeda_com_simbolo(valor),
    )


@router.post("/moeda/parse", response_model=ParseResponse)
def parse(body: ParseRequest) -> ParseResponse:
    try:
        valor = parse_moeda(body.texto)
    except ErroParseMoeda as err:
        raise HTTPException(status_code=422, detail=err.mensagem) from err
    return ParseResponse(valor=valor_str(valor), formatado=formatar_moeda(valor))


@router.post("/moeda/mascara", response_model=MascaraResponse)
def mascara(body: MascaraRequest) -> MascaraResponse:
    try:
        mascarado = mascarar_digitacao(body.texto)
    except ErroParseMoeda as err:
        raise HTTPException(status_code=422, detail=err.mensagem) from err
    return MascaraResponse.from_mascara(mascarado)
