# gestao/application/dtos/moeda_dto.py
#
# Dinheiro na borda HTTP.
#
# Design decisions:
#   - Entrada: ValorMonetario aceita numero JSON, string decimal com ponto
#     ("1500.50") ou texto brasileiro ("1.500,50", "R$ 1.500,50", "1.500").
#     Texto com virgula, simbolo ou milhar agrupado por ponto passa por
#     parse_moeda: "1.500" e R$ 1.500,00, nunca R$ 1,50.
#   - Mais de duas casas decimais e rejeitado, nunca arredondado em silencio.
#   - Magnitude limitada a DECIMAL(14,2) da tabela: |valor| < 10^12.
#   - Saida: string decimal ("3199.90") mais a versao formatada pt-BR.
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from gestao.domain.dinheiro.formatacao import SIMBOLO, formatar_moeda, parse_moeda
from gestao.domain.dinheiro.value_objects import Dinheiro

LIMITE = Decimal(10) ** 12
_MILHAR_AGRUPADO = re.compile(r"-?\d{1,3}(?:\.\d{3})+", re.ASCII)


def _dentro_do_limite(decimal: Decimal) -> Decimal:
    if abs(decimal) >= LIMITE:
        raise ValueError("Valor monetario fora da faixa (maximo 999.999.999.999,99)")
    return decimal


def aceitar_formato_brasileiro(valor: object) -> Decimal:
    if isinstance(valor, bool):
        raise ValueError("Valor monetario invalido")
    if isinstance(valor, str):
        texto = valor.strip()
        if "," in texto or SIMBOLO in texto or _MILHAR_AGRUPADO.fullmatch(texto):
            return _dentro_do_limite(parse_moeda(texto).valor)
        valor = texto
    if isinstance(valor, float):
        valor = repr(valor)
    try:
        decimal = Decimal(valor)  # type: ignore[arg-type]
    except (InvalidOperation, TypeError, ValueError) as err:
        raise ValueError("Valor invalido. Use o formato 1.234,56") from err
    if not decimal.is_finite():
        raise ValueError("Valor monetario invalido")
    _dentro_do_limite(decimal)
    if decimal != decimal.quantize(Decimal("0.01")):
        raise ValueError("Valor monetario com mais de duas casas decimais")
    return decimal


ValorMonetario = Annotated[Decimal, BeforeValidator(aceitar_formato_brasileiro)]
PrecoMonetario = Annotated[Decimal, BeforeValidator(aceitar_formato_brasileiro), Field(ge=0)]


def valor_str(valor: Dinheiro) -> str:
    return str(valor.valor)


class FormatarRequest(BaseModel):
    valor: ValorMonetario


class FormatarResponse(BaseModel):
    valor: str
    formatado: str
    com_simbolo: str


class ParseRequest(BaseModel):
    texto: str


class ParseResponse(BaseModel):
    valor: str
    formatado: str


class MascaraRequest(BaseModel):
    texto: str


class MascaraResponse(BaseModel):
    mascarado: str
    valor: str | None

    @classmethod
    def from_mascara(cls, mascarado: str) -> MascaraResponse:
        return cls(
            mascarado=mascarado,
            valor=valor_str(parse_moeda(mascarado)) if mascarado else None,
        )


class ValorDTO(BaseModel):
    valor: str
    formatado: str

    @classmethod
    def from_domain(cls, valor: Dinheiro) -> ValorDTO:
        return cls(valor=valor_str(valor), formatado=formatar_moeda(valor))
