# gestao/domain/dinheiro/formatacao.py
#
# Conversao entre Dinheiro e o texto monetario brasileiro (1.234,56).
#
# Design decisions:
#   - Formatacao trabalha sobre centavos inteiros: divmod por 100 e
#     agrupamento de milhares com f-string. Nunca passa por float, entao
#     magnitudes grandes nunca caem em notacao cientifica.
#   - A mascara de digitacao trata TODOS os digitos como centavos: os dois
#     ultimos digitados sao sempre a fracao. Sem digitos -> "" (nao "0,00").
#   - parse_moeda sem virgula trata a sequencia de digitos como reais
#     inteiros. A heuristica antiga "se < 100 sao centavos" fazia "50" virar
#     R$ 0,50 e NAO e reproduzida.
#   - Pontos so sao aceitos como separador de milhar bem formado (grupos de
#     3). "1234.56" e rejeitado em vez de ser reinterpretado em silencio.
#
# Invariants:
#   - parse_moeda(formatar_moeda(x)) == x para todo Dinheiro x.
#   - mascarar_digitacao(extrair_digitos(mascarar_digitacao(d))) ==
#     mascarar_digitacao(d).
from __future__ import annotations

import re
from decimal import Decimal

from ..erros import ErroParseMoeda
from .value_objects import Dinheiro

SIMBOLO = "R$"

_NAO_DIGITO = re.compile(r"[^0-9]")
_TEXTO_MONETARIO = re.compile(r"^(?P<inteiro>\d{1,3}(?:\.\d{3})+|\d+)(?:,(?P<fracao>\d{1,2}))?$", re.ASCII)
# Intl.NumberFormat usa NBSP entre simbolo e valor; copiar/colar traz isso junto.
_ESPACOS = str.maketrans("", "", " \u00a0\u202f\t")


def extrair_digitos(texto: str) -> str:
    return _NAO_DIGITO.sub("", texto)


def formatar_moeda(valor: Dinheiro | Decimal | int | str) -> str:
    """1234.5 -> '1.234,50'. Sem simbolo."""
    dinheiro = Dinheiro.de(valor)
    sinal = "-" if dinheiro.negativo else ""
    reais, centavos = divmod(abs(dinheiro.centavos), 100)
    agrupado = f"{reais:,}".replace(",", ".")
    return f"{sinal}{agrupado},{centavos:02d}"


def formatar_moeda_com_simbolo(valor: Dinheiro | Decimal | int | str) -> str:
    """1234.5 -> 'R$ 1.234,50'; negativos -> '-R$ 1.234,50'."""
    texto = formatar_moeda(valor)
    if texto.startswith("-"):
        return f"-{SIMBOLO} {texto[1:]}"
    return f"{SIMBOLO} {texto}"


def mascarar_digitacao(texto: str) -> str:
    """Mascara de input: digitos sao centavos. '15000' -> '150,00'."""
    digitos = extrair_digitos(texto)
    if not digitos:
        return ""
    try:
        centavos = int(digitos)
    except ValueError as err:
        # limite de conversao int <-> str do interpretador
        raise ErroParseMoeda(texto, "digitos demais") from err
    return formatar_moeda(Dinheiro(centavos))


def parse_moeda(texto: str) -> Dinheiro:
    """Inverso de formatar_moeda. Aceita simbolo R$ e sinal negativo opcionais.

    Raises:
        ErroParseMoeda: texto vazio, com lixo, milhar mal formado ou mais de
            duas casas decimais.
    """
    if not isinstance(texto, str):
        raise ErroParseMoeda(repr(texto), "esperado texto")

    limpo = texto.translate(_ESPACOS)
    negativo = limpo.startswith("-")
    if negativo:
        limpo = limpo[1:]
    if limpo.startswith(SIMBOLO):
        limpo = limpo[len(SIMBOLO):]
    if not negativo and limpo.startswith("-"):
        negativo = True
        limpo = limpo[1:]

    if not limpo:
        raise ErroParseMoeda(texto, "vazio")

    match = _TEXTO_MONETARIO.fullmatch(limpo)
    if match is None:
        if re.fullmatch(r"[0-9.]+,[0-9]{3,}", limpo):
            raise ErroParseMoeda(texto, "mais de duas casas decimais")
        raise ErroParseMoeda(texto)

    try:
        reais = int(match.group("inteiro").replace(".", ""))
    except ValueError as err:
        raise ErroParseMoeda(texto, "digitos demais") from err
    fracao = (match.group("fracao") or "").ljust(2, "0")
    centavos = reais * 100 + int(fracao)
    return Dinheiro(-centavos if negativo else centavos)
