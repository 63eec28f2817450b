# gestao/infrastructure/repositories/conversao.py
#
# Conversoes linha <-> entidade compartilhadas pelos repositorios.
#
# Invariants:
#   - Campo opcional malformado vira o padrao; campo obrigatorio malformado
#     levanta ValueError/TypeError/KeyError e a linha e rejeitada.
#   - Dinheiro vai para o banco como Decimal com 2 casas, nunca float.
from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from datetime import date, datetime
from decimal import Decimal
from typing import TypeVar

from gestao.domain.dinheiro.value_objects import ZERO, Dinheiro
from gestao.domain.erros import ErroArmazenamento
from gestao.domain.record_store import Linha
from gestao.domain.venda.entities import ItemLinha
from gestao.domain.venda.value_objects import TipoItem
from gestao.log import log

T = TypeVar("T")

ERROS_HIDRATACAO = (ValueError, TypeError, KeyError)


def dinheiro(valor: object) -> Dinheiro:
    if valor is None:
        raise ValueError("Valor monetario ausente")
    if isinstance(valor, float):
        valor = str(valor)
    return Dinheiro.de(valor)  # type: ignore[arg-type]


def dinheiro_ou_zero(valor: object) -> Dinheiro:
    try:
        return dinheiro(valor)
    except (ValueError, TypeError):
        return ZERO


def decimal(valor: Dinheiro) -> Decimal:
    return valor.valor


def texto(valor: object, padrao: str = "") -> str:
    if valor is None:
        return padrao
    return str(valor)


def texto_opcional(valor: object) -> str | None:
    if valor is None:
        return None
    limpo = str(valor).strip()
    return limpo or None


def instante(valor: object) -> datetime:
    """datetime, date ou ISO 8601. Ausente e erro."""
    if isinstance(valor, datetime):
        return valor
    if isinstance(valor, date):
        return datetime(valor.year, valor.month, valor.day)
    if isinstance(valor, str):
        return datetime.fromisoformat(valor)
    raise ValueError(f"Data invalida: {valor!r}")


def instante_opcional(valor: object) -> datetime | None:
    if valor is None or valor == "":
        return None
    try:
        return instante(valor)
    except ValueError:
        return None


def inteiro(valor: object, padrao: int = 0) -> int:
    if valor is None:
        return padrao
    try:
        return int(valor)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return padrao


def itens_para_json(itens: Iterable[ItemLinha]) -> str:
    return json.dumps(
        [
            {
                "tipo": item.tipo.value,
                "item_id": item.item_id,
                "nome": item.nome,
                "preco_unitario": str(item.preco_unitario.valor),
                "quantidade": item.quantidade,
            }
            for item in itens
        ],
        ensure_ascii=False,
    )


def itens_de_json(bruto: object) -> tuple[ItemLinha, ...]:
    dados = json.loads(bruto) if isinstance(bruto, str) else bruto
    if not isinstance(dados, list):
        raise ValueError("Itens devem ser uma lista")
    return tuple(
        ItemLinha(
            tipo=TipoItem(d["tipo"]),
            item_id=str(d["item_id"]),
            nome=str(d["nome"]),
            preco_unitario=dinheiro(d["preco_unitario"]),
            quantidade=int(d["quantidade"]),
        )
        for d in dados
    )


def hidratar_todos(linhas: Iterable[Linha], hidratar: Callable[[Linha], T], tabela: str) -> list[T]:
    """Linhas que nao hidratam sao descartadas com log; o restante segue."""
    resultado: list[T] = []
    for linha in linhas:
        try:
            resultado.append(hidratar(linha))
        except ERROS_HIDRATACAO as exc:
            log(f"Linha invalida em {tabela} (id={linha.get('id')}): {exc}", nivel="WARN")
    return resultado


def hidratar_um(linha: Linha | None, hidratar: Callable[[Linha], T], tabela: str) -> T | None:
    if linha is None:
        return None
    try:
        return hidratar(linha)
    except ERROS_HIDRATACAO as exc:
        raise ErroArmazenamento(f"Registro {linha.get('id')} em {tabela} esta corrompido", tabela) from exc
