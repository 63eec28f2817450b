# gestao/domain/status.py
#
# Contrato de campos por status de visita e manutencao.
#
# Design decisions:
#   - Transicoes sao livres: qualquer status pode ir para qualquer outro por
#     escolha do usuario. O que o status controla e quais campos passam a ser
#     obrigatorios na submissao.
#   - validar_campos_status devolve a LISTA de campos ausentes (vazia = ok).
#     Nao levanta excecao: quem chama decide se bloqueia a submissao.
#   - O registro pode ser a entidade Visita ou um Mapping cru (payload de
#     formulario/linha do banco). Para Mapping os nomes de coluna sao os
#     mesmos atributos da entidade.
#   - Status de manutencao nao exigem campos adicionais.
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .erros import CampoObrigatorioAusente
from .manutencao.value_objects import StatusManutencao
from .visita.value_objects import StatusVisita


@dataclass(frozen=True)
class _Exigencia:
    campo: str
    mensagem: str


EXIGENCIAS_POR_STATUS: dict[StatusVisita, tuple[_Exigencia, ...]] = {
    StatusVisita.VAI_PENSAR: (_Exigencia("data_retorno", "Informe a data de retorno ao cliente"),),
    StatusVisita.FINALIZADA_NAO_COMPROU: (_Exigencia("motivo_recusa", "Informe o motivo da nao compra"),),
}

_STATUS_MANUTENCAO = frozenset(s.value for s in StatusManutencao)


def _ler(registro: object, campo: str) -> object:
    if isinstance(registro, Mapping):
        return registro.get(campo)
    return getattr(registro, campo, None)


def _preenchido(valor: object) -> bool:
    if valor is None:
        return False
    if isinstance(valor, str):
        return bool(valor.strip())
    return True


def validar_campos_status(
    status: StatusVisita | StatusManutencao | str,
    registro: object,
) -> list[CampoObrigatorioAusente]:
    """Funcao pura. Lista exatamente os campos exigidos pelo status e ausentes."""
    status_str = str(status)
    if status_str in _STATUS_MANUTENCAO:
        return []
    try:
        status_visita = StatusVisita(status_str)
    except ValueError:
        return [
            CampoObrigatorioAusente(campo="status", status=status_str, mensagem=f"Status desconhecido: {status_str}")
        ]

    return [
        CampoObrigatorioAusente(campo=e.campo, status=status_visita.value, mensagem=e.mensagem)
        for e in EXIGENCIAS_POR_STATUS.get(status_visita, ())
        if not _preenchido(_ler(registro, e.campo))
    ]
