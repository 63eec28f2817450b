from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .value_objects import StatusVisita


@dataclass(frozen=True)
class Visita:
    """Os campos condicionais (data_retorno, motivo_recusa) sao checados por
    validar_campos_status no momento da submissao, nao no construtor: uma
    visita pode ser carregada do banco em estado incompleto."""

    id: str
    cliente_nome: str
    vendedor_id: str
    data_agendada: datetime
    status: StatusVisita = StatusVisita.AGENDADA
    cliente_id: str | None = None
    observacoes: str = ""
    data_retorno: datetime | None = None
    motivo_recusa: str | None = None
    tipo_manutencao: str | None = None
    local: str = ""
    criado_em: datetime | None = None
    atualizado_em: datetime | None = None

    def futura(self, referencia: datetime) -> bool:
        return self.data_agendada >= referencia
