from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field

from gestao.domain.manutencao.entities import Manutencao
from gestao.domain.manutencao.value_objects import StatusManutencao, TipoManutencao
from gestao.domain.visita.entities import Visita
from gestao.domain.visita.value_objects import StatusVisita

from .tempo import InstanteLocal


def _iso(valor: datetime | None) -> str | None:
    return valor.isoformat() if valor else None


class VisitaCreateRequest(BaseModel):
    cliente_nome: str = Field(min_length=1)
    cliente_id: str | None = None
    vendedor_id: str = Field(min_length=1)
    data_agendada: InstanteLocal
    status: StatusVisita = StatusVisita.AGENDADA
    observacoes: str = ""
    data_retorno: InstanteLocal | None = None
    motivo_recusa: str | None = None
    tipo_manutencao: str | None = None
    local: str = ""


class VisitaPatchRequest(BaseModel):
    cliente_nome: Annotated[str, Field(min_length=1)] | None = None
    data_agendada: InstanteLocal | None = None
    status: StatusVisita | None = None
    observacoes: str | None = None
    data_retorno: InstanteLocal | None = None
    motivo_recusa: str | None = None
    tipo_manutencao: str | None = None
    local: str | None = None


class VisitaDTO(BaseModel):
    id: str
    cliente_nome: str
    cliente_id: str | None
    vendedor_id: str
    data_agendada: str
    status: str
    status_rotulo: str
    observacoes: str
    data_retorno: str | None
    motivo_recusa: str | None
    tipo_manutencao: str | None
    local: str

    @classmethod
    def from_domain(cls, visita: Visita) -> VisitaDTO:
        return cls(
            id=visita.id,
            cliente_nome=visita.cliente_nome,
            cliente_id=visita.cliente_id,
            vendedor_id=visita.vendedor_id,
            data_agendada=visita.data_agendada.isoformat(),
            status=visita.status.value,
            status_rotulo=visita.status.rotulo,
            observacoes=visita.observacoes,
            data_retorno=_iso(visita.data_retorno),
            motivo_recusa=visita.motivo_recusa,
            tipo_manutencao=visita.tipo_manutencao,
            local=visita.local,
        )


class ManutencaoCreateRequest(BaseModel):
    cliente_id: str = Field(min_length=1)
    cliente_nome: str = Field(min_length=1)
    cliente_telefone: str | None = None
    produto_nome: str = Field(min_length=1)
    tipo: TipoManutencao
    data_agendada: InstanteLocal
    vendedor_id: str = Field(min_length=1)
    vendedor_nome: str = ""
    observacoes: str = ""


class ManutencaoPatchRequest(BaseModel):
    produto_nome: Annotated[str, Field(min_length=1)] | None = None
    tipo: TipoManutencao | None = None
    data_agendada: InstanteLocal | None = None
    status: StatusManutencao | None = None
    observacoes: str | None = None


class ConcluirManutencaoRequest(BaseModel):
    observacoes: str | None = None


class ManutencaoDTO(BaseModel):
    id: str
    cliente_id: str
    cliente_nome: str
    cliente_telefone: str | None
    produto_nome: str
    tipo: str
    tipo_rotulo: str
    data_agendada: str
    status: str
    observacoes: str
    vendedor_id: str
    vendedor_nome: str
    concluida_em: str | None
    proxima_manutencao_em: str | None

    @classmethod
    def from_domain(cls, manutencao: Manutencao) -> ManutencaoDTO:
        return cls(
            id=manutencao.id,
            cliente_id=manutencao.cliente_id,
            cliente_nome=manutencao.cliente_nome,
            cliente_telefone=manutencao.cliente_telefone,
            produto_nome=manutencao.produto_nome,
            tipo=manutencao.tipo.value,
            tipo_rotulo=manutencao.tipo.rotulo,
            data_agendada=manutencao.data_agendada.isoformat(),
            status=manutencao.status.value,
            observacoes=manutencao.observacoes,
            vendedor_id=manutencao.vendedor_id,
            vendedor_nome=manutencao.vendedor_nome,
            concluida_em=_iso(manutencao.concluida_em),
            proxima_manutencao_em=_iso(manutencao.proxima_manutencao_em),
        )
