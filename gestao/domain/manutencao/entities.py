from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import TypeVar

from .value_objects import DIAS_ATE_PROXIMA, StatusManutencao, TipoManutencao

_Instante = TypeVar("_Instante", date, datetime)


def proxima_manutencao(tipo: TipoManutencao | str, concluida_em: _Instante) -> _Instante:
    """Puro: concluida_em + dias da tabela DIAS_ATE_PROXIMA para o tipo."""
    return concluida_em + timedelta(days=DIAS_ATE_PROXIMA[TipoManutencao(tipo)])


@dataclass(frozen=True)
class Manutencao:
    id: str
    cliente_id: str
    cliente_nome: str
    produto_nome: str
    tipo: TipoManutencao
    data_agendada: datetime
    vendedor_id: str
    vendedor_nome: str = ""
    status: StatusManutencao = StatusManutencao.AGENDADO
    cliente_telefone: str | None = None
    observacoes: str = ""
    concluida_em: datetime | None = None
    proxima_manutencao_em: datetime | None = None
    criado_em: datetime | None = None

    def concluir(self, concluida_em: datetime, observacoes: str | None = None) -> Manutencao:
        """Carimba a conclusao e agenda a proxima pela tabela do tipo.
        Observacoes so sao substituidas quando informadas."""
        return replace(
            self,
            status=StatusManutencao.CONCLUIDO,
            concluida_em=concluida_em,
            proxima_manutencao_em=proxima_manutencao(self.tipo, concluida_em),
            observacoes=observacoes or self.observacoes,
        )

    def pendente(self, referencia: datetime) -> bool:
        return self.status == StatusManutencao.AGENDADO and self.data_agendada >= referencia
