from enum import StrEnum


class TipoManutencao(StrEnum):
    REFIL_30 = "refil_30"
    REFIL_90 = "refil_90"
    REFIL_120 = "refil_120"
    PREVENTIVA = "preventiva"
    CORRETIVA = "corretiva"

    @property
    def rotulo(self) -> str:
        return ROTULOS_TIPO_MANUTENCAO[self]


class StatusManutencao(StrEnum):
    AGENDADO = "agendado"
    EM_ANDAMENTO = "em_andamento"
    CONCLUIDO = "concluido"
    CANCELADO = "cancelado"


ROTULOS_TIPO_MANUTENCAO: dict[TipoManutencao, str] = {
    TipoManutencao.REFIL_30: "Troca de Refil (30 dias)",
    TipoManutencao.REFIL_90: "Troca de Refil (90 dias)",
    TipoManutencao.REFIL_120: "Troca de Refil (120 dias)",
    TipoManutencao.PREVENTIVA: "Manutencao Preventiva",
    TipoManutencao.CORRETIVA: "Manutencao Corretiva",
}

# Dias ate a proxima manutencao, por tipo. Tabela fixa.
DIAS_ATE_PROXIMA: dict[TipoManutencao, int] = {
    TipoManutencao.REFIL_30: 30,
    TipoManutencao.REFIL_90: 90,
    TipoManutencao.REFIL_120: 120,
    TipoManutencao.PREVENTIVA: 180,  # 6 meses
    TipoManutencao.CORRETIVA: 90,  # 3 meses
}
