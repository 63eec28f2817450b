from enum import StrEnum


class StatusVisita(StrEnum):
    AGENDADA = "scheduled"
    EM_NEGOCIACAO = "in_negotiation"
    FINALIZADA_COMPROU = "completed_purchase"
    FINALIZADA_NAO_COMPROU = "completed_no_purchase"
    REAGENDADA = "rescheduled"
    AUSENTE = "absent"
    VAI_PENSAR = "thinking"

    @property
    def rotulo(self) -> str:
        return ROTULOS_STATUS_VISITA[self]


ROTULOS_STATUS_VISITA: dict[StatusVisita, str] = {
    StatusVisita.AGENDADA: "Agendado",
    StatusVisita.EM_NEGOCIACAO: "Em Negociacao",
    StatusVisita.FINALIZADA_COMPROU: "Finalizado - Comprou",
    StatusVisita.FINALIZADA_NAO_COMPROU: "Finalizado - Nao Comprou",
    StatusVisita.REAGENDADA: "Reagendado",
    StatusVisita.AUSENTE: "Cliente Ausente",
    StatusVisita.VAI_PENSAR: "Cliente vai Pensar",
}
