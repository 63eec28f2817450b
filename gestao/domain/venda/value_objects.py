from enum import StrEnum


class TipoItem(StrEnum):
    PRODUTO = "product"
    SERVICO = "service"


class StatusVenda(StrEnum):
    CONCLUIDA = "completed"
    CANCELADA = "cancelled"


class StatusOrcamento(StrEnum):
    RASCUNHO = "draft"
    ENVIADO = "sent"
    ACEITO = "accepted"
    RECUSADO = "rejected"
