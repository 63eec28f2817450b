"""Taxonomia de erros do dominio.

Erros de entrada (parse) sao excecoes ValueError, como nos value objects.
Erros de regra (desconto, campos por status) sao VALORES devolvidos pelas
funcoes puras; a camada HTTP decide como apresenta-los.
"""
from __future__ import annotations

from dataclasses import dataclass

from .dinheiro.value_objects import Dinheiro


class ErroParseMoeda(ValueError):
    """Texto nao interpretavel como valor monetario."""

    def __init__(self, texto: str, motivo: str = "formato nao reconhecido") -> None:
        super().__init__(f"Valor monetario invalido ({motivo}): {texto!r}")
        self.texto = texto
        self.motivo = motivo

    @property
    def mensagem(self) -> str:
        return "Valor invalido. Use o formato 1.234,56"


@dataclass(frozen=True)
class ErroDescontoInvalido:
    """Desconto fora de [0, subtotal]. A operacao deve ser bloqueada."""

    desconto: Dinheiro
    subtotal: Dinheiro

    @property
    def mensagem(self) -> str:
        if self.desconto.negativo:
            return "Desconto nao pode ser negativo"
        return f"Desconto de {self.desconto.valor} excede o subtotal de {self.subtotal.valor}"


@dataclass(frozen=True)
class CampoObrigatorioAusente:
    """Campo exigido pelo status atual e nao preenchido."""

    campo: str
    status: str
    mensagem: str


class ErroArmazenamento(Exception):
    """Falha opaca do record store. Nao e re-tentada."""

    def __init__(self, mensagem: str, tabela: str | None = None) -> None:
        super().__init__(mensagem)
        self.mensagem = mensagem
        self.tabela = tabela


class RegistroNaoEncontrado(ErroArmazenamento):
    def __init__(self, tabela: str, registro_id: str) -> None:
        super().__init__(f"Registro {registro_id} nao encontrado em {tabela}", tabela)
        self.registro_id = registro_id


class ErroConsultaExterna(Exception):
    """Servico externo (ex.: ViaCEP) indisponivel ou com resposta invalida."""


class RegistroDuplicado(ErroArmazenamento):
    """Violacao de unicidade detectada antes da escrita (ex.: email de cliente)."""


class ErroValidacao(ValueError):
    """Operacao recusada por regra de negocio; detalhes lista cada violacao."""

    def __init__(self, detalhes: list[str]) -> None:
        super().__init__("; ".join(detalhes))
        self.detalhes = detalhes
