from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum


class TipoDocumento(StrEnum):
    CPF = "CPF"
    CNPJ = "CNPJ"


def _digito_verificador(digitos: str, pesos: list[int]) -> int:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos, strict=True))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def _verificar_cnpj(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ."""
    pesos_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    pesos_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    return (
        int(digitos[12]) == _digito_verificador(digitos[:12], pesos_1)
        and int(digitos[13]) == _digito_verificador(digitos[:13], pesos_2)
    )


def _verificar_cpf(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CPF."""
    pesos_1 = list(range(10, 1, -1))
    pesos_2 = list(range(11, 1, -1))
    return (
        int(digitos[9]) == _digito_verificador(digitos[:9], pesos_1)
        and int(digitos[10]) == _digito_verificador(digitos[:10], pesos_2)
    )


_REGRAS: dict[TipoDocumento, tuple[int, Callable[[str], bool]]] = {
    TipoDocumento.CPF: (11, _verificar_cpf),
    TipoDocumento.CNPJ: (14, _verificar_cnpj),
}


@dataclass(frozen=True)
class Documento:
    """Value Object imutavel para CPF/CNPJ. Valida digitos verificadores no construtor."""

    tipo: TipoDocumento
    _valor: str  # so digitos

    def __init__(self, tipo: TipoDocumento | str, raw: str) -> None:
        tipo = TipoDocumento(tipo)
        digitos = "".join(c for c in raw if c in "0123456789")
        tamanho, verificar = _REGRAS[tipo]
        if len(digitos) != tamanho:
            raise ValueError(f"{tipo.value} invalido: comprimento {len(digitos)}, esperado {tamanho}")
        if len(set(digitos)) == 1:
            raise ValueError(f"{tipo.value} invalido: todos digitos iguais")
        if not verificar(digitos):
            raise ValueError(f"{tipo.value} invalido: digitos verificadores incorretos")
        object.__setattr__(self, "tipo", tipo)
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        """Digitos sem formatacao."""
        return self._valor

    @property
    def formatado(self) -> str:
        """CPF: XXX.XXX.XXX-XX; CNPJ: XX.XXX.XXX/XXXX-XX"""
        d = self._valor
        if self.tipo == TipoDocumento.CPF:
            return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Documento):
            return NotImplemented
        return self.tipo == other.tipo and self._valor == other._valor

    def __hash__(self) -> int:
        return hash((self.tipo, self._valor))

    def __repr__(self) -> str:
        return f"Documento({self.tipo.value}, {self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


@dataclass(frozen=True)
class NomeCliente:
    """Nome nao-vazio, trimado."""

    valor: str

    def __post_init__(self) -> None:
        stripped = self.valor.strip()
        if not stripped:
            raise ValueError("Nome do cliente nao pode ser vazio")
        object.__setattr__(self, "valor", stripped)


@dataclass(frozen=True)
class Endereco:
    """Endereco devolvido pela consulta de CEP."""

    cep: str
    logradouro: str
    bairro: str
    cidade: str
    uf: str
