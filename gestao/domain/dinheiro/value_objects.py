from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENTAVO = Decimal("0.01")


@dataclass(frozen=True, order=True)
class Dinheiro:
    """Valor monetario em centavos inteiros. Nunca float.

    A conversao para reais (Decimal com 2 casas) acontece apenas na borda:
    formatacao, DTOs e persistencia.
    """

    centavos: int

    def __post_init__(self) -> None:
        if isinstance(self.centavos, bool) or not isinstance(self.centavos, int):
            raise TypeError(f"Dinheiro exige centavos inteiros, recebeu {type(self.centavos).__name__}")

    @classmethod
    def de(cls, valor: Dinheiro | Decimal | int | str) -> Dinheiro:
        """Converte reais (Decimal, int ou str decimal com ponto) para Dinheiro.

        Arredonda HALF_UP para o centavo. float e rejeitado: a imprecisao
        binaria ja aconteceu antes de chegar aqui.
        """
        if isinstance(valor, Dinheiro):
            return valor
        if isinstance(valor, (float, bool)):
            raise TypeError("Dinheiro nao aceita float nem bool; use Decimal ou str")
        try:
            decimal = Decimal(valor)
        except (InvalidOperation, TypeError, ValueError) as err:
            raise ValueError(f"Valor monetario invalido: {valor!r}") from err
        if not decimal.is_finite():
            raise ValueError(f"Valor monetario invalido: {valor!r}")
        try:
            arredondado = decimal.quantize(_CENTAVO, rounding=ROUND_HALF_UP)
        except InvalidOperation as err:
            # mais digitos do que a precisao do contexto Decimal comporta
            raise ValueError(f"Valor monetario fora da faixa: {valor!r}") from err
        return cls(int(arredondado.scaleb(2)))

    @classmethod
    def somar(cls, valores: Iterable[Dinheiro]) -> Dinheiro:
        return cls(sum(v.centavos for v in valores))

    @property
    def valor(self) -> Decimal:
        """Reais com exatamente 2 casas decimais."""
        return Decimal(self.centavos).scaleb(-2)

    @property
    def negativo(self) -> bool:
        return self.centavos < 0

    def aplicar_percentual(self, percentual: Decimal) -> Dinheiro:
        """valor * percentual / 100, arredondado HALF_UP para o centavo."""
        bruto = Decimal(self.centavos) * Decimal(percentual) / Decimal(100)
        return Dinheiro(int(bruto.quantize(Decimal(1), rounding=ROUND_HALF_UP)))

    def __add__(self, other: object) -> Dinheiro:
        if not isinstance(other, Dinheiro):
            return NotImplemented
        return Dinheiro(self.centavos + other.centavos)

    def __sub__(self, other: object) -> Dinheiro:
        if not isinstance(other, Dinheiro):
            return NotImplemented
        return Dinheiro(self.centavos - other.centavos)

    def __mul__(self, quantidade: object) -> Dinheiro:
        if isinstance(quantidade, bool) or not isinstance(quantidade, int):
            return NotImplemented
        return Dinheiro(self.centavos * quantidade)

    __rmul__ = __mul__

    def __neg__(self) -> Dinheiro:
        return Dinheiro(-self.centavos)

    def __str__(self) -> str:
        return str(self.valor)

    def __repr__(self) -> str:
        return f"Dinheiro({str(self.valor)!r})"


ZERO = Dinheiro(0)
