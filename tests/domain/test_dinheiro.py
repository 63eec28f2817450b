# tests/domain/test_dinheiro.py
from decimal import Decimal

import pytest

from gestao.domain.dinheiro.formatacao import (
    extrair_digitos,
    formatar_moeda,
    formatar_moeda_com_simbolo,
    mascarar_digitacao,
    parse_moeda,
)
from gestao.domain.dinheiro.value_objects import ZERO, Dinheiro
from gestao.domain.erros import ErroParseMoeda


def test_dinheiro_de_decimal_em_centavos():
    assert Dinheiro.de(Decimal("1234.56")).centavos == 123456
    assert Dinheiro.de("10").centavos == 1000
    assert Dinheiro.de(7).centavos == 700


def test_dinheiro_arredonda_half_up():
    """Terceira casa decimal 5 sobe para o centavo seguinte."""
    assert Dinheiro.de("10.005").centavos == 1001
    assert Dinheiro.de("10.004").centavos == 1000


def test_dinheiro_rejeita_float():
    """Float ja perdeu precisao antes de chegar; nunca e aceito."""
    with pytest.raises(TypeError):
        Dinheiro.de(0.1)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Dinheiro(1.5)  # type: ignore[arg-type]


def test_dinheiro_rejeita_texto_invalido():
    with pytest.raises(ValueError, match="Valor monetario invalido"):
        Dinheiro.de("abc")
    with pytest.raises(ValueError):
        Dinheiro.de("NaN")


def test_dinheiro_aritmetica():
    a = Dinheiro.de("1500.00")
    b = Dinheiro.de("299.90")
    assert a * 2 + b == Dinheiro.de("3299.90")
    assert (a - b).valor == Decimal("1200.10")
    assert -a == Dinheiro(-150000)
    assert Dinheiro.somar([a, b, ZERO]) == Dinheiro.de("1799.90")


def test_dinheiro_aplicar_percentual_half_up():
    """5% de 3199,90 = 159,995 -> 160,00."""
    assert Dinheiro.de("3199.90").aplicar_percentual(Decimal("5")) == Dinheiro.de("160.00")


def test_formatar_moeda_pt_br():
    assert formatar_moeda(Dinheiro.de("1234.5")) == "1.234,50"
    assert formatar_moeda(Dinheiro.de("0")) == "0,00"
    assert formatar_moeda(Dinheiro.de("-1234.56")) == "-1.234,56"
    assert formatar_moeda("999") == "999,00"


def test_formatar_moeda_magnitude_grande_sem_notacao_cientifica():
    assert formatar_moeda(Dinheiro(10**17)) == "1.000.000.000.000.000,00"


def test_formatar_moeda_com_simbolo():
    assert formatar_moeda_com_simbolo(Dinheiro.de("1234.5")) == "R$ 1.234,50"
    assert formatar_moeda_com_simbolo(Dinheiro.de("-1234.5")) == "-R$ 1.234,50"


def test_parse_moeda_formato_brasileiro():
    assert parse_moeda("1.234,56") == Dinheiro(123456)
    assert parse_moeda("R$ 1.234,56") == Dinheiro(123456)
    assert parse_moeda("150,00") == Dinheiro.de("150.00")
    assert parse_moeda("0,5") == Dinheiro(50)


def test_parse_moeda_aceita_nbsp_do_intl():
    """Texto copiado de Intl.NumberFormat traz NBSP entre simbolo e valor."""
    assert parse_moeda("R$\u00a01.234,56") == Dinheiro(123456)
    assert parse_moeda("-R$\u00a010,00") == Dinheiro(-1000)


def test_parse_moeda_negativo():
    assert parse_moeda("-R$ 10,00") == Dinheiro(-1000)
    assert parse_moeda("R$ -10,00") == Dinheiro(-1000)
    assert parse_moeda("-1.000,01") == Dinheiro(-100001)


def test_parse_moeda_digitos_sem_virgula_sao_reais():
    """'50' e R$ 50,00, nunca R$ 0,50."""
    assert parse_moeda("50") == Dinheiro(5000)
    assert parse_moeda("150") == Dinheiro(15000)


def test_parse_moeda_rejeita_lixo():
    for texto in ["", "   ", "abc", "R$", "12a,00", "1,2,3"]:
        with pytest.raises(ErroParseMoeda):
            parse_moeda(texto)


def test_parse_moeda_rejeita_milhar_mal_formado():
    """Ponto so e aceito como separador de milhar com grupos de 3."""
    with pytest.raises(ErroParseMoeda):
        parse_moeda("1234.56")
    with pytest.raises(ErroParseMoeda):
        parse_moeda("1.23,00")


def test_parse_moeda_rejeita_mais_de_duas_casas():
    with pytest.raises(ErroParseMoeda, match="mais de duas casas"):
        parse_moeda("1,234")


def test_erro_parse_moeda_mensagem_para_usuario():
    with pytest.raises(ErroParseMoeda) as exc_info:
        parse_moeda("xyz")
    assert exc_info.value.mensagem == "Valor invalido. Use o formato 1.234,56"
    assert isinstance(exc_info.value, ValueError)


def test_round_trip_formatar_parse():
    """parse(format(a)) == a para valores com ate 2 casas."""
    for centavos in [0, 1, 99, 100, 12345, 100000000, -5, -123456789, 10**15]:
        valor = Dinheiro(centavos)
        assert parse_moeda(formatar_moeda(valor)) == valor
        assert parse_moeda(formatar_moeda_com_simbolo(valor)) == valor


def test_mascara_digitacao_trata_digitos_como_centavos():
    assert mascarar_digitacao("15000") == "150,00"
    assert mascarar_digitacao("1") == "0,01"
    assert mascarar_digitacao("123456") == "1.234,56"
    assert mascarar_digitacao("R$ 1.500,00") == "1.500,00"


def test_mascara_digitacao_sem_digitos_vazio():
    assert mascarar_digitacao("") == ""
    assert mascarar_digitacao("abc") == ""


def test_mascara_digitacao_idempotente():
    for entrada in ["0", "7", "15000", "00012", "999999999", "1a2b3"]:
        primeira = mascarar_digitacao(entrada)
        assert mascarar_digitacao(extrair_digitos(primeira)) == primeira


def test_mascara_teclas_e_parse():
    """Teclas 1,5,0,0,0 mostram 150,00; o parse do texto exibido da 150.00."""
    digitado = ""
    exibido = ""
    for tecla in "15000":
        digitado += tecla
        exibido = mascarar_digitacao(digitado)
    assert exibido == "150,00"
    assert parse_moeda(exibido).valor == Decimal("150.00")


def test_dinheiro_de_magnitude_acima_da_precisao_decimal():
    """Mais digitos do que o contexto Decimal comporta sai como ValueError, nao InvalidOperation."""
    with pytest.raises(ValueError, match="fora da faixa"):
        Dinheiro.de(Decimal("1e30"))
    with pytest.raises(ValueError, match="fora da faixa"):
        Dinheiro.de("1e30")


def test_parse_e_mascara_com_digitos_demais():
    with pytest.raises(ErroParseMoeda, match="digitos demais"):
        parse_moeda("9" * 5000)
    with pytest.raises(ErroParseMoeda, match="digitos demais"):
        mascarar_digitacao("9" * 5000)
