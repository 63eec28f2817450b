# tests/domain/test_carrinho.py
import pytest

from gestao.domain.dinheiro.value_objects import ZERO, Dinheiro
from gestao.domain.venda.carrinho import Carrinho, calcular_agregado
from gestao.domain.venda.entities import ItemLinha
from gestao.domain.venda.value_objects import TipoItem


def _produto_a(quantidade: int = 2) -> ItemLinha:
    return ItemLinha(
        tipo=TipoItem.PRODUTO,
        item_id="p-a",
        nome="Produto A",
        preco_unitario=Dinheiro.de("1500.00"),
        quantidade=quantidade,
    )


def _servico_b() -> ItemLinha:
    return ItemLinha(
        tipo=TipoItem.SERVICO,
        item_id="s-b",
        nome="Servico B",
        preco_unitario=Dinheiro.de("299.90"),
    )


def test_agregado_cenario_produto_e_servico_com_desconto():
    """1500,00 x2 + 299,90 x1 - 100,00 = 3199,90."""
    resultado = calcular_agregado([_produto_a(), _servico_b()], Dinheiro.de("100.00"))
    assert resultado.subtotal == Dinheiro.de("3299.90")
    assert resultado.total == Dinheiro.de("3199.90")
    assert resultado.valido
    assert resultado.avisos == ()


def test_agregado_independente_da_ordem():
    itens = [_produto_a(), _servico_b()]
    assert calcular_agregado(itens).subtotal == calcular_agregado(list(reversed(itens))).subtotal


def test_agregado_vazio_e_zero():
    resultado = calcular_agregado([])
    assert resultado.subtotal == ZERO
    assert resultado.total == ZERO
    assert resultado.valido


def test_desconto_acima_do_subtotal_e_aviso():
    """Desconto maior que o subtotal nunca vira total negativo em silencio."""
    resultado = calcular_agregado([_servico_b()], Dinheiro.de("500.00"))
    assert not resultado.valido
    assert resultado.total == ZERO
    assert len(resultado.avisos) == 1
    assert "excede o subtotal" in resultado.avisos[0].mensagem


def test_desconto_negativo_e_aviso():
    resultado = calcular_agregado([_servico_b()], Dinheiro.de("-1.00"))
    assert not resultado.valido
    assert resultado.total == Dinheiro.de("299.90")
    assert resultado.avisos[0].mensagem == "Desconto nao pode ser negativo"


def test_desconto_igual_ao_subtotal_e_valido():
    resultado = calcular_agregado([_servico_b()], Dinheiro.de("299.90"))
    assert resultado.valido
    assert resultado.total == ZERO


def test_item_linha_rejeita_quantidade_invalida():
    with pytest.raises(ValueError, match="Quantidade deve ser positiva"):
        _produto_a(quantidade=0)
    with pytest.raises(TypeError):
        _produto_a(quantidade=1.5)  # type: ignore[arg-type]


def test_item_linha_rejeita_preco_negativo():
    with pytest.raises(ValueError):
        ItemLinha(tipo=TipoItem.PRODUTO, item_id="x", nome="X", preco_unitario=Dinheiro(-1))


def test_carrinho_adicionar_mesmo_item_incrementa_quantidade():
    carrinho = Carrinho()
    carrinho.adicionar(TipoItem.PRODUTO, "p-a", "Produto A", Dinheiro.de("1500.00"))
    carrinho.adicionar(TipoItem.SERVICO, "s-b", "Servico B", Dinheiro.de("299.90"))
    linha = carrinho.adicionar(TipoItem.PRODUTO, "p-a", "Produto A", Dinheiro.de("1500.00"))
    assert linha.quantidade == 2
    assert [i.item_id for i in carrinho.itens] == ["p-a", "s-b"]


def test_carrinho_mesmo_id_tipos_diferentes_sao_linhas_distintas():
    carrinho = Carrinho()
    carrinho.adicionar(TipoItem.PRODUTO, "1", "Filtro", Dinheiro.de("10"))
    carrinho.adicionar(TipoItem.SERVICO, "1", "Instalacao", Dinheiro.de("20"))
    assert len(carrinho.itens) == 2


def test_carrinho_consolida_linhas_repetidas_na_construcao():
    carrinho = Carrinho([_produto_a(1), _produto_a(3)])
    assert len(carrinho.itens) == 1
    assert carrinho.itens[0].quantidade == 4


def test_carrinho_quantidade_zero_remove_linha():
    carrinho = Carrinho([_produto_a(), _servico_b()])
    carrinho.definir_quantidade(TipoItem.PRODUTO, "p-a", 0)
    assert [i.item_id for i in carrinho.itens] == ["s-b"]


def test_carrinho_definir_quantidade_item_ausente():
    carrinho = Carrinho()
    with pytest.raises(KeyError):
        carrinho.definir_quantidade(TipoItem.PRODUTO, "nao-existe", 2)


def test_carrinho_definir_desconto_recalcula():
    carrinho = Carrinho([_produto_a(), _servico_b()])
    resultado = carrinho.definir_desconto(Dinheiro.de("100.00"))
    assert resultado.total == Dinheiro.de("3199.90")
    assert carrinho.desconto == Dinheiro.de("100.00")


def test_carrinho_remover():
    carrinho = Carrinho([_produto_a(), _servico_b()])
    carrinho.remover(TipoItem.SERVICO, "s-b")
    assert carrinho.agregado().subtotal == Dinheiro.de("3000.00")
