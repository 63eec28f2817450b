# tests/domain/test_nivel_vendedor.py
from decimal import Decimal

import pytest

from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.vendedor.entities import TaxaComissao, Vendedor
from gestao.domain.vendedor.nivel import NivelVendedor, classificar_nivel


def test_limiares_de_nivel():
    """Limite inferior fechado em cada faixa."""
    assert classificar_nivel(100000) == NivelVendedor.DIAMANTE
    assert classificar_nivel("99999.99") == NivelVendedor.OURO
    assert classificar_nivel(50000) == NivelVendedor.OURO
    assert classificar_nivel(25000) == NivelVendedor.PRATA
    assert classificar_nivel("24999.99") == NivelVendedor.BRONZE
    assert classificar_nivel(0) == NivelVendedor.BRONZE


def test_nivel_monotonico():
    valores = [Dinheiro(c) for c in range(0, 12_000_001, 250_000)]
    ranks = [classificar_nivel(v).rank for v in valores]
    assert ranks == sorted(ranks)


def test_nivel_rotulos():
    assert NivelVendedor.DIAMANTE.rotulo == "Diamante"
    assert NivelVendedor.PRATA.value == "silver"
    assert NivelVendedor.BRONZE.rank == 0


def _vendedor(**kwargs: object) -> Vendedor:
    dados: dict[str, object] = {"id": "v1", "nome": "Ana", "taxa_comissao": TaxaComissao(Decimal("5"))}
    dados.update(kwargs)
    return Vendedor(**dados)  # type: ignore[arg-type]


def test_taxa_comissao_fora_da_faixa():
    with pytest.raises(ValueError):
        TaxaComissao(Decimal("100.01"))
    with pytest.raises(ValueError):
        TaxaComissao(Decimal("-1"))


def test_vendedor_nome_vazio():
    with pytest.raises(ValueError, match="Nome do vendedor"):
        _vendedor(nome="   ")


def test_registrar_venda_credita_comissao_e_sobe_nivel():
    vendedor = _vendedor(total_vendas=Dinheiro.de("24000"))
    atualizado = vendedor.registrar_venda(Dinheiro.de("1000"))
    assert atualizado.total_vendas == Dinheiro.de("25000")
    assert atualizado.comissoes_pendentes == Dinheiro.de("50")
    assert atualizado.nivel == NivelVendedor.PRATA
    assert vendedor.nivel == NivelVendedor.BRONZE


def test_pagar_comissao_move_pendente_para_recebido():
    vendedor = _vendedor(comissoes_pendentes=Dinheiro.de("300"))
    pago = vendedor.pagar_comissao(Dinheiro.de("120"))
    assert pago.comissoes_pendentes == Dinheiro.de("180")
    assert pago.comissoes_recebidas == Dinheiro.de("120")


def test_pagar_comissao_acima_do_pendente():
    vendedor = _vendedor(comissoes_pendentes=Dinheiro.de("10"))
    with pytest.raises(ValueError, match="excede"):
        vendedor.pagar_comissao(Dinheiro.de("10.01"))
    with pytest.raises(ValueError, match="positivo"):
        vendedor.pagar_comissao(Dinheiro(0))
