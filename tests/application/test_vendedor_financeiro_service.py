# tests/application/test_vendedor_financeiro_service.py
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from gestao.application.services.financeiro_service import FinanceiroService
from gestao.application.services.vendedor_service import VendedorService
from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.erros import RegistroNaoEncontrado
from gestao.domain.financeiro.value_objects import TipoTransacao
from gestao.domain.vendedor.nivel import NivelVendedor
from gestao.infrastructure.duckdb_record_store import DuckDBRecordStore
from gestao.infrastructure.repositories.store_transacao_repo import StoreTransacaoRepo
from gestao.infrastructure.repositories.store_vendedor_repo import StoreVendedorRepo


def test_vendedor_novo_comeca_bronze(store: DuckDBRecordStore) -> None:
    vendedor = VendedorService(StoreVendedorRepo(store)).criar(nome="Ana", taxa_comissao=Decimal("7.5"))
    assert vendedor.nivel == NivelVendedor.BRONZE
    assert vendedor.taxa_comissao.percentual == Decimal("7.50")
    assert vendedor.comissoes_pendentes == Dinheiro(0)


def test_taxa_comissao_invalida(store: DuckDBRecordStore) -> None:
    with pytest.raises(ValueError):
        VendedorService(StoreVendedorRepo(store)).criar(nome="Ana", taxa_comissao=Decimal("150"))


def test_listar_vendedores_maior_total_primeiro(store: DuckDBRecordStore) -> None:
    repo = StoreVendedorRepo(store)
    service = VendedorService(repo)
    ana = service.criar(nome="Ana", taxa_comissao=Decimal("5"))
    bia = service.criar(nome="Bia", taxa_comissao=Decimal("5"))
    repo.atualizar(bia.id, lambda v: v.registrar_venda(Dinheiro.de("60000")))
    repo.atualizar(ana.id, lambda v: v.registrar_venda(Dinheiro.de("1000")))

    vendedores = service.listar()
    assert [v.nome for v in vendedores] == ["Bia", "Ana"]
    assert vendedores[0].nivel == NivelVendedor.OURO


def test_nivel_persistido_acompanha_total(store: DuckDBRecordStore) -> None:
    repo = StoreVendedorRepo(store)
    vendedor = VendedorService(repo).criar(nome="Ana", taxa_comissao=Decimal("5"))
    repo.atualizar(vendedor.id, lambda v: v.registrar_venda(Dinheiro.de("100000")))
    linha = store.get("vendedores", vendedor.id)
    assert linha is not None
    assert linha["nivel"] == "diamond"


def test_pagar_comissao(store: DuckDBRecordStore) -> None:
    repo = StoreVendedorRepo(store)
    service = VendedorService(repo)
    vendedor = service.criar(nome="Ana", taxa_comissao=Decimal("10"))
    repo.atualizar(vendedor.id, lambda v: v.registrar_venda(Dinheiro.de("2000")))

    pago = service.pagar_comissao(vendedor.id, Dinheiro.de("150"))
    assert pago is not None
    assert pago.comissoes_pendentes == Dinheiro.de("50")
    assert pago.comissoes_recebidas == Dinheiro.de("150")
    with pytest.raises(ValueError, match="excede"):
        service.pagar_comissao(vendedor.id, Dinheiro.de("50.01"))
    assert service.pagar_comissao("nao-existe", Dinheiro.de("1")) is None


def test_atualizar_vendedor_preserva_totais(store: DuckDBRecordStore) -> None:
    repo = StoreVendedorRepo(store)
    service = VendedorService(repo)
    vendedor = service.criar(nome="Ana", taxa_comissao=Decimal("5"))
    repo.atualizar(vendedor.id, lambda v: v.registrar_venda(Dinheiro.de("30000")))

    atualizado = service.atualizar(vendedor.id, nome="Ana Paula", taxa_comissao=Decimal("8"), telefone="1190")
    assert atualizado is not None
    assert atualizado.nome == "Ana Paula"
    assert atualizado.telefone == "1190"
    assert atualizado.taxa_comissao.percentual == Decimal("8.00")
    assert atualizado.total_vendas == Dinheiro.de("30000")
    assert atualizado.comissoes_pendentes == Dinheiro.de("1500")
    assert atualizado.nivel == NivelVendedor.PRATA


def test_atualizar_vendedor_valida_campos(store: DuckDBRecordStore) -> None:
    service = VendedorService(StoreVendedorRepo(store))
    vendedor = service.criar(nome="Ana", taxa_comissao=Decimal("5"))
    with pytest.raises(ValueError):
        service.atualizar(vendedor.id, taxa_comissao=Decimal("101"))
    with pytest.raises(ValueError):
        service.atualizar(vendedor.id, nome="  ")
    assert service.buscar(vendedor.id).nome == "Ana"  # type: ignore[union-attr]
    assert service.atualizar("nao-existe", nome="X") is None


def test_remover_vendedor(store: DuckDBRecordStore) -> None:
    service = VendedorService(StoreVendedorRepo(store))
    vendedor = service.criar(nome="Ana", taxa_comissao=Decimal("5"))
    service.remover(vendedor.id)
    assert service.buscar(vendedor.id) is None
    with pytest.raises(RegistroNaoEncontrado):
        service.remover(vendedor.id)


def test_pagar_comissao_usa_estado_gravado(store: DuckDBRecordStore) -> None:
    """Copia lida antes de um credito nao apaga o credito ao pagar."""
    repo = StoreVendedorRepo(store)
    service = VendedorService(repo)
    vendedor = service.criar(nome="Ana", taxa_comissao=Decimal("10"))
    copia_antiga = service.buscar(vendedor.id)
    repo.atualizar(vendedor.id, lambda v: v.registrar_venda(Dinheiro.de("1000")))

    assert copia_antiga is not None
    assert copia_antiga.comissoes_pendentes == Dinheiro(0)
    pago = service.pagar_comissao(vendedor.id, Dinheiro.de("40"))
    assert pago is not None
    assert pago.total_vendas == Dinheiro.de("1000")
    assert pago.comissoes_pendentes == Dinheiro.de("60")


def _financeiro(store: DuckDBRecordStore) -> FinanceiroService:
    service = FinanceiroService(StoreTransacaoRepo(store))
    service.registrar(TipoTransacao.ENTRADA, "Vendas", Dinheiro.de("1000.00"), "PIX", data=datetime(2025, 6, 1, 10))
    service.registrar(TipoTransacao.ENTRADA, "Servicos", Dinheiro.de("200.00"), "Dinheiro", data=datetime(2025, 6, 2, 11))
    service.registrar(TipoTransacao.SAIDA, " Aluguel ", Dinheiro.de("450.10"), "Boleto", data=datetime(2025, 6, 2, 12))
    return service


def test_resumo_financeiro(store: DuckDBRecordStore) -> None:
    resumo = _financeiro(store).resumo(hoje=date(2025, 6, 2))
    assert resumo.total_entradas == Dinheiro.de("1200.00")
    assert resumo.total_saidas == Dinheiro.de("450.10")
    assert resumo.saldo == Dinheiro.de("749.90")
    assert resumo.transacoes_hoje == 2


def test_listar_transacoes_com_filtros(store: DuckDBRecordStore) -> None:
    service = _financeiro(store)
    assert [t.categoria for t in service.listar(tipo=TipoTransacao.SAIDA)] == ["Aluguel"]
    assert len(service.listar(inicio=datetime(2025, 6, 2))) == 2
    assert len(service.listar(categoria="Vendas")) == 1


def test_remover_transacao(store: DuckDBRecordStore) -> None:
    service = _financeiro(store)
    alvo = service.listar(categoria="Servicos")[0]
    service.remover(alvo.id)
    assert service.resumo(hoje=date(2025, 6, 2)).total_entradas == Dinheiro.de("1000.00")


def test_transacao_valor_zero_rejeitado(store: DuckDBRecordStore) -> None:
    with pytest.raises(ValueError):
        FinanceiroService(StoreTransacaoRepo(store)).registrar(TipoTransacao.SAIDA, "Aluguel", Dinheiro(0), "PIX")
