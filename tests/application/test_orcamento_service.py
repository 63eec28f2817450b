# tests/application/test_orcamento_service.py
from __future__ import annotations

from datetime import datetime

import pytest

from gestao.application.services.orcamento_service import OrcamentoService
from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.erros import ErroValidacao, RegistroNaoEncontrado
from gestao.domain.venda.entities import ItemLinha
from gestao.domain.venda.value_objects import StatusOrcamento, TipoItem
from gestao.infrastructure.duckdb_record_store import DuckDBRecordStore
from gestao.infrastructure.repositories.store_venda_repo import StoreOrcamentoRepo

AGORA = datetime(2025, 6, 1, 9, 0)
ITENS = [ItemLinha(TipoItem.PRODUTO, "p1", "Purificador", Dinheiro.de("899.00"))]


def _service(store: DuckDBRecordStore) -> OrcamentoService:
    return OrcamentoService(StoreOrcamentoRepo(store))


def test_criar_orcamento_validade_padrao_sete_dias(store: DuckDBRecordStore) -> None:
    orc = _service(store).criar("c1", None, ITENS, agora=AGORA)
    assert orc.valido_ate == datetime(2025, 6, 8, 9, 0)
    assert orc.status == StatusOrcamento.RASCUNHO
    assert orc.total == Dinheiro.de("899.00")


def test_orcamento_expirado_pela_referencia(store: DuckDBRecordStore) -> None:
    orc = _service(store).criar("c1", None, ITENS, agora=AGORA)
    assert not orc.expirado(datetime(2025, 6, 8, 9, 0))
    assert orc.expirado(datetime(2025, 6, 8, 9, 1))


def test_atualizar_desconto_recalcula_total(store: DuckDBRecordStore) -> None:
    service = _service(store)
    orc = service.criar("c1", None, ITENS, agora=AGORA)
    atualizado = service.atualizar(orc.id, desconto=Dinheiro.de("99.00"), status=StatusOrcamento.ENVIADO)
    assert atualizado is not None
    assert atualizado.total == Dinheiro.de("800.00")
    assert atualizado.status == StatusOrcamento.ENVIADO
    assert atualizado.itens == orc.itens


def test_atualizar_itens_mantem_desconto(store: DuckDBRecordStore) -> None:
    service = _service(store)
    orc = service.criar("c1", None, ITENS, desconto=Dinheiro.de("50.00"), agora=AGORA)
    novos = [*ITENS, ItemLinha(TipoItem.SERVICO, "s1", "Instalacao", Dinheiro.de("150.00"))]
    atualizado = service.atualizar(orc.id, itens=novos)
    assert atualizado is not None
    assert atualizado.total == Dinheiro.de("999.00")


def test_desconto_invalido_nao_grava(store: DuckDBRecordStore) -> None:
    service = _service(store)
    with pytest.raises(ErroValidacao):
        service.criar("c1", None, ITENS, desconto=Dinheiro.de("900.00"))
    orc = service.criar("c1", None, ITENS, agora=AGORA)
    with pytest.raises(ErroValidacao):
        service.atualizar(orc.id, desconto=Dinheiro.de("-1.00"))
    assert service.buscar(orc.id).total == Dinheiro.de("899.00")  # type: ignore[union-attr]


def test_atualizar_e_remover_inexistente(store: DuckDBRecordStore) -> None:
    service = _service(store)
    assert service.atualizar("nao-existe", observacoes="x") is None
    with pytest.raises(RegistroNaoEncontrado):
        service.remover("nao-existe")


def test_listar_por_vendedor(store: DuckDBRecordStore) -> None:
    service = _service(store)
    service.criar("c1", "v1", ITENS, agora=AGORA)
    service.criar("c2", "v2", ITENS, agora=AGORA)
    assert [o.cliente_id for o in service.listar("v1")] == ["c1"]
    assert len(service.listar()) == 2
