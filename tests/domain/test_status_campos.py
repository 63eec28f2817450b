# tests/domain/test_status_campos.py
from datetime import datetime

from gestao.domain.manutencao.value_objects import StatusManutencao
from gestao.domain.status import validar_campos_status
from gestao.domain.visita.entities import Visita
from gestao.domain.visita.value_objects import StatusVisita


def test_vai_pensar_exige_data_retorno():
    faltando = validar_campos_status("thinking", {"data_retorno": None})
    assert len(faltando) == 1
    assert faltando[0].campo == "data_retorno"
    assert faltando[0].status == "thinking"


def test_agendada_nao_exige_nada():
    assert validar_campos_status("scheduled", {}) == []


def test_nao_comprou_exige_motivo():
    faltando = validar_campos_status(StatusVisita.FINALIZADA_NAO_COMPROU, {"motivo_recusa": "   "})
    assert [f.campo for f in faltando] == ["motivo_recusa"]
    assert faltando[0].mensagem == "Informe o motivo da nao compra"


def test_campo_preenchido_satisfaz_exigencia():
    assert validar_campos_status(StatusVisita.VAI_PENSAR, {"data_retorno": datetime(2025, 6, 1)}) == []
    assert validar_campos_status(StatusVisita.FINALIZADA_NAO_COMPROU, {"motivo_recusa": "Preco"}) == []


def test_exigencia_so_do_status_atual():
    """Campos de outros status nao sao cobrados."""
    assert validar_campos_status(StatusVisita.VAI_PENSAR, {"data_retorno": "2025-06-01", "motivo_recusa": None}) == []


def test_aceita_entidade_visita():
    visita = Visita(
        id="v1",
        cliente_nome="Joao",
        vendedor_id="vend",
        data_agendada=datetime(2025, 6, 1, 10),
        status=StatusVisita.VAI_PENSAR,
    )
    faltando = validar_campos_status(visita.status, visita)
    assert [f.campo for f in faltando] == ["data_retorno"]


def test_status_de_manutencao_nao_exigem_campos():
    for status in StatusManutencao:
        assert validar_campos_status(status, {}) == []


def test_status_desconhecido():
    faltando = validar_campos_status("inexistente", {})
    assert len(faltando) == 1
    assert faltando[0].campo == "status"
