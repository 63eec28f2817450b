# tests/application/test_cliente_service.py
from __future__ import annotations

import httpx
import pytest

from gestao.application.services.cliente_service import EMAIL_DUPLICADO, ClienteService
from gestao.domain.cliente.value_objects import TipoDocumento
from gestao.domain.erros import ErroConsultaExterna, RegistroDuplicado
from gestao.infrastructure.duckdb_record_store import DuckDBRecordStore
from gestao.infrastructure.repositories.store_cliente_repo import StoreClienteRepo
from gestao.infrastructure.viacep_client import ViaCepClient


def _service(store: DuckDBRecordStore, cep: ViaCepClient | None = None) -> ClienteService:
    return ClienteService(StoreClienteRepo(store), cep=cep)


def test_criar_cliente_normaliza_email(store: DuckDBRecordStore) -> None:
    cliente = _service(store).criar(nome="  Joao Silva ", email=" Joao@Example.COM ")
    assert cliente.id
    assert cliente.nome.valor == "Joao Silva"
    assert cliente.email == "joao@example.com"


def test_email_duplicado_case_insensitive(store: DuckDBRecordStore) -> None:
    service = _service(store)
    service.criar(nome="Joao", email="joao@example.com")
    with pytest.raises(RegistroDuplicado, match=EMAIL_DUPLICADO):
        service.criar(nome="Outro Joao", email="JOAO@example.com")


def test_atualizar_mantendo_proprio_email(store: DuckDBRecordStore) -> None:
    service = _service(store)
    cliente = service.criar(nome="Joao", email="joao@example.com")
    atualizado = service.atualizar(cliente.id, email="joao@example.com", telefone="11999990000")
    assert atualizado is not None
    assert atualizado.telefone == "11999990000"


def test_atualizar_para_email_de_outro(store: DuckDBRecordStore) -> None:
    service = _service(store)
    service.criar(nome="Ana", email="ana@example.com")
    joao = service.criar(nome="Joao", email="joao@example.com")
    with pytest.raises(RegistroDuplicado):
        service.atualizar(joao.id, email="ana@example.com")


def test_documento_validado_e_persistido(store: DuckDBRecordStore) -> None:
    service = _service(store)
    cliente = service.criar(nome="Loja", tipo_documento=TipoDocumento.CNPJ, documento="11.222.333/0001-81")
    salvo = service.buscar(cliente.id)
    assert salvo is not None
    assert salvo.documento is not None
    assert salvo.documento.formatado == "11.222.333/0001-81"


def test_documento_invalido(store: DuckDBRecordStore) -> None:
    with pytest.raises(ValueError, match="CPF invalido"):
        _service(store).criar(nome="Joao", documento="123.456.789-00")


def test_documento_em_branco_e_ausente(store: DuckDBRecordStore) -> None:
    cliente = _service(store).criar(nome="Joao", documento="   ")
    assert cliente.documento is None


def test_trocar_tipo_documento_descarta_documento_antigo(store: DuckDBRecordStore) -> None:
    service = _service(store)
    cliente = service.criar(nome="Joao", documento="529.982.247-25")
    atualizado = service.atualizar(cliente.id, tipo_documento=TipoDocumento.CNPJ)
    assert atualizado is not None
    assert atualizado.tipo_documento == TipoDocumento.CNPJ
    assert atualizado.documento is None


def test_remover_cliente(store: DuckDBRecordStore) -> None:
    service = _service(store)
    cliente = service.criar(nome="Joao")
    service.remover(cliente.id)
    assert service.buscar(cliente.id) is None
    assert service.atualizar(cliente.id, nome="X") is None


def test_buscar_cep_sem_consulta_configurada(store: DuckDBRecordStore) -> None:
    with pytest.raises(ErroConsultaExterna):
        _service(store).buscar_cep("01001-000")


def test_buscar_cep_delegado_ao_client(store: DuckDBRecordStore) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"cep": "01001-000", "logradouro": "Praca da Se", "bairro": "Se", "localidade": "Sao Paulo", "uf": "SP"},
        )

    cep = ViaCepClient("https://viacep.test/ws", client=httpx.Client(transport=httpx.MockTransport(handler)))
    endereco = _service(store, cep).buscar_cep("01001000")
    assert endereco is not None
    assert endereco.cidade == "Sao Paulo"
