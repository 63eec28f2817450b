from __future__ import annotations

import uuid
from collections.abc import Callable, Generator

import httpx
import pytest
from fastapi.testclient import TestClient


def _email() -> str:
    return f"cliente-{uuid.uuid4().hex[:8]}@example.com"


def test_criar_cliente(client: TestClient) -> None:
    email = _email()
    response = client.post(
        "/api/clientes",
        json={"nome": "Joao da Silva", "email": email.upper(), "documento": "52998224725"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == email
    assert data["tipo_documento"] == "CPF"
    assert data["documento"] == "529.982.247-25"


def test_email_duplicado_409(client: TestClient) -> None:
    email = _email()
    assert client.post("/api/clientes", json={"nome": "Ana", "email": email}).status_code == 201
    response = client.post("/api/clientes", json={"nome": "Outra Ana", "email": email})
    assert response.status_code == 409
    assert response.json()["detail"] == "Este email ja esta cadastrado no sistema"


def test_documento_invalido_422(client: TestClient) -> None:
    response = client.post(
        "/api/clientes",
        json={"nome": "Loja", "tipo_documento": "CNPJ", "documento": "11.222.333/0001-99"},
    )
    assert response.status_code == 422
    assert "CNPJ invalido" in response.json()["detail"]


def test_nome_vazio_422(client: TestClient) -> None:
    assert client.post("/api/clientes", json={"nome": ""}).status_code == 422
    assert client.post("/api/clientes", json={"nome": "   "}).status_code == 422


def test_patch_e_get_cliente(client: TestClient) -> None:
    cliente_id = client.post("/api/clientes", json={"nome": "Bruno"}).json()["id"]
    response = client.patch(f"/api/clientes/{cliente_id}", json={"telefone": "11988887777"})
    assert response.status_code == 200
    assert response.json()["nome"] == "Bruno"
    assert client.get(f"/api/clientes/{cliente_id}").json()["telefone"] == "11988887777"


def test_listar_e_remover_cliente(client: TestClient) -> None:
    cliente_id = client.post("/api/clientes", json={"nome": "Temporario"}).json()["id"]
    assert any(c["id"] == cliente_id for c in client.get("/api/clientes").json())
    assert client.delete(f"/api/clientes/{cliente_id}").status_code == 204
    assert client.get(f"/api/clientes/{cliente_id}").status_code == 404
    assert client.patch(f"/api/clientes/{cliente_id}", json={"nome": "X"}).status_code == 404


@pytest.fixture()
def cep_mock(client: TestClient) -> Generator[Callable[[Callable[[httpx.Request], httpx.Response]], None], None, None]:
    """Troca o client HTTP do ViaCEP por um MockTransport."""
    from gestao.application.services.cliente_service import ClienteService
    from gestao.infrastructure.repositories.store_cliente_repo import StoreClienteRepo
    from gestao.infrastructure.viacep_client import ViaCepClient
    from gestao.interfaces.api.dependencies import get_cliente_service, get_record_store
    from gestao.interfaces.api.main import app

    def instalar(handler: Callable[[httpx.Request], httpx.Response]) -> None:
        cep = ViaCepClient("https://viacep.test/ws", client=httpx.Client(transport=httpx.MockTransport(handler)))
        app.dependency_overrides[get_cliente_service] = lambda: ClienteService(
            StoreClienteRepo(get_record_store()), cep=cep
        )

    yield instalar
    app.dependency_overrides.clear()


def test_cep_encontrado(client: TestClient, cep_mock: Callable) -> None:
    cep_mock(
        lambda request: httpx.Response(
            200,
            json={"cep": "01001-000", "logradouro": "Praca da Se", "bairro": "Se", "localidade": "Sao Paulo", "uf": "SP"},
        )
    )
    response = client.get("/api/cep/01001-000")
    assert response.status_code == 200
    assert response.json() == {
        "cep": "01001-000",
        "logradouro": "Praca da Se",
        "bairro": "Se",
        "cidade": "Sao Paulo",
        "uf": "SP",
    }


def test_cep_inexistente_404(client: TestClient, cep_mock: Callable) -> None:
    cep_mock(lambda request: httpx.Response(200, json={"erro": True}))
    assert client.get("/api/cep/99999999").status_code == 404


def test_cep_invalido_422(client: TestClient, cep_mock: Callable) -> None:
    cep_mock(lambda request: httpx.Response(200, json={}))
    response = client.get("/api/cep/123")
    assert response.status_code == 422
    assert response.json()["detail"] == "CEP invalido"


def test_cep_servico_fora_502(client: TestClient, cep_mock: Callable) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timeout", request=request)

    cep_mock(handler)
    assert client.get("/api/cep/01001000").status_code == 502
