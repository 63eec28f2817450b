from fastapi.testclient import TestClient


def _transacao(**kwargs: object) -> dict[str, object]:
    body: dict[str, object] = {
        "tipo": "saida",
        "categoria": "Aluguel",
        "valor": "1.800,00",
        "forma_pagamento": "Boleto",
        "data": "2025-06-05T10:00:00",
    }
    body.update(kwargs)
    return body


def test_criar_transacao(client: TestClient) -> None:
    response = client.post("/api/financeiro/transacoes", json=_transacao(descricao="Junho"))
    assert response.status_code == 201
    data = response.json()
    assert data["valor"] == "1800.00"
    assert data["valor_formatado"] == "1.800,00"
    assert data["data"] == "2025-06-05T10:00:00"


def test_transacao_valor_zero_422(client: TestClient) -> None:
    assert client.post("/api/financeiro/transacoes", json=_transacao(valor="0")).status_code == 422


def test_transacao_tipo_invalido_422(client: TestClient) -> None:
    assert client.post("/api/financeiro/transacoes", json=_transacao(tipo="transferencia")).status_code == 422


def test_listar_transacoes_filtros(client: TestClient) -> None:
    client.post("/api/financeiro/transacoes", json=_transacao(categoria="Marketing", data="2031-01-15T08:00:00"))
    response = client.get(
        "/api/financeiro/transacoes",
        params={"tipo": "saida", "inicio": "2031-01-01T00:00:00", "fim": "2031-01-31T23:59:59"},
    )
    assert response.status_code == 200
    assert [t["categoria"] for t in response.json()] == ["Marketing"]


def test_resumo(client: TestClient) -> None:
    client.post("/api/financeiro/transacoes", json=_transacao(tipo="entrada", categoria="Servicos", valor="500"))
    response = client.get("/api/financeiro/resumo")
    assert response.status_code == 200
    data = response.json()
    for campo in ["total_entradas", "total_saidas", "saldo", "saldo_formatado", "transacoes_hoje"]:
        assert campo in data
    assert len(data["maiores_entradas"]) <= 5


def test_remover_transacao(client: TestClient) -> None:
    transacao_id = client.post("/api/financeiro/transacoes", json=_transacao()).json()["id"]
    assert client.delete(f"/api/financeiro/transacoes/{transacao_id}").status_code == 204
    assert client.delete(f"/api/financeiro/transacoes/{transacao_id}").status_code == 404
