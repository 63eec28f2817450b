from fastapi.testclient import TestClient


def test_formatar_valor_decimal(client: TestClient) -> None:
    response = client.post("/api/moeda/formatar", json={"valor": "1234.5"})
    assert response.status_code == 200
    data = response.json()
    assert data["valor"] == "1234.50"
    assert data["formatado"] == "1.234,50"
    assert data["com_simbolo"] == "R$ 1.234,50"


def test_formatar_aceita_texto_brasileiro_e_numero(client: TestClient) -> None:
    for valor in ["1.234,50", "R$ 1.234,50", 1234.5]:
        response = client.post("/api/moeda/formatar", json={"valor": valor})
        assert response.status_code == 200
        assert response.json()["formatado"] == "1.234,50"


def test_formatar_negativo(client: TestClient) -> None:
    response = client.post("/api/moeda/formatar", json={"valor": "-10"})
    assert response.json()["com_simbolo"] == "-R$ 10,00"


def test_formatar_rejeita_mais_de_duas_casas(client: TestClient) -> None:
    response = client.post("/api/moeda/formatar", json={"valor": "1.2345"})
    assert response.status_code == 422


def test_parse(client: TestClient) -> None:
    response = client.post("/api/moeda/parse", json={"texto": "R$ 1.234,56"})
    assert response.status_code == 200
    assert response.json() == {"valor": "1234.56", "formatado": "1.234,56"}


def test_parse_invalido_mensagem_amigavel(client: TestClient) -> None:
    response = client.post("/api/moeda/parse", json={"texto": "doze reais"})
    assert response.status_code == 422
    assert response.json()["detail"] == "Valor invalido. Use o formato 1.234,56"


def test_mascara(client: TestClient) -> None:
    response = client.post("/api/moeda/mascara", json={"texto": "15000"})
    assert response.json() == {"mascarado": "150,00", "valor": "150.00"}


def test_mascara_sem_digitos(client: TestClient) -> None:
    response = client.post("/api/moeda/mascara", json={"texto": "abc"})
    assert response.json() == {"mascarado": "", "valor": None}


def test_formatar_milhar_sem_virgula_e_texto_brasileiro(client: TestClient) -> None:
    """'1.500' e mil e quinhentos reais, como em parse_moeda; nunca R$ 1,50."""
    response = client.post("/api/moeda/formatar", json={"valor": "1.500"})
    assert response.status_code == 200
    assert response.json()["valor"] == "1500.00"
    assert response.json()["formatado"] == "1.500,00"

    response = client.post("/api/moeda/formatar", json={"valor": "-100.000"})
    assert response.json()["valor"] == "-100000.00"


def test_formatar_ponto_decimal_continua_aceito(client: TestClient) -> None:
    assert client.post("/api/moeda/formatar", json={"valor": "1.50"}).json()["valor"] == "1.50"


def test_formatar_magnitude_fora_da_faixa_422(client: TestClient) -> None:
    for valor in [1e30, "1e30", "1000000000000", "1.000.000.000.000,00"]:
        response = client.post("/api/moeda/formatar", json={"valor": valor})
        assert response.status_code == 422, valor


def test_formatar_limite_superior(client: TestClient) -> None:
    response = client.post("/api/moeda/formatar", json={"valor": "999.999.999.999,99"})
    assert response.status_code == 200
    assert response.json()["valor"] == "999999999999.99"


def test_parse_e_mascara_com_digitos_demais_422(client: TestClient) -> None:
    assert client.post("/api/moeda/parse", json={"texto": "9" * 5000}).status_code == 422
    assert client.post("/api/moeda/mascara", json={"texto": "9" * 5000}).status_code == 422
