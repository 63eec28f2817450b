# gestao/infrastructure/viacep_client.py
#
# IO-only: consulta de endereco por CEP no ViaCEP.
#
# Design decisions:
#   - httpx.Client injetavel; testes passam um client com MockTransport.
#   - CEP inexistente: o ViaCEP responde 200 com {"erro": true}. Isso vira
#     None, nao excecao.
#   - Falha de rede ou status HTTP de erro vira ErroConsultaExterna.
from __future__ import annotations

import httpx

from gestao.domain.cliente.value_objects import Endereco
from gestao.domain.dinheiro.formatacao import extrair_digitos
from gestao.domain.erros import ErroConsultaExterna
from gestao.log import log


class ViaCepClient:
    def __init__(self, base_url: str, timeout: float = 5.0, client: httpx.Client | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def buscar(self, cep: str) -> Endereco | None:
        """CEP com ou sem mascara. Menos ou mais de 8 digitos -> ValueError."""
        digitos = extrair_digitos(cep)
        if len(digitos) != 8:
            raise ValueError("CEP deve ter 8 digitos")

        try:
            response = self._client.get(f"{self._base_url}/{digitos}/json/")
            response.raise_for_status()
            dados = response.json()
        except httpx.HTTPError as exc:
            log(f"Falha ao consultar CEP {digitos}: {exc}", nivel="ERROR")
            raise ErroConsultaExterna("Servico de CEP indisponivel") from exc
        except ValueError as exc:
            raise ErroConsultaExterna("Resposta invalida do servico de CEP") from exc

        if not isinstance(dados, dict):
            raise ErroConsultaExterna("Resposta invalida do servico de CEP")
        if dados.get("erro"):
            return None
        return Endereco(
            cep=str(dados.get("cep") or f"{digitos[:5]}-{digitos[5:]}"),
            logradouro=str(dados.get("logradouro") or ""),
            bairro=str(dados.get("bairro") or ""),
            cidade=str(dados.get("localidade") or ""),
            uf=str(dados.get("uf") or ""),
        )
