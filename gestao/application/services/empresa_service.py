from __future__ import annotations

from gestao.domain.cliente.value_objects import Documento, TipoDocumento
from gestao.domain.empresa.entities import DadosEmpresa
from gestao.domain.empresa.repository import EmpresaRepository


class EmpresaService:
    def __init__(self, repo: EmpresaRepository) -> None:
        self._repo = repo

    def obter(self) -> DadosEmpresa | None:
        return self._repo.obter()

    def definir(self, nome: str, cnpj: str | None = None, endereco: str = "", telefone: str = "") -> DadosEmpresa:
        """Substitui os dados da empresa. CNPJ em branco e ausente; preenchido precisa ser valido."""
        documento = Documento(TipoDocumento.CNPJ, cnpj) if cnpj and cnpj.strip() else None
        return self._repo.definir(
            DadosEmpresa(nome=nome.strip(), cnpj=documento, endereco=endereco.strip(), telefone=telefone.strip())
        )
