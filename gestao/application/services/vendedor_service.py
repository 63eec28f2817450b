from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from gestao.domain.dinheiro.value_objects import Dinheiro
from gestao.domain.vendedor.entities import TaxaComissao, Vendedor
from gestao.domain.vendedor.repository import VendedorRepository


class VendedorService:
    def __init__(self, repo: VendedorRepository) -> None:
        self._repo = repo

    def criar(
        self,
        nome: str,
        taxa_comissao: Decimal,
        telefone: str = "",
        email: str = "",
        endereco: str = "",
        foto_url: str = "",
    ) -> Vendedor:
        """Vendedor novo comeca zerado (Bronze)."""
        return self._repo.adicionar(
            Vendedor(
                id="",
                nome=nome,
                taxa_comissao=TaxaComissao(taxa_comissao),
                telefone=telefone,
                email=email,
                endereco=endereco,
                foto_url=foto_url,
            )
        )

    def buscar(self, vendedor_id: str) -> Vendedor | None:
        return self._repo.buscar_por_id(vendedor_id)

    def listar(self) -> list[Vendedor]:
        return self._repo.listar()

    def atualizar(
        self,
        vendedor_id: str,
        nome: str | None = None,
        taxa_comissao: Decimal | None = None,
        telefone: str | None = None,
        email: str | None = None,
        endereco: str | None = None,
        foto_url: str | None = None,
    ) -> Vendedor | None:
        """Dados cadastrais e taxa. Totais e comissoes so mudam por venda ou pagamento;
        a nova taxa vale para as vendas seguintes."""
        campos: dict[str, object] = {
            k: v
            for k, v in {
                "nome": nome,
                "telefone": telefone,
                "email": email,
                "endereco": endereco,
                "foto_url": foto_url,
            }.items()
            if v is not None
        }
        if taxa_comissao is not None:
            campos["taxa_comissao"] = TaxaComissao(taxa_comissao)
        return self._repo.atualizar(vendedor_id, lambda atual: replace(atual, **campos))

    def remover(self, vendedor_id: str) -> None:
        self._repo.remover(vendedor_id)

    def pagar_comissao(self, vendedor_id: str, valor: Dinheiro) -> Vendedor | None:
        """Move valor de pendente para recebido. ValueError se exceder o pendente."""
        return self._repo.atualizar(vendedor_id, lambda atual: atual.pagar_comissao(valor))
