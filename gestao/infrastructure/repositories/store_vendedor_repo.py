from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from gestao.domain.erros import RegistroNaoEncontrado
from gestao.domain.record_store import Linha, RecordStore
from gestao.domain.vendedor.entities import TaxaComissao, Vendedor

from .conversao import decimal, dinheiro_ou_zero, hidratar_todos, hidratar_um, instante_opcional, texto

TABELA = "vendedores"


class StoreVendedorRepo:
    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def adicionar(self, vendedor: Vendedor) -> Vendedor:
        return self._hidratar(self._store.insert(TABELA, self._linha(vendedor)))

    def buscar_por_id(self, vendedor_id: str) -> Vendedor | None:
        return hidratar_um(self._store.get(TABELA, vendedor_id), self._hidratar, TABELA)

    def listar(self) -> list[Vendedor]:
        """Maiores vendedores primeiro."""
        linhas = self._store.query(TABELA, ordenar_por="total_vendas")
        return hidratar_todos(linhas, self._hidratar, TABELA)

    def atualizar(self, vendedor_id: str, operacao: Callable[[Vendedor], Vendedor]) -> Vendedor | None:
        """Aplica operacao sobre o estado gravado, sem intercalar com outra escrita.

        Totais e comissoes sao acumulados: nunca gravar a partir de uma copia
        lida antes. None se o vendedor nao existe.
        """

        def aplicar(atual: Linha) -> Linha:
            return self._linha(operacao(self._hidratar(atual)))

        try:
            linha = self._store.transformar(TABELA, vendedor_id, aplicar)
        except RegistroNaoEncontrado:
            return None
        return self._hidratar(linha)

    def remover(self, vendedor_id: str) -> None:
        self._store.delete(TABELA, vendedor_id)

    def _linha(self, vendedor: Vendedor) -> Linha:
        # nivel e persistido apenas para leitura externa; a fonte e total_vendas
        linha: Linha = {
            "nome": vendedor.nome,
            "telefone": vendedor.telefone,
            "email": vendedor.email,
            "endereco": vendedor.endereco,
            "foto_url": vendedor.foto_url,
            "taxa_comissao": vendedor.taxa_comissao.percentual,
            "total_vendas": decimal(vendedor.total_vendas),
            "comissoes_recebidas": decimal(vendedor.comissoes_recebidas),
            "comissoes_pendentes": decimal(vendedor.comissoes_pendentes),
            "nivel": vendedor.nivel.value,
        }
        if vendedor.id:
            linha["id"] = vendedor.id
        return linha

    def _hidratar(self, row: Linha) -> Vendedor:
        return Vendedor(
            id=str(row["id"]),
            nome=str(row["nome"]),
            taxa_comissao=TaxaComissao(Decimal(str(row["taxa_comissao"]))),
            telefone=texto(row.get("telefone")),
            email=texto(row.get("email")),
            endereco=texto(row.get("endereco")),
            foto_url=texto(row.get("foto_url")),
            total_vendas=dinheiro_ou_zero(row.get("total_vendas")),
            comissoes_recebidas=dinheiro_ou_zero(row.get("comissoes_recebidas")),
            comissoes_pendentes=dinheiro_ou_zero(row.get("comissoes_pendentes")),
            criado_em=instante_opcional(row.get("criado_em")),
        )
