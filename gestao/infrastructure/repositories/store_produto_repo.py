from __future__ import annotations

from gestao.domain.produto.entities import Produto, Servico
from gestao.domain.record_store import Linha, RecordStore

from .conversao import decimal, dinheiro, hidratar_todos, hidratar_um, instante_opcional, inteiro, texto, texto_opcional


class StoreProdutoRepo:
    TABELA = "produtos"

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def adicionar(self, produto: Produto) -> Produto:
        return self._hidratar(self._store.insert(self.TABELA, self._linha(produto)))

    def buscar_por_id(self, produto_id: str) -> Produto | None:
        return hidratar_um(self._store.get(self.TABELA, produto_id), self._hidratar, self.TABELA)

    def listar(self) -> list[Produto]:
        linhas = self._store.query(self.TABELA, ordenar_por="criado_em")
        return hidratar_todos(linhas, self._hidratar, self.TABELA)

    def salvar(self, produto: Produto) -> None:
        self._store.update(self.TABELA, produto.id, self._linha(produto))

    def remover(self, produto_id: str) -> None:
        self._store.delete(self.TABELA, produto_id)

    def _linha(self, produto: Produto) -> Linha:
        linha: Linha = {
            "nome": produto.nome,
            "descricao": produto.descricao,
            "preco": decimal(produto.preco),
            "estoque": produto.estoque,
            "imagem_url": produto.imagem_url,
        }
        if produto.id:
            linha["id"] = produto.id
        return linha

    def _hidratar(self, row: Linha) -> Produto:
        return Produto(
            id=str(row["id"]),
            nome=str(row["nome"]),
            preco=dinheiro(row["preco"]),
            descricao=texto(row.get("descricao")),
            estoque=max(inteiro(row.get("estoque")), 0),
            imagem_url=texto_opcional(row.get("imagem_url")),
            criado_em=instante_opcional(row.get("criado_em")),
        )


class StoreServicoRepo:
    TABELA = "servicos"

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def adicionar(self, servico: Servico) -> Servico:
        return self._hidratar(self._store.insert(self.TABELA, self._linha(servico)))

    def buscar_por_id(self, servico_id: str) -> Servico | None:
        return hidratar_um(self._store.get(self.TABELA, servico_id), self._hidratar, self.TABELA)

    def listar(self) -> list[Servico]:
        linhas = self._store.query(self.TABELA, ordenar_por="criado_em")
        return hidratar_todos(linhas, self._hidratar, self.TABELA)

    def salvar(self, servico: Servico) -> None:
        self._store.update(self.TABELA, servico.id, self._linha(servico))

    def remover(self, servico_id: str) -> None:
        self._store.delete(self.TABELA, servico_id)

    def _linha(self, servico: Servico) -> Linha:
        linha: Linha = {
            "nome": servico.nome,
            "descricao": servico.descricao,
            "preco": decimal(servico.preco),
        }
        if servico.id:
            linha["id"] = servico.id
        return linha

    def _hidratar(self, row: Linha) -> Servico:
        return Servico(
            id=str(row["id"]),
            nome=str(row["nome"]),
            preco=dinheiro(row["preco"]),
            descricao=texto(row.get("descricao")),
            criado_em=instante_opcional(row.get("criado_em")),
        )
