from __future__ import annotations

from gestao.domain.cliente.value_objects import Documento, TipoDocumento
from gestao.domain.empresa.entities import DadosEmpresa
from gestao.domain.record_store import Linha, RecordStore
from gestao.infrastructure.duckdb_connection import CONNECTION_LOCK

from .conversao import hidratar_um, instante_opcional, texto, texto_opcional

TABELA = "empresa"
ID_UNICO = "principal"


class StoreEmpresaRepo:
    """Upsert de linha unica com id fixo; a primeira escrita insere, as demais atualizam."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def obter(self) -> DadosEmpresa | None:
        return hidratar_um(self._store.get(TABELA, ID_UNICO), self._hidratar, TABELA)

    def definir(self, dados: DadosEmpresa) -> DadosEmpresa:
        linha = self._linha(dados)
        with CONNECTION_LOCK:
            atual = self._store.get(TABELA, ID_UNICO)
            if atual is None:
                gravada = self._store.insert(TABELA, {"id": ID_UNICO, **linha})
            else:
                self._store.update(TABELA, ID_UNICO, linha)
                gravada = {**atual, **linha}
        return self._hidratar(gravada)

    def _linha(self, dados: DadosEmpresa) -> Linha:
        return {
            "nome": dados.nome,
            "cnpj": dados.cnpj.valor if dados.cnpj else None,
            "endereco": dados.endereco,
            "telefone": dados.telefone,
        }

    def _hidratar(self, row: Linha) -> DadosEmpresa:
        bruto = texto_opcional(row.get("cnpj"))
        return DadosEmpresa(
            id=str(row["id"]),
            nome=str(row["nome"]),
            cnpj=Documento(TipoDocumento.CNPJ, bruto) if bruto else None,
            endereco=texto(row.get("endereco")),
            telefone=texto(row.get("telefone")),
            criado_em=instante_opcional(row.get("criado_em")),
        )
