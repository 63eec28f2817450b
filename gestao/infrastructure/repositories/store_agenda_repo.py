from __future__ import annotations

from gestao.domain.manutencao.entities import Manutencao
from gestao.domain.manutencao.value_objects import StatusManutencao, TipoManutencao
from gestao.domain.record_store import Linha, RecordStore
from gestao.domain.visita.entities import Visita
from gestao.domain.visita.value_objects import StatusVisita

from .conversao import hidratar_todos, hidratar_um, instante, instante_opcional, texto, texto_opcional


class StoreVisitaRepo:
    TABELA = "visitas"

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def adicionar(self, visita: Visita) -> Visita:
        return self._hidratar(self._store.insert(self.TABELA, self._linha(visita)))

    def buscar_por_id(self, visita_id: str) -> Visita | None:
        return hidratar_um(self._store.get(self.TABELA, visita_id), self._hidratar, self.TABELA)

    def listar(self, vendedor_id: str | None = None, status: StatusVisita | None = None) -> list[Visita]:
        """Ordem ascendente de data agendada."""
        filtros: dict[str, object] = {}
        if vendedor_id:
            filtros["vendedor_id"] = vendedor_id
        if status is not None:
            filtros["status"] = status.value
        linhas = self._store.query(self.TABELA, filtros, ordenar_por="data_agendada", decrescente=False)
        return hidratar_todos(linhas, self._hidratar, self.TABELA)

    def salvar(self, visita: Visita) -> None:
        self._store.update(self.TABELA, visita.id, self._linha(visita))

    def remover(self, visita_id: str) -> None:
        self._store.delete(self.TABELA, visita_id)

    def _linha(self, visita: Visita) -> Linha:
        linha: Linha = {
            "cliente_nome": visita.cliente_nome,
            "cliente_id": visita.cliente_id,
            "vendedor_id": visita.vendedor_id,
            "data_agendada": visita.data_agendada,
            "status": visita.status.value,
            "observacoes": visita.observacoes,
            "data_retorno": visita.data_retorno,
            "motivo_recusa": visita.motivo_recusa,
            "tipo_manutencao": visita.tipo_manutencao,
            "localizacao": visita.local,
        }
        if visita.atualizado_em is not None:
            linha["atualizado_em"] = visita.atualizado_em
        if visita.id:
            linha["id"] = visita.id
        return linha

    def _hidratar(self, row: Linha) -> Visita:
        return Visita(
            id=str(row["id"]),
            cliente_nome=str(row["cliente_nome"]),
            vendedor_id=str(row["vendedor_id"]),
            data_agendada=instante(row["data_agendada"]),
            status=StatusVisita(row["status"]),
            cliente_id=texto_opcional(row.get("cliente_id")),
            observacoes=texto(row.get("observacoes")),
            data_retorno=instante_opcional(row.get("data_retorno")),
            motivo_recusa=texto_opcional(row.get("motivo_recusa")),
            tipo_manutencao=texto_opcional(row.get("tipo_manutencao")),
            local=texto(row.get("localizacao")),
            criado_em=instante_opcional(row.get("criado_em")),
            atualizado_em=instante_opcional(row.get("atualizado_em")),
        )


class StoreManutencaoRepo:
    TABELA = "manutencoes"

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def adicionar(self, manutencao: Manutencao) -> Manutencao:
        return self._hidratar(self._store.insert(self.TABELA, self._linha(manutencao)))

    def buscar_por_id(self, manutencao_id: str) -> Manutencao | None:
        return hidratar_um(self._store.get(self.TABELA, manutencao_id), self._hidratar, self.TABELA)

    def listar(self, vendedor_id: str | None = None) -> list[Manutencao]:
        """Ordem ascendente de data agendada."""
        filtros = {"vendedor_id": vendedor_id} if vendedor_id else None
        linhas = self._store.query(self.TABELA, filtros, ordenar_por="data_agendada", decrescente=False)
        return hidratar_todos(linhas, self._hidratar, self.TABELA)

    def salvar(self, manutencao: Manutencao) -> None:
        self._store.update(self.TABELA, manutencao.id, self._linha(manutencao))

    def remover(self, manutencao_id: str) -> None:
        self._store.delete(self.TABELA, manutencao_id)

    def _linha(self, manutencao: Manutencao) -> Linha:
        linha: Linha = {
            "cliente_id": manutencao.cliente_id,
            "cliente_nome": manutencao.cliente_nome,
            "cliente_telefone": manutencao.cliente_telefone,
            "produto_nome": manutencao.produto_nome,
            "tipo": manutencao.tipo.value,
            "data_agendada": manutencao.data_agendada,
            "status": manutencao.status.value,
            "observacoes": manutencao.observacoes,
            "vendedor_id": manutencao.vendedor_id,
            "vendedor_nome": manutencao.vendedor_nome,
            "concluida_em": manutencao.concluida_em,
            "proxima_manutencao_em": manutencao.proxima_manutencao_em,
        }
        if manutencao.id:
            linha["id"] = manutencao.id
        return linha

    def _hidratar(self, row: Linha) -> Manutencao:
        return Manutencao(
            id=str(row["id"]),
            cliente_id=str(row["cliente_id"]),
            cliente_nome=str(row["cliente_nome"]),
            produto_nome=str(row["produto_nome"]),
            tipo=TipoManutencao(row["tipo"]),
            data_agendada=instante(row["data_agendada"]),
            vendedor_id=str(row["vendedor_id"]),
            vendedor_nome=texto(row.get("vendedor_nome")),
            status=StatusManutencao(row["status"]),
            cliente_telefone=texto_opcional(row.get("cliente_telefone")),
            observacoes=texto(row.get("observacoes")),
            concluida_em=instante_opcional(row.get("concluida_em")),
            proxima_manutencao_em=instante_opcional(row.get("proxima_manutencao_em")),
            criado_em=instante_opcional(row.get("criado_em")),
        )
