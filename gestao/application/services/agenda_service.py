# gestao/application/services/agenda_service.py
#
# Visitas e manutencoes: agenda de campo dos vendedores.
#
# Design decisions:
#   - O contrato de campos por status (validar_campos_status) e checado na
#     criacao e em toda atualizacao, sobre o registro JA mesclado com o patch.
#   - Transicoes de status sao livres; nao ha expiracao automatica.
#   - Manutencao: proxima_manutencao_em e pre-calculada na criacao a partir
#     do instante de criacao e recalculada na conclusao a partir do instante
#     de conclusao.
from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from gestao.domain.erros import ErroValidacao
from gestao.domain.manutencao.entities import Manutencao, proxima_manutencao
from gestao.domain.manutencao.repository import ManutencaoRepository
from gestao.domain.manutencao.value_objects import StatusManutencao, TipoManutencao
from gestao.domain.status import validar_campos_status
from gestao.domain.visita.entities import Visita
from gestao.domain.visita.repository import VisitaRepository
from gestao.domain.visita.value_objects import StatusVisita


def _exigir_campos(visita: Visita) -> None:
    faltando = validar_campos_status(visita.status, visita)
    if faltando:
        raise ErroValidacao([f.mensagem for f in faltando])


class VisitaService:
    def __init__(self, repo: VisitaRepository) -> None:
        self._repo = repo

    def criar(self, visita: Visita) -> Visita:
        _exigir_campos(visita)
        return self._repo.adicionar(visita)

    def atualizar(self, visita_id: str, agora: datetime | None = None, **campos: object) -> Visita | None:
        """campos com valor None sao ignorados."""
        atual = self._repo.buscar_por_id(visita_id)
        if atual is None:
            return None
        patch = {k: v for k, v in campos.items() if v is not None}
        nova = replace(atual, **patch, atualizado_em=agora or datetime.now())  # type: ignore[arg-type]
        _exigir_campos(nova)
        self._repo.salvar(nova)
        return self._repo.buscar_por_id(visita_id)

    def listar(self, vendedor_id: str | None = None, status: StatusVisita | None = None) -> list[Visita]:
        return self._repo.listar(vendedor_id, status)

    def proximas(
        self,
        vendedor_id: str | None = None,
        agora: datetime | None = None,
        status: StatusVisita | None = None,
    ) -> list[Visita]:
        """Visitas com data agendada >= agora, da mais proxima para a mais distante."""
        referencia = agora or datetime.now()
        futuras = [v for v in self._repo.listar(vendedor_id, status) if v.futura(referencia)]
        return sorted(futuras, key=lambda v: v.data_agendada)

    def remover(self, visita_id: str) -> None:
        self._repo.remover(visita_id)


class ManutencaoService:
    def __init__(self, repo: ManutencaoRepository) -> None:
        self._repo = repo

    def criar(self, manutencao: Manutencao, agora: datetime | None = None) -> Manutencao:
        instante = agora or datetime.now()
        agendada = replace(
            manutencao,
            status=StatusManutencao.AGENDADO,
            proxima_manutencao_em=proxima_manutencao(manutencao.tipo, instante),
        )
        return self._repo.adicionar(agendada)

    def concluir(
        self,
        manutencao_id: str,
        observacoes: str | None = None,
        agora: datetime | None = None,
    ) -> Manutencao | None:
        atual = self._repo.buscar_por_id(manutencao_id)
        if atual is None:
            return None
        self._repo.salvar(atual.concluir(agora or datetime.now(), observacoes))
        return self._repo.buscar_por_id(manutencao_id)

    def atualizar(
        self,
        manutencao_id: str,
        produto_nome: str | None = None,
        tipo: TipoManutencao | None = None,
        data_agendada: datetime | None = None,
        status: StatusManutencao | None = None,
        observacoes: str | None = None,
        agora: datetime | None = None,
    ) -> Manutencao | None:
        """Mudar o status para concluido por aqui equivale a concluir()."""
        atual = self._repo.buscar_por_id(manutencao_id)
        if atual is None:
            return None

        faltando = validar_campos_status(status or atual.status, atual)
        if faltando:
            raise ErroValidacao([f.mensagem for f in faltando])

        nova = replace(
            atual,
            produto_nome=produto_nome or atual.produto_nome,
            tipo=tipo or atual.tipo,
            data_agendada=data_agendada or atual.data_agendada,
        )
        if status == StatusManutencao.CONCLUIDO and atual.status != StatusManutencao.CONCLUIDO:
            nova = nova.concluir(agora or datetime.now(), observacoes)
        else:
            nova = replace(
                nova,
                status=status or atual.status,
                observacoes=observacoes if observacoes is not None else atual.observacoes,
            )
        self._repo.salvar(nova)
        return self._repo.buscar_por_id(manutencao_id)

    def listar(self, vendedor_id: str | None = None) -> list[Manutencao]:
        return self._repo.listar(vendedor_id)

    def proximas(self, vendedor_id: str | None = None, agora: datetime | None = None) -> list[Manutencao]:
        """Agendadas com data >= agora, ascendente."""
        referencia = agora or datetime.now()
        pendentes = [m for m in self._repo.listar(vendedor_id) if m.pendente(referencia)]
        return sorted(pendentes, key=lambda m: m.data_agendada)

    def remover(self, manutencao_id: str) -> None:
        self._repo.remover(manutencao_id)
