from fastapi import APIRouter, Depends

from gestao.application.dtos.relatorio_dto import DesempenhoDTO, StatsDTO
from gestao.application.services.relatorio_service import RelatorioService
from gestao.infrastructure.repositories.duckdb_stats_repo import DuckDBStatsRepo
from gestao.interfaces.api.dependencies import get_relatorio_service, get_stats_repo

router = APIRouter()


@router.get("/relatorios/desempenho", response_model=DesempenhoDTO)
def get_desempenho(
    service: RelatorioService = Depends(get_relatorio_service),  # noqa: B008
) -> DesempenhoDTO:
    return service.desempenho()


@router.get("/stats", response_model=StatsDTO)
def get_stats(
    repo: DuckDBStatsRepo = Depends(get_stats_repo),  # noqa: B008
) -> StatsDTO:
    return StatsDTO(registros=repo.obter_stats())
