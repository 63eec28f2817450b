from functools import lru_cache

from gestao.application.services.agenda_service import ManutencaoService, VisitaService
from gestao.application.services.cliente_service import ClienteService
from gestao.application.services.empresa_service import EmpresaService
from gestao.application.services.financeiro_service import FinanceiroService
from gestao.application.services.orcamento_service import OrcamentoService
from gestao.application.services.relatorio_service import RelatorioService
from gestao.application.services.venda_service import VendaService
from gestao.application.services.vendedor_service import VendedorService
from gestao.infrastructure.config import get_settings
from gestao.infrastructure.duckdb_connection import get_connection
from gestao.infrastructure.duckdb_record_store import DuckDBRecordStore
from gestao.infrastructure.repositories.duckdb_stats_repo import DuckDBStatsRepo
from gestao.infrastructure.repositories.store_agenda_repo import StoreManutencaoRepo, StoreVisitaRepo
from gestao.infrastructure.repositories.store_cliente_repo import StoreClienteRepo
from gestao.infrastructure.repositories.store_empresa_repo import StoreEmpresaRepo
from gestao.infrastructure.repositories.store_produto_repo import StoreProdutoRepo, StoreServicoRepo
from gestao.infrastructure.repositories.store_transacao_repo import StoreTransacaoRepo
from gestao.infrastructure.repositories.store_venda_repo import StoreOrcamentoRepo, StoreVendaRepo
from gestao.infrastructure.repositories.store_vendedor_repo import StoreVendedorRepo
from gestao.infrastructure.viacep_client import ViaCepClient


def get_record_store() -> DuckDBRecordStore:
    return DuckDBRecordStore(get_connection())


@lru_cache(maxsize=1)
def get_consulta_cep() -> ViaCepClient:
    settings = get_settings()
    return ViaCepClient(settings.viacep_url, timeout=settings.http_timeout)


def get_venda_service() -> VendaService:
    store = get_record_store()
    return VendaService(
        venda_repo=StoreVendaRepo(store),
        vendedor_repo=StoreVendedorRepo(store),
        transacao_repo=StoreTransacaoRepo(store),
        cliente_repo=StoreClienteRepo(store),
    )


def get_orcamento_service() -> OrcamentoService:
    return OrcamentoService(StoreOrcamentoRepo(get_record_store()))


def get_cliente_service() -> ClienteService:
    return ClienteService(StoreClienteRepo(get_record_store()), cep=get_consulta_cep())


def get_empresa_service() -> EmpresaService:
    return EmpresaService(StoreEmpresaRepo(get_record_store()))


def get_visita_service() -> VisitaService:
    return VisitaService(StoreVisitaRepo(get_record_store()))


def get_manutencao_service() -> ManutencaoService:
    return ManutencaoService(StoreManutencaoRepo(get_record_store()))


def get_vendedor_service() -> VendedorService:
    return VendedorService(StoreVendedorRepo(get_record_store()))


def get_financeiro_service() -> FinanceiroService:
    return FinanceiroService(StoreTransacaoRepo(get_record_store()))


def get_relatorio_service() -> RelatorioService:
    store = get_record_store()
    return RelatorioService(
        venda_repo=StoreVendaRepo(store),
        vendedor_repo=StoreVendedorRepo(store),
        cliente_repo=StoreClienteRepo(store),
        visita_repo=StoreVisitaRepo(store),
    )


def get_produto_repo() -> StoreProdutoRepo:
    return StoreProdutoRepo(get_record_store())


def get_servico_repo() -> StoreServicoRepo:
    return StoreServicoRepo(get_record_store())


def get_stats_repo() -> DuckDBStatsRepo:
    return DuckDBStatsRepo(get_connection())
