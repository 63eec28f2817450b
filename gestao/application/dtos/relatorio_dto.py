from pydantic import BaseModel


class VendedorRankingDTO(BaseModel):
    id: str
    nome: str
    total_vendas: str
    nivel: str
    nivel_rotulo: str


class DesempenhoDTO(BaseModel):
    receita_total: str
    receita_total_formatada: str
    quantidade_vendas: int
    ticket_medio: str
    ticket_medio_formatado: str
    total_clientes: int
    total_visitas: int
    top_vendedores: list[VendedorRankingDTO]
    visitas_por_status: dict[str, int]


class StatsDTO(BaseModel):
    registros: dict[str, int]
