# pizzaria_admin/modules/relatorios/models.py

from typing import List, Literal

from pizzaria_admin.models.api_common import ApiModel
from pizzaria_admin.modules.estoque.models import EstoqueItemAPI
from pizzaria_admin.modules.pedidos.models import PedidoAPI

PERIODO_VENDAS = Literal["hoje", "semana", "mes"]

class VendasReportResponse(ApiModel):
    periodo: str
    total_vendas: float
    quantidade_pedidos: int
    ticket_medio: float
    pedidos: List[PedidoAPI]

class ProdutoPopular(ApiModel):
    produto_id: str
    nome: str
    quantidade: float
    valor_total: float

class ProdutosPopularesResponse(ApiModel):
    produtos_populares: List[ProdutoPopular]

class EstoqueBaixoResponse(ApiModel):
    alertas: List[EstoqueItemAPI]

class DashboardResponse(ApiModel):
    pedidos_hoje: int
    vendas_hoje: float
    estoque_baixo: int
    ticket_medio: float
    pedidos_recentes: List[PedidoAPI]
