# pizzaria_admin/modules/financeiro/models.py

from datetime import date
from typing import List, Literal, Optional

from pydantic import Field

from pizzaria_admin.core.repository import utc_now
from pizzaria_admin.models.api_common import ApiModel, RecordModel

STATUS_DESPESA = Literal["pago", "pendente"]
PERIODO_FINANCEIRO = Literal["semana", "mes", "trimestre", "ano"]

class DespesaAPI(RecordModel):
    descricao: Optional[str] = None
    categoria: Optional[str] = None
    valor: float = 0
    data: Optional[str] = None
    status: str = "pendente"

class DespesaCreateAPI(ApiModel):
    descricao: str = Field(..., min_length=1)
    categoria: str = Field(..., description="Fornecedores, Salários, Aluguel, Utilidades...")
    valor: float = Field(..., gt=0)
    data: date = Field(default_factory=lambda: utc_now().date(), description="Data de competência (YYYY-MM-DD, UTC)")
    status: STATUS_DESPESA = "pendente"

class DespesaStatusUpdateAPI(ApiModel):
    status: STATUS_DESPESA

class DespesaResponse(ApiModel):
    despesa: DespesaAPI

class DespesaListResponse(ApiModel):
    despesas: List[DespesaAPI]

class ReceitaPorTipo(ApiModel):
    tipo: str
    valor: float
    quantidade_pedidos: int

class DespesaPorCategoria(ApiModel):
    categoria: str
    valor: float
    percentual: int

class ResumoFinanceiroResponse(ApiModel):
    periodo: str
    moeda: str
    receita: float
    despesa: float
    lucro: float
    contas_pagar: float
    receitas_por_tipo: List[ReceitaPorTipo]
    despesas_por_categoria: List[DespesaPorCategoria]
