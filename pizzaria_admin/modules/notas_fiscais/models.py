# pizzaria_admin/modules/notas_fiscais/models.py

from typing import List, Literal, Optional

from pydantic import Field

from pizzaria_admin.models.api_common import ApiModel, RecordModel
from pizzaria_admin.modules.pedidos.models import ItemPedido

STATUS_NOTA = Literal["emitida", "cancelada"]
NATUREZA_PADRAO = "Venda de Mercadoria"
SERIE_PADRAO = "1"

class NotaFiscalAPI(RecordModel):
    numero: Optional[str] = None
    serie: str = SERIE_PADRAO
    cliente: Optional[str] = None
    cnpj: Optional[str] = None
    pedido_id: Optional[str] = None
    natureza_operacao: str = NATUREZA_PADRAO
    valor_total: float = 0
    itens: List[ItemPedido] = Field(default_factory=list)
    status: str = "emitida"
    data_emissao: Optional[str] = None
    motivo_cancelamento: Optional[str] = None

class NotaFiscalCreateAPI(ApiModel):
    """Emissão local. Sem `valorTotal`/`itens`, os dados vêm do pedido referenciado."""
    cliente: str = Field(..., min_length=1)
    cnpj: Optional[str] = None
    pedido_id: Optional[str] = None
    natureza_operacao: str = NATUREZA_PADRAO
    valor_total: Optional[float] = Field(None, ge=0)
    itens: Optional[List[ItemPedido]] = None

class CancelamentoAPI(ApiModel):
    motivo: str = Field(..., min_length=1)

class NotaFiscalResponse(ApiModel):
    nota_fiscal: NotaFiscalAPI

class NotaFiscalListResponse(ApiModel):
    notas_fiscais: List[NotaFiscalAPI]
