# pizzaria_admin/modules/pedidos/models.py

from typing import List, Literal, Optional

from pydantic import Field

from pizzaria_admin.models.api_common import ApiModel, RecordModel

# --- Constants ---
STATUS_PEDIDO = Literal["pendente", "preparo", "pronto", "entregue", "cancelado"]
TIPO_PEDIDO = Literal["balcao", "delivery", "retirada"]

# --- Sub-Schemas ---
class ItemPedido(ApiModel):
    produto_id: str
    nome: Optional[str] = None
    quantidade: float = Field(..., gt=0)
    valor: float = Field(0, ge=0, description="Preço unitário cobrado.")
    observacoes: Optional[str] = None

# --- API Schemas ---
class PedidoAPI(RecordModel):
    cliente_id: Optional[str] = None
    cliente_nome: Optional[str] = None
    itens: List[ItemPedido] = Field(default_factory=list)
    valor_total: float = 0
    tipo_pedido: Optional[str] = None
    status: str = "pendente"
    endereco: Optional[str] = None
    telefone: Optional[str] = None
    forma_pagamento: Optional[str] = None

class PedidoCreateAPI(ApiModel):
    """Payload de novo pedido. `valorTotal` é calculado dos itens quando omitido."""
    cliente_id: Optional[str] = None
    cliente_nome: Optional[str] = None
    itens: List[ItemPedido] = Field(default_factory=list)
    valor_total: Optional[float] = Field(None, ge=0)
    tipo_pedido: TIPO_PEDIDO = "balcao"
    endereco: Optional[str] = None
    telefone: Optional[str] = None
    forma_pagamento: Optional[str] = Field(None, description="dinheiro, cartao, pix...")

class PedidoStatusUpdateAPI(ApiModel):
    status: STATUS_PEDIDO

class PedidoResponse(ApiModel):
    pedido: PedidoAPI

class PedidoListResponse(ApiModel):
    pedidos: List[PedidoAPI]
