# pizzaria_admin/modules/clientes/models.py

from typing import List, Optional

from pydantic import Field

from pizzaria_admin.models.api_common import ApiModel, RecordModel

class ClienteAPI(RecordModel):
    nome: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    endereco: Optional[str] = None
    pontos_fidelidade: int = 0
    total_compras: float = 0
    pedidos_realizados: int = 0

class ClienteCreateAPI(ApiModel):
    nome: str = Field(..., min_length=1)
    telefone: str = Field(..., min_length=1)
    email: Optional[str] = None
    endereco: Optional[str] = None
    pontos_fidelidade: int = Field(0, ge=0)
    total_compras: float = Field(0, ge=0)
    pedidos_realizados: int = Field(0, ge=0)

class PontosUpdateAPI(ApiModel):
    """Credita pontos de uma compra; `pontos` pode ser negativo para resgates."""
    pontos: int
    valor_compra: float = 0

class ClienteResponse(ApiModel):
    cliente: ClienteAPI

class ClienteListResponse(ApiModel):
    clientes: List[ClienteAPI]
