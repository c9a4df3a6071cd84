# pizzaria_admin/modules/estoque/models.py

from typing import List, Optional

from pydantic import Field

from pizzaria_admin.models.api_common import ApiModel, RecordModel

class EstoqueItemAPI(RecordModel):
    nome: Optional[str] = None
    unidade: Optional[str] = None
    quantidade: float = 0
    quantidade_minima: float = 0
    fornecedor: Optional[str] = None
    custo_unitario: Optional[float] = None

class EstoqueItemCreateAPI(ApiModel):
    """Cria ou substitui um item de estoque (id opcional)."""
    id: Optional[str] = Field(None, description="Informe para substituir um item existente.")
    nome: str = Field(..., min_length=1)
    unidade: str = Field("unidade", description="kg, unidade, litro...")
    quantidade: float = 0
    quantidade_minima: float = Field(0, ge=0)
    fornecedor: Optional[str] = None
    custo_unitario: Optional[float] = Field(None, ge=0)
    criado_em: Optional[str] = None

class QuantidadeUpdateAPI(ApiModel):
    quantidade: float

class EstoqueItemResponse(ApiModel):
    item: EstoqueItemAPI

class EstoqueListResponse(ApiModel):
    estoque: List[EstoqueItemAPI]
