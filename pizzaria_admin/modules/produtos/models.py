# pizzaria_admin/modules/produtos/models.py

from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pizzaria_admin.models.api_common import ApiModel, RecordModel

class IngredienteProduto(ApiModel):
    """Quantidade de um item de estoque consumida por unidade do produto."""
    ingrediente_id: str
    quantidade: float = Field(..., ge=0)

class ProdutoAPI(RecordModel):
    nome: Optional[str] = None
    categoria: Optional[str] = None
    tamanho: Optional[str] = None
    preco: Optional[float] = None
    descricao: Optional[str] = None
    ingredientes: Optional[List[IngredienteProduto]] = None
    ativo: bool = True
    imagem: Optional[str] = None

class ProdutoCreateAPI(ApiModel):
    """Payload para cadastrar um produto do cardápio."""
    nome: str = Field(..., min_length=1)
    categoria: str = Field(..., description="pizza, bebida, sobremesa...")
    tamanho: Optional[str] = Field(None, description="pequena, media, grande, familia")
    preco: float = Field(..., ge=0)
    descricao: Optional[str] = None
    ingredientes: List[IngredienteProduto] = Field(default_factory=list)
    ativo: bool = True
    imagem: Optional[str] = None

class ProdutoUpdateAPI(ApiModel):
    """Atualização parcial; campos extras também são mesclados ao registro."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    nome: Optional[str] = Field(None, min_length=1)
    categoria: Optional[str] = None
    tamanho: Optional[str] = None
    preco: Optional[float] = Field(None, ge=0)
    descricao: Optional[str] = None
    ingredientes: Optional[List[IngredienteProduto]] = None
    ativo: Optional[bool] = None
    imagem: Optional[str] = None

    @field_validator("nome", "categoria", "preco", "ingredientes", "ativo")
    @classmethod
    def not_null(cls, value):
        # Omitir mantém o valor atual; null apagaria um campo obrigatório
        if value is None:
            raise ValueError("must not be null")
        return value

class ProdutoResponse(ApiModel):
    produto: ProdutoAPI

class ProdutoListResponse(ApiModel):
    produtos: List[ProdutoAPI]
