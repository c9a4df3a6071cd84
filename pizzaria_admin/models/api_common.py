# pizzaria_admin/models/api_common.py

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class ApiModel(BaseModel):
    """Base dos schemas da API: atributos snake_case, JSON em camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class RecordModel(ApiModel):
    """Registro armazenado; campos desconhecidos são preservados."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: str
    criado_em: Optional[str] = None
    atualizado_em: Optional[str] = None

class StatusResponse(BaseModel):
    """Resposta genérica indicando o status de uma operação."""
    status: str = Field(..., description="Status geral (ex: 'ok', 'error').")
    message: Optional[str] = Field(None, description="Mensagem descritiva opcional.")

class ErrorResponse(BaseModel):
    """Envelope de erro devolvido por todas as rotas."""
    error: str = Field(..., description="Mensagem do erro.")
    detalhes: Optional[List[Any]] = Field(None, description="Erros de validação por campo.")
