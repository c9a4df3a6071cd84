# pizzaria_admin/modules/usuarios/models.py

from typing import Dict, List, Literal, Optional, Tuple

from pydantic import ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from pizzaria_admin.models.api_common import ApiModel

ROLE = Literal["admin", "gerente", "cozinheiro", "operador"]

# Áreas = telas do dashboard
AREAS: Tuple[str, ...] = (
    "pedidos",
    "cardapio",
    "estoque",
    "clientes",
    "relatorios",
    "financeiro",
    "notas_fiscais",
    "entregas",
    "cozinha",
    "permissoes",
)

ROLE_PERMISSIONS: Dict[str, Tuple[str, ...]] = {
    "admin": AREAS,
    "gerente": tuple(a for a in AREAS if a != "permissoes"),
    "cozinheiro": ("cozinha", "pedidos", "estoque"),
    "operador": ("pedidos", "clientes", "entregas", "cardapio"),
}

class UsuarioAPI(ApiModel):
    """Usuário exposto pela API. `senhaHash` nunca sai daqui."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str
    nome: Optional[str] = None
    email: Optional[str] = None
    telefone: Optional[str] = None
    role: str = "operador"
    ativo: bool = True
    criado_em: Optional[str] = None
    atualizado_em: Optional[str] = None

class UsuarioCreateAPI(ApiModel):
    nome: str = Field(..., min_length=1)
    email: EmailStr
    telefone: Optional[str] = None
    role: ROLE = "operador"
    senha: str = Field(..., min_length=6)

class RoleUpdateAPI(ApiModel):
    role: ROLE

class UsuarioResponse(ApiModel):
    usuario: UsuarioAPI

class UsuarioListResponse(ApiModel):
    usuarios: List[UsuarioAPI]
    contagem_por_role: Dict[str, int]

class PermissoesResponse(ApiModel):
    areas: List[str]
    permissoes: Dict[str, List[str]]

class LoginAPI(ApiModel):
    email: EmailStr
    senha: str

class TokenResponse(ApiModel):
    access_token: str
    token_type: str = "bearer"
    usuario: UsuarioAPI
