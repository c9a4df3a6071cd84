# pizzaria_admin/api/v1.py
from fastapi import APIRouter, Depends

from pizzaria_admin.api.endpoints import auth, status
from pizzaria_admin.core.security import require_permission
from pizzaria_admin.modules.clientes.routers import clientes_router
from pizzaria_admin.modules.cozinha.routers import cozinha_router
from pizzaria_admin.modules.entregas.routers import entregas_router
from pizzaria_admin.modules.estoque.routers import estoque_router
from pizzaria_admin.modules.financeiro.routers import financeiro_router
from pizzaria_admin.modules.notas_fiscais.routers import notas_fiscais_router
from pizzaria_admin.modules.pedidos.routers import pedidos_router
from pizzaria_admin.modules.produtos.routers import produtos_router
from pizzaria_admin.modules.relatorios.routers import relatorios_router
from pizzaria_admin.modules.usuarios.routers import usuarios_router

api_router = APIRouter()

api_router.include_router(status.router)
api_router.include_router(auth.router, prefix="/auth")

# (router, prefixo, área de permissão)
_MODULE_ROUTERS = (
    (pedidos_router, "/pedidos", "pedidos"),
    (cozinha_router, "/cozinha", "cozinha"),
    (produtos_router, "/produtos", "cardapio"),
    (estoque_router, "/estoque", "estoque"),
    (clientes_router, "/clientes", "clientes"),
    (relatorios_router, "/relatorios", "relatorios"),
    (financeiro_router, "/financeiro", "financeiro"),
    (entregas_router, "/entregas", "entregas"),
    (notas_fiscais_router, "/notas-fiscais", "notas_fiscais"),
    (usuarios_router, "/usuarios", "permissoes"),
)

for module_router, prefix, area in _MODULE_ROUTERS:
    api_router.include_router(module_router, prefix=prefix, dependencies=[Depends(require_permission(area))])
