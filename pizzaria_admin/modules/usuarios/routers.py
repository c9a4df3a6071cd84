# pizzaria_admin/modules/usuarios/routers.py

from fastapi import APIRouter, Depends, HTTPException, Path, status
from loguru import logger

from .models import PermissoesResponse, RoleUpdateAPI, UsuarioCreateAPI, UsuarioListResponse, UsuarioResponse
from .repository import UsuarioRepository, get_usuario_repository
from .services import UsuarioService, get_usuario_service

usuarios_router = APIRouter()

@usuarios_router.get(
    "",
    response_model=UsuarioListResponse,
    summary="List staff users with a count per role",
    tags=["Usuarios"],
)
async def list_usuarios_endpoint(
    usuario_service: UsuarioService = Depends(get_usuario_service),
    usuario_repo: UsuarioRepository = Depends(get_usuario_repository),
):
    try:
        return await usuario_service.list_usuarios(usuario_repo)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching usuarios: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch usuarios: {e}")

@usuarios_router.get(
    "/permissoes",
    response_model=PermissoesResponse,
    summary="Role permission matrix",
    tags=["Usuarios"],
)
async def get_permissoes_endpoint(usuario_service: UsuarioService = Depends(get_usuario_service)):
    return usuario_service.get_permissoes()

@usuarios_router.post(
    "",
    response_model=UsuarioResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a staff user",
    tags=["Usuarios"],
)
async def create_usuario_endpoint(
    usuario_in: UsuarioCreateAPI,
    usuario_service: UsuarioService = Depends(get_usuario_service),
    usuario_repo: UsuarioRepository = Depends(get_usuario_repository),
):
    try:
        return {"usuario": await usuario_service.create_usuario(usuario_in, usuario_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error creating usuario: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to create usuario: {e}")

@usuarios_router.put(
    "/{usuario_id}/role",
    response_model=UsuarioResponse,
    summary="Change a user's role",
    tags=["Usuarios"],
)
async def update_role_endpoint(
    role_in: RoleUpdateAPI,
    usuario_id: str = Path(..., description="Usuario ID"),
    usuario_service: UsuarioService = Depends(get_usuario_service),
    usuario_repo: UsuarioRepository = Depends(get_usuario_repository),
):
    try:
        return {"usuario": await usuario_service.update_role(usuario_id, role_in, usuario_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error updating role of usuario {usuario_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to update role: {e}")

@usuarios_router.put(
    "/{usuario_id}/ativo",
    response_model=UsuarioResponse,
    summary="Toggle a user between active and inactive",
    tags=["Usuarios"],
)
async def toggle_ativo_endpoint(
    usuario_id: str = Path(..., description="Usuario ID"),
    usuario_service: UsuarioService = Depends(get_usuario_service),
    usuario_repo: UsuarioRepository = Depends(get_usuario_repository),
):
    try:
        return {"usuario": await usuario_service.toggle_ativo(usuario_id, usuario_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error toggling usuario {usuario_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to update usuario: {e}")
