# pizzaria_admin/api/endpoints/auth.py

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from pizzaria_admin.core.security import get_current_user
from pizzaria_admin.modules.usuarios.models import LoginAPI, TokenResponse, UsuarioResponse
from pizzaria_admin.modules.usuarios.repository import UsuarioRepository, get_usuario_repository
from pizzaria_admin.modules.usuarios.services import UsuarioService, get_usuario_service

router = APIRouter()

@router.post("/login", response_model=TokenResponse, tags=["Authentication"])
async def login_for_access_token(
    login_in: LoginAPI,
    usuario_service: UsuarioService = Depends(get_usuario_service),
    usuario_repo: UsuarioRepository = Depends(get_usuario_repository),
):
    """
    Authenticates with email & senha (JSON body).
    Returns a bearer JWT plus the user's public profile.
    """
    log = logger.bind(api_endpoint="/auth/login", email=login_in.email)
    log.info("Login attempt received.")
    result = await usuario_service.login(login_in, usuario_repo)
    log.success(f"Authentication successful (ID: {result['usuario']['id']})")
    return result

@router.get("/me", response_model=UsuarioResponse, tags=["Authentication"])
async def read_current_user(usuario: Optional[Dict[str, Any]] = Depends(get_current_user)):
    if usuario is None:
        raise HTTPException(status_code=401, detail="Not authenticated", headers={"WWW-Authenticate": "Bearer"})
    return {"usuario": usuario}
