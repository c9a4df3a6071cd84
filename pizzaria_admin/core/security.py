# pizzaria_admin/core/security.py

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from loguru import logger

from pizzaria_admin.core.config import settings
from pizzaria_admin.modules.usuarios.models import ROLE_PERMISSIONS
from pizzaria_admin.modules.usuarios.repository import UsuarioRepository, get_usuario_repository

# Hash de senhas (pbkdf2 não depende do backend bcrypt)
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

bearer_scheme = HTTPBearer(auto_error=False)

CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Unauthorized - Invalid or expired token",
    headers={"WWW-Authenticate": "Bearer"},
)
InactiveUserException = HTTPException(
    status_code=status.HTTP_403_FORBIDDEN,
    detail="Inactive user",
)

# --- Senhas ---

def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verifica se a senha plana corresponde ao hash armazenado."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"Error verifying password (hash might be invalid): {e}")
        return False

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

# --- JWT ---

def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Cria um novo token de acesso JWT."""
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire, "iat": now, "nbf": now})

    if not to_encode.get("sub"):
        logger.critical("FATAL: Attempted to create JWT token without 'sub' (subject) claim.")
        raise ValueError("Missing 'sub' claim in token data for JWT creation")

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> Dict[str, Any]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise CredentialsException
    if not payload.get("sub"):
        raise CredentialsException
    return payload

# --- Dependências ---

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    usuario_repo: UsuarioRepository = Depends(get_usuario_repository),
) -> Optional[Dict[str, Any]]:
    """
    Resolve o usuário do token Bearer.
    Sem token (ou com a chave anônima do dashboard) retorna None, a menos que
    AUTH_REQUIRED esteja ativo.
    """
    token = credentials.credentials if credentials else None
    if not token or (settings.ANON_KEY and token == settings.ANON_KEY):
        if settings.AUTH_REQUIRED:
            raise CredentialsException
        return None

    payload = decode_access_token(token)
    usuario = await usuario_repo.get_by_id(payload["sub"])
    if usuario is None:
        logger.warning(f"Token subject not found: {payload['sub']}")
        raise CredentialsException
    if not usuario.get("ativo", True):
        raise InactiveUserException
    return usuario

def has_permission(role: Optional[str], area: str) -> bool:
    return area in ROLE_PERMISSIONS.get(role or "", ())

def require_permission(area: str):
    """Dependência que exige acesso à área do dashboard."""
    async def _check(usuario: Optional[Dict[str, Any]] = Depends(get_current_user)) -> Optional[Dict[str, Any]]:
        if usuario is None:
            return None
        if not has_permission(usuario.get("role"), area):
            logger.warning(f"Permission denied: user={usuario.get('id')} role={usuario.get('role')} area={area}")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Operation not permitted")
        return usuario
    return _check
