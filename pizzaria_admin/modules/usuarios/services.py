# pizzaria_admin/modules/usuarios/services.py

from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from loguru import logger

from pizzaria_admin.core import security
from .models import AREAS, ROLE_PERMISSIONS, LoginAPI, RoleUpdateAPI, UsuarioCreateAPI
from .repository import UsuarioRepository

class UsuarioService:
    """Gestão de usuários da equipe, papéis e autenticação."""

    async def list_usuarios(self, usuario_repo: UsuarioRepository) -> Dict[str, Any]:
        usuarios = sorted(await usuario_repo.list_all(), key=lambda u: (u.get("nome") or "").lower())
        contagem = {role: 0 for role in ROLE_PERMISSIONS}
        for usuario in usuarios:
            role = usuario.get("role") or "operador"
            contagem[role] = contagem.get(role, 0) + 1
        return {"usuarios": usuarios, "contagemPorRole": contagem}

    async def create_usuario(self, usuario_in: UsuarioCreateAPI, usuario_repo: UsuarioRepository) -> Dict[str, Any]:
        log = logger.bind(email=usuario_in.email, service="UsuarioService")
        if await usuario_repo.get_by_email(usuario_in.email):
            log.warning("Attempt to register duplicate email.")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

        data = usuario_in.model_dump(mode="json", by_alias=True, exclude={"senha"})
        data["email"] = data["email"].lower()
        data["ativo"] = True
        data["senhaHash"] = security.get_password_hash(usuario_in.senha)
        usuario = await usuario_repo.create(data)
        log.success(f"Usuario created with role '{usuario['role']}'.")
        return usuario

    async def _get_or_404(self, usuario_id: str, usuario_repo: UsuarioRepository) -> Dict[str, Any]:
        usuario = await usuario_repo.get_by_id(usuario_id)
        if usuario is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario not found")
        return usuario

    async def update_role(
        self, usuario_id: str, role_in: RoleUpdateAPI, usuario_repo: UsuarioRepository
    ) -> Dict[str, Any]:
        await self._get_or_404(usuario_id, usuario_repo)
        usuario = await usuario_repo.update(usuario_id, role_in)
        logger.bind(usuario_id=usuario_id).info(f"Role changed to '{role_in.role}'.")
        return usuario

    async def toggle_ativo(self, usuario_id: str, usuario_repo: UsuarioRepository) -> Dict[str, Any]:
        usuario = await self._get_or_404(usuario_id, usuario_repo)
        ativo = not usuario.get("ativo", True)
        usuario = await usuario_repo.update(usuario_id, {"ativo": ativo})
        logger.bind(usuario_id=usuario_id).info(f"Usuario {'activated' if ativo else 'deactivated'}.")
        return usuario

    def get_permissoes(self) -> Dict[str, Any]:
        return {
            "areas": list(AREAS),
            "permissoes": {role: list(areas) for role, areas in ROLE_PERMISSIONS.items()},
        }

    async def authenticate(self, email: str, senha: str, usuario_repo: UsuarioRepository) -> Optional[Dict[str, Any]]:
        """Retorna o usuário se email/senha conferem e ele está ativo."""
        usuario = await usuario_repo.get_by_email(email)
        if usuario is None or not security.verify_password(senha, usuario.get("senhaHash")):
            return None
        if not usuario.get("ativo", True):
            logger.bind(usuario_id=usuario["id"]).warning("Login attempt by inactive user.")
            return None
        return usuario

    async def login(self, login_in: LoginAPI, usuario_repo: UsuarioRepository) -> Dict[str, Any]:
        usuario = await self.authenticate(login_in.email, login_in.senha, usuario_repo)
        if usuario is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
                headers={"WWW-Authenticate": "Bearer"},
            )
        token = security.create_access_token(data={"sub": usuario["id"], "role": usuario.get("role")})
        return {"accessToken": token, "tokenType": "bearer", "usuario": usuario}

async def get_usuario_service() -> UsuarioService:
    return UsuarioService()
