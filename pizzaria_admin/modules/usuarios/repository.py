# pizzaria_admin/modules/usuarios/repository.py

from typing import Any, Dict, Optional

from fastapi import Depends

from pizzaria_admin.core.database import KeyValueStore, get_kv_store
from pizzaria_admin.core.repository import BaseRepository

class UsuarioRepository(BaseRepository):
    key_prefix = "usuario"
    entity_name = "Usuario"
    immutable_fields = ("id", "criadoEm", "email")

    async def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        email = email.strip().lower()
        for usuario in await self.list_all():
            if (usuario.get("email") or "").lower() == email:
                return usuario
        return None

async def get_usuario_repository(store: KeyValueStore = Depends(get_kv_store)) -> UsuarioRepository:
    """FastAPI dependency to get UsuarioRepository instance."""
    return UsuarioRepository(store)
