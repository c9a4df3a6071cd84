# pizzaria_admin/modules/clientes/repository.py

from typing import Any, Dict, Optional

from fastapi import Depends

from pizzaria_admin.core.database import KeyValueStore, get_kv_store
from pizzaria_admin.core.repository import BaseRepository

class ClienteRepository(BaseRepository):
    key_prefix = "cliente"
    entity_name = "Cliente"

    async def get_by_telefone(self, telefone: str) -> Optional[Dict[str, Any]]:
        """Primeiro cliente com o telefone exato (varredura do prefixo)."""
        for cliente in await self.list_all():
            if cliente.get("telefone") == telefone:
                return cliente
        return None

async def get_cliente_repository(store: KeyValueStore = Depends(get_kv_store)) -> ClienteRepository:
    """FastAPI dependency to get ClienteRepository instance."""
    return ClienteRepository(store)
