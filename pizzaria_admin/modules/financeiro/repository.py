# pizzaria_admin/modules/financeiro/repository.py

from fastapi import Depends

from pizzaria_admin.core.database import KeyValueStore, get_kv_store
from pizzaria_admin.core.repository import BaseRepository

class DespesaRepository(BaseRepository):
    key_prefix = "despesa"
    entity_name = "Despesa"

async def get_despesa_repository(store: KeyValueStore = Depends(get_kv_store)) -> DespesaRepository:
    """FastAPI dependency to get DespesaRepository instance."""
    return DespesaRepository(store)
