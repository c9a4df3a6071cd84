# pizzaria_admin/modules/notas_fiscais/repository.py

from fastapi import Depends

from pizzaria_admin.core.database import KeyValueStore, get_kv_store
from pizzaria_admin.core.repository import BaseRepository

class NotaFiscalRepository(BaseRepository):
    key_prefix = "nota_fiscal"
    entity_name = "Nota fiscal"
    immutable_fields = ("id", "criadoEm", "numero", "serie")

async def get_nota_fiscal_repository(store: KeyValueStore = Depends(get_kv_store)) -> NotaFiscalRepository:
    """FastAPI dependency to get NotaFiscalRepository instance."""
    return NotaFiscalRepository(store)
