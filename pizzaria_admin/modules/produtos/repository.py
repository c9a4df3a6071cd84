# pizzaria_admin/modules/produtos/repository.py

from fastapi import Depends

from pizzaria_admin.core.database import KeyValueStore, get_kv_store
from pizzaria_admin.core.repository import BaseRepository

class ProdutoRepository(BaseRepository):
    key_prefix = "produto"
    entity_name = "Produto"

async def get_produto_repository(store: KeyValueStore = Depends(get_kv_store)) -> ProdutoRepository:
    """FastAPI dependency to get ProdutoRepository instance."""
    return ProdutoRepository(store)
