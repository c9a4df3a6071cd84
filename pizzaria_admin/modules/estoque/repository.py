# pizzaria_admin/modules/estoque/repository.py

from typing import Any, Dict, Optional

from fastapi import Depends
from loguru import logger

from pizzaria_admin.core.database import KeyValueStore, get_kv_store
from pizzaria_admin.core.repository import BaseRepository, utc_now_iso

class EstoqueRepository(BaseRepository):
    key_prefix = "estoque"
    entity_name = "Estoque item"

    async def decrement_quantity(self, item_id: str, amount: float) -> Optional[Dict[str, Any]]:
        """Subtrai `amount` da quantidade (pode ficar negativa). None se o item não existir."""
        item = await self.get_by_id(item_id)
        if item is None:
            return None
        item = {
            **item,
            "quantidade": (item.get("quantidade") or 0) - amount,
            "atualizadoEm": utc_now_iso(),
        }
        await self.save(item)
        logger.bind(estoque_id=item_id).debug(f"Stock decremented by {amount}; now {item['quantidade']}")
        return item

async def get_estoque_repository(store: KeyValueStore = Depends(get_kv_store)) -> EstoqueRepository:
    """FastAPI dependency to get EstoqueRepository instance."""
    return EstoqueRepository(store)
