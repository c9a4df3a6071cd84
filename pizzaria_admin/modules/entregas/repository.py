# pizzaria_admin/modules/entregas/repository.py

from typing import Any, Dict, Optional

from fastapi import Depends
from loguru import logger

from pizzaria_admin.core.database import KeyValueStore, get_kv_store
from pizzaria_admin.core.repository import BaseRepository, utc_now_iso

# Limite do histórico de rastreio por entrega
HISTORICO_MAX = 50

class EntregaRepository(BaseRepository):
    key_prefix = "entrega"
    entity_name = "Entrega"

    async def get_by_pedido_id(self, pedido_id: str) -> Optional[Dict[str, Any]]:
        for entrega in await self.list_all():
            if entrega.get("pedidoId") == pedido_id:
                return entrega
        return None

    async def add_tracking_event(self, entrega: Dict[str, Any], evento: Dict[str, Any], **changes: Any) -> Dict[str, Any]:
        """Acrescenta um evento ao histórico e grava as mudanças junto."""
        historico = (entrega.get("historico") or []) + [evento]
        atualizado = {
            **entrega,
            **changes,
            "historico": historico[-HISTORICO_MAX:],
            "atualizadoEm": utc_now_iso(),
        }
        if evento.get("localizacao"):
            atualizado["localizacao"] = evento["localizacao"]
        await self.save(atualizado)
        logger.bind(entrega_id=entrega["id"], event_status=evento.get("status")).info("Tracking event added.")
        return atualizado

class MotoboyRepository(BaseRepository):
    key_prefix = "motoboy"
    entity_name = "Motoboy"

async def get_entrega_repository(store: KeyValueStore = Depends(get_kv_store)) -> EntregaRepository:
    """FastAPI dependency to get EntregaRepository instance."""
    return EntregaRepository(store)

async def get_motoboy_repository(store: KeyValueStore = Depends(get_kv_store)) -> MotoboyRepository:
    """FastAPI dependency to get MotoboyRepository instance."""
    return MotoboyRepository(store)
