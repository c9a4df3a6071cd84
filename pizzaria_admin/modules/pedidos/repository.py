# pizzaria_admin/modules/pedidos/repository.py

from typing import Any, Dict, List, Optional, Sequence

from fastapi import Depends

from pizzaria_admin.core.database import KeyValueStore, get_kv_store
from pizzaria_admin.core.repository import BaseRepository, parse_timestamp

def sort_by_criado_em(pedidos: List[Dict[str, Any]], newest_first: bool = True) -> List[Dict[str, Any]]:
    """Ordena por `criadoEm`; registros sem data válida ficam por último."""
    dated = [p for p in pedidos if parse_timestamp(p.get("criadoEm"))]
    undated = [p for p in pedidos if not parse_timestamp(p.get("criadoEm"))]
    dated.sort(key=lambda p: parse_timestamp(p["criadoEm"]), reverse=newest_first)
    return dated + undated

class PedidoRepository(BaseRepository):
    key_prefix = "pedido"
    entity_name = "Pedido"

    async def list_by(
        self,
        status: Optional[Sequence[str]] = None,
        tipo_pedido: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Varre os pedidos filtrando por status (um ou vários) e tipo."""
        pedidos = await self.list_all()
        if status:
            pedidos = [p for p in pedidos if p.get("status") in status]
        if tipo_pedido:
            pedidos = [p for p in pedidos if p.get("tipoPedido") == tipo_pedido]
        return pedidos

async def get_pedido_repository(store: KeyValueStore = Depends(get_kv_store)) -> PedidoRepository:
    """FastAPI dependency to get PedidoRepository instance."""
    return PedidoRepository(store)
