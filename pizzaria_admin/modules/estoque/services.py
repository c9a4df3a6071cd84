# pizzaria_admin/modules/estoque/services.py

from typing import Any, Dict, List

from fastapi import HTTPException, status
from loguru import logger

from .models import EstoqueItemCreateAPI, QuantidadeUpdateAPI
from .repository import EstoqueRepository

def is_low_stock(item: Dict[str, Any]) -> bool:
    """Alerta quando a quantidade chega ao mínimo (mínimo ausente conta como 0)."""
    return (item.get("quantidade") or 0) <= (item.get("quantidadeMinima") or 0)

class EstoqueService:

    async def list_itens(self, estoque_repo: EstoqueRepository) -> List[Dict[str, Any]]:
        itens = await estoque_repo.list_all()
        return sorted(itens, key=lambda i: (i.get("nome") or "").lower())

    async def get_item(self, item_id: str, estoque_repo: EstoqueRepository) -> Dict[str, Any]:
        item = await estoque_repo.get_by_id(item_id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Estoque item not found")
        return item

    async def upsert_item(self, item_in: EstoqueItemCreateAPI, estoque_repo: EstoqueRepository) -> Dict[str, Any]:
        """Grava o item inteiro; com `id` informado substitui o registro existente."""
        item = await estoque_repo.create(item_in)
        if is_low_stock(item):
            logger.bind(estoque_id=item["id"]).warning(f"Estoque item '{item['nome']}' saved at or below its minimum.")
        return item

    async def set_quantidade(
        self, item_id: str, quantidade_in: QuantidadeUpdateAPI, estoque_repo: EstoqueRepository
    ) -> Dict[str, Any]:
        item = await estoque_repo.update(item_id, quantidade_in)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Estoque item not found")
        return item

async def get_estoque_service() -> EstoqueService:
    return EstoqueService()
