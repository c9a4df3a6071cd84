# pizzaria_admin/modules/pedidos/services.py

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from loguru import logger

from pizzaria_admin.modules.estoque.repository import EstoqueRepository
from pizzaria_admin.modules.produtos.repository import ProdutoRepository
from .models import PedidoCreateAPI, PedidoStatusUpdateAPI
from .repository import PedidoRepository, sort_by_criado_em

class PedidoService:
    """Lógica de negócio para Pedidos."""

    async def list_pedidos(
        self,
        pedido_repo: PedidoRepository,
        status_filter: Optional[str] = None,
        tipo_pedido: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        pedidos = await pedido_repo.list_by(
            status=[status_filter] if status_filter else None,
            tipo_pedido=tipo_pedido,
        )
        return sort_by_criado_em(pedidos, newest_first=True)

    async def get_pedido(self, pedido_id: str, pedido_repo: PedidoRepository) -> Dict[str, Any]:
        pedido = await pedido_repo.get_by_id(pedido_id)
        if pedido is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pedido not found")
        return pedido

    async def create_pedido(
        self,
        pedido_in: PedidoCreateAPI,
        pedido_repo: PedidoRepository,
        produto_repo: ProdutoRepository,
        estoque_repo: EstoqueRepository,
    ) -> Dict[str, Any]:
        """
        Grava o pedido como `pendente` e depois baixa do estoque os ingredientes
        de cada item. As duas etapas não são atômicas entre si.
        """
        data = pedido_in.model_dump(mode="json", by_alias=True)
        if data["valorTotal"] is None:
            data["valorTotal"] = sum(item.valor * item.quantidade for item in pedido_in.itens)
        data["status"] = "pendente"

        pedido = await pedido_repo.create(data)
        log = logger.bind(pedido_id=pedido["id"], tipo_pedido=pedido["tipoPedido"])
        log.info(f"Pedido created with {len(pedido_in.itens)} item(s), total {pedido['valorTotal']:.2f}")

        await self._consume_ingredients(pedido_in, produto_repo, estoque_repo)
        return pedido

    async def _consume_ingredients(
        self,
        pedido_in: PedidoCreateAPI,
        produto_repo: ProdutoRepository,
        estoque_repo: EstoqueRepository,
    ) -> None:
        """Para cada item: estoque -= ingrediente.quantidade * item.quantidade."""
        for item in pedido_in.itens:
            produto = await produto_repo.get_by_id(item.produto_id)
            if not produto or not produto.get("ingredientes"):
                logger.debug(f"No ingredient list for produto {item.produto_id}; stock untouched.")
                continue
            for ingrediente in produto["ingredientes"]:
                consumo = (ingrediente.get("quantidade") or 0) * item.quantidade
                updated = await estoque_repo.decrement_quantity(ingrediente.get("ingredienteId"), consumo)
                if updated is None:
                    logger.warning(f"Ingredient {ingrediente.get('ingredienteId')} of produto {item.produto_id} not in stock records.")

    async def update_status(
        self, pedido_id: str, status_in: PedidoStatusUpdateAPI, pedido_repo: PedidoRepository
    ) -> Dict[str, Any]:
        pedido = await pedido_repo.update(pedido_id, {"status": status_in.status})
        if pedido is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pedido not found")
        logger.bind(pedido_id=pedido_id).info(f"Pedido status -> {status_in.status}")
        return pedido

async def get_pedido_service() -> PedidoService:
    return PedidoService()
